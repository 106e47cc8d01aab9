"""Shared Rich console for libcbench diagnostics.

Bound to stderr: stdout belongs to benchstat.
"""

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


def error(message: str, console: Console = console) -> None:
    """Print an error message in red on a single line."""
    console.print(f"[red bold]{escape(message)}[/red bold]", soft_wrap=True)


def success(message: str, console: Console = console) -> None:
    """Print a success message in green."""
    console.print(f"[green]{escape(message)}[/green]", soft_wrap=True)
