"""Diagnostics logging for libcbench.

Everything goes to the stderr console; stdout carries benchstat's report.
A normal run logs nothing at the default WARNING level, so a failing run
leaves only the one-line error on stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from libcbench.console import console as stderr_console

LOGGER_NAME = "libcbench"
DEFAULT_LEVEL = logging.WARNING


def resolve_level(verbose: bool = False, quiet: bool = False, log_level: str | None = None) -> int:
    """Pick the level from the command-line flags.

    An explicit level wins, then --verbose (DEBUG), then --quiet (ERROR).
    """
    if log_level:
        return logging.getLevelNamesMapping()[log_level.upper()]
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return DEFAULT_LEVEL


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_level: str | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Route the package logger to a Rich handler.

    Calling it again replaces the previous handler.

    Args:
        verbose: Log DEBUG and above
        quiet: Log ERROR and above
        log_level: Level name, overrides verbose and quiet
        console: Console to log to, the shared stderr console by default

    Returns:
        The package logger
    """
    level = resolve_level(verbose, quiet, log_level)

    handler = RichHandler(
        console=console or stderr_console,
        level=level,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the package namespace, for `__name__` or a bare name."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
