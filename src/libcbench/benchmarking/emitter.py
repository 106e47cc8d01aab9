"""Rendering of results in the Go benchmark text format.

Each benchmark becomes one line that benchstat understands:

    Benchmarkmemcpy/Google_A 1 3.91 ns/op
"""

from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from libcbench.config import EXPORT_SUFFIX
from libcbench.errors import ExportError
from libcbench.logging import get_logger
from libcbench.models.result import Benchmark, Result

logger = get_logger(__name__)


def format_value(value: float) -> str:
    """Format a measurement with the shortest round-trip representation.

    Integral values drop the trailing '.0' (3.0 -> '3').
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_benchmark_line(benchmark: Benchmark) -> str:
    """Render a benchmark as a single benchmark text line (no newline)."""
    return f"Benchmark{benchmark.name} 1 {format_value(benchmark.value)} ns/op"


def iter_lines(result: Result) -> Iterator[str]:
    """Yield newline-terminated benchmark lines of a result, in order."""
    for benchmark in result.benchmarks:
        yield format_benchmark_line(benchmark) + "\n"


def emit_result(result: Result, sink: TextIO) -> None:
    """Write a result's benchmark lines to a sink, then close it.

    The sink is closed on every exit path. If the reader has gone away the
    remaining lines are dropped.

    Args:
        result: Result to render
        sink: Writable text stream, typically the write end of a pipe
    """
    try:
        for line in iter_lines(result):
            sink.write(line)
        sink.flush()
    except BrokenPipeError:
        logger.debug(f"Reader closed the stream for '{result.name}', dropping remaining lines")
    finally:
        try:
            sink.close()
        except BrokenPipeError:
            # close() flushes whatever is still buffered
            pass


def export_filename(result: Result) -> str:
    """File name used when exporting a result."""
    name = result.name.replace("/", "_").replace("\\", "_") or "_"
    return f"{name}{EXPORT_SUFFIX}"


def write_result_file(result: Result, directory: Path) -> Path:
    """Write a result's benchmark text to a file in `directory`.

    Args:
        result: Result to render
        directory: Output directory, created if missing

    Returns:
        Path to the written file
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(result)
    with open(path, "w", encoding="utf-8", errors="replace") as f:
        f.writelines(iter_lines(result))
    logger.debug(f"Wrote {len(result.benchmarks)} benchmarks to {path}")
    return path


def export_results(results: list[Result], directory: Path) -> list[Path]:
    """Write every result to its own file in `directory`.

    Nothing is written if two study names map to the same file name.

    Raises:
        ExportError: If file names collide
    """
    owners: dict[str, str] = {}
    for result in results:
        filename = export_filename(result)
        if filename in owners:
            raise ExportError(
                f"studies '{owners[filename]}' and '{result.name}' would both be exported to {filename}"
            )
        owners[filename] = result.name

    return [write_result_file(result, directory) for result in results]
