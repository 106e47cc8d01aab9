"""Exceptions raised by libcbench.

Every error is fatal: the CLI reports the message on one line and exits 1.
"""

from pathlib import Path


class LibcBenchError(Exception):
    """Base class for libcbench errors."""


class InvalidConfigurationError(LibcBenchError):
    """A study cannot be turned into benchmarks (bad NumTrials, overflowing value)."""


class StudyDecodeError(LibcBenchError):
    """A study file could not be read or does not match the study schema."""

    def __init__(self, path: Path | str, cause: Exception | str):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"failed to parse {path}: {cause}")


class BenchstatError(LibcBenchError):
    """benchstat could not be run on the results or exited with a failure status."""

    def __init__(self, message: str, exit_code: int | None = None):
        self.exit_code = exit_code
        super().__init__(message)


class ExportError(LibcBenchError):
    """Results cannot be exported without overwriting each other."""
