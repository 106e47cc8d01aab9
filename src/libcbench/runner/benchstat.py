"""benchstat invocation.

Each result is fed to benchstat through its own pipe. The read end is
inherited by benchstat and named on its command line as
'<study name>=/dev/fd/<n>'; a writer thread per result fills the write end.
"""

import os
import shutil
import subprocess
import threading
import time
from collections.abc import Iterable
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import IO

from libcbench.benchmarking.emitter import emit_result
from libcbench.config import BENCHSTAT_COMMAND, BENCHSTAT_INSTALL_HINT, FD_PATH_TEMPLATE
from libcbench.errors import BenchstatError
from libcbench.logging import get_logger
from libcbench.models.result import Result

logger = get_logger(__name__)


def split_arguments(args: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split command-line arguments into benchstat flags and input files.

    Anything starting with '-' is a flag for benchstat, everything else is a
    study file. Order within each group is preserved.

    Args:
        args: Raw arguments

    Returns:
        Tuple of (flags, files)
    """
    flags: list[str] = []
    files: list[str] = []
    for arg in args:
        if arg.startswith("-"):
            flags.append(arg)
        else:
            files.append(arg)
    return flags, files


@dataclass
class BenchstatRunResult:
    """Result of a benchstat run."""

    success: bool
    exit_code: int | None
    command: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0


class BenchstatRunner:
    """Runs benchstat over a set of results."""

    def __init__(self, executable: str = BENCHSTAT_COMMAND, flags: list[str] | None = None):
        """Initialize runner.

        Args:
            executable: benchstat executable name or path
            flags: Flags passed to benchstat before the inputs
        """
        self.executable = executable
        self.flags = list(flags or [])

    def resolve_executable(self) -> str:
        """Find the benchstat executable.

        Raises:
            BenchstatError: If benchstat is not installed
        """
        path = shutil.which(self.executable)
        if path is None:
            raise BenchstatError(
                f"{self.executable} not found in PATH (install with: {BENCHSTAT_INSTALL_HINT})"
            )
        return path

    def build_command(self, inputs: list[tuple[str, int]], executable: str | None = None) -> list[str]:
        """Build the benchstat command line.

        Args:
            inputs: (label, file descriptor) pairs, one per result
            executable: Resolved executable, defaults to the configured one

        Returns:
            Argument list
        """
        command = [executable or self.executable, *self.flags]
        for label, fd in inputs:
            command.append(f"{label}={FD_PATH_TEMPLATE.format(fd=fd)}")
        return command

    def run(
        self,
        results: list[Result],
        stdout: IO | int | None = None,
        stderr: IO | int | None = None,
    ) -> BenchstatRunResult:
        """Run benchstat with one input stream per result.

        Args:
            results: Results to compare, in column order
            stdout: Where benchstat writes its report (inherited if None)
            stderr: Where benchstat writes errors (inherited if None)

        Returns:
            BenchstatRunResult with the exit status

        Raises:
            BenchstatError: If benchstat is missing or cannot be started,
                or a result could not be written to its input
        """
        executable = self.resolve_executable()

        with ExitStack() as stack:
            # Descriptors still owned by this method, closed on the way out
            owned_fds: set[int] = set()
            stack.callback(_close_all, owned_fds)

            read_fds: list[int] = []
            write_fds: list[int] = []
            for _ in results:
                read_fd, write_fd = os.pipe()
                owned_fds.update((read_fd, write_fd))
                read_fds.append(read_fd)
                write_fds.append(write_fd)

            command = self.build_command(
                [(result.name, fd) for result, fd in zip(results, read_fds)],
                executable=executable,
            )
            logger.debug(f"Running: {' '.join(command)}")

            start_time = time.time()
            try:
                process = subprocess.Popen(command, pass_fds=read_fds, stdout=stdout, stderr=stderr)
            except OSError as e:
                raise BenchstatError(f"failed to start {self.executable}: {e}") from e

            try:
                # benchstat holds its own copies of the read ends
                for fd in read_fds:
                    owned_fds.discard(fd)
                    os.close(fd)

                threads = []
                # One slot per writer, filled if its emit fails
                failures: list[Exception | None] = [None] * len(results)
                for index, (result, write_fd) in enumerate(zip(results, write_fds)):
                    sink = os.fdopen(write_fd, "w", encoding="utf-8", errors="replace")
                    # emit_result closes the sink
                    owned_fds.discard(write_fd)
                    thread = threading.Thread(
                        target=_emit_into_slot,
                        args=(result, sink, failures, index),
                        name=f"emit-{result.name}",
                        daemon=True,
                    )
                    thread.start()
                    threads.append(thread)

                exit_code = process.wait()
            except BaseException:
                process.kill()
                process.wait()
                raise

            for thread in threads:
                thread.join()

        for result, failure in zip(results, failures):
            if failure is not None:
                raise BenchstatError(
                    f"failed to write benchmarks for '{result.name}': {failure}"
                ) from failure

        duration = time.time() - start_time
        logger.debug(f"benchstat exited with status {exit_code} after {duration:.2f}s")

        return BenchstatRunResult(
            success=exit_code == 0,
            exit_code=exit_code,
            command=command,
            duration_seconds=duration,
        )


def _emit_into_slot(result: Result, sink, failures: list[Exception | None], index: int) -> None:
    """Run emit_result, keeping its exception for the main thread."""
    try:
        emit_result(result, sink)
    except Exception as e:
        failures[index] = e


def _close_all(fds: set[int]) -> None:
    """Close file descriptors left open after a failure."""
    for fd in fds:
        try:
            os.close(fd)
        except OSError:
            pass
