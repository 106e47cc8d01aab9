"""Command-line interface for libcbench."""

from pathlib import Path

import click

from libcbench.benchmarking.emitter import export_results
from libcbench.benchmarking.merger import merge_files
from libcbench.config import BENCHSTAT_COMMAND, __version__
from libcbench.console import error, success
from libcbench.errors import BenchstatError, LibcBenchError
from libcbench.logging import get_logger, setup_logging
from libcbench.runner.benchstat import BenchstatRunner, split_arguments

logger = get_logger(__name__)


class LibcBenchCLI:
    """Command-line interface orchestrator for libcbench."""

    def __init__(self, benchstat_command: str = BENCHSTAT_COMMAND):
        """Initialize CLI orchestrator.

        Args:
            benchstat_command: benchstat executable name or path
        """
        self.benchstat_command = benchstat_command

    def export(self, files: list[str], export_dir: Path) -> int:
        """Write benchmark text files instead of running benchstat."""
        results = merge_files(files)
        for path in export_results(results, export_dir):
            success(f"Wrote {path}")
        return 0

    def compare(self, flags: list[str], files: list[str]) -> int:
        """Merge study files and compare them with benchstat.

        Raises:
            LibcBenchError: On any parse or benchstat failure
        """
        results = merge_files(files)
        logger.debug(
            f"Comparing {len(results)} results: "
            + ", ".join(f"{r.name} ({len(r.benchmarks)} benchmarks)" for r in results)
        )

        runner = BenchstatRunner(executable=self.benchstat_command, flags=flags)
        run_result = runner.run(results)

        if not run_result.success:
            raise BenchstatError(
                f"{self.benchstat_command} exited with status {run_result.exit_code}",
                exit_code=run_result.exit_code,
            )
        return 0

    def execute(self, args: list[str], export_dir: Path | None = None) -> int:
        """Execute a comparison.

        Args:
            args: Raw arguments: benchstat flags and study files, in any order
            export_dir: If set, write benchmark text files here and skip benchstat

        Returns:
            Exit code (0 for success, 1 for error)
        """
        flags, files = split_arguments(args)
        logger.debug(f"Files: {files}")
        logger.debug(f"benchstat flags: {flags}")

        try:
            if export_dir is not None:
                return self.export(files, export_dir)
            return self.compare(flags, files)

        except KeyboardInterrupt:
            error("Interrupted by user")
            return 1
        except LibcBenchError as e:
            error(str(e))
            logger.debug("Traceback:", exc_info=True)
            return 1
        except Exception as e:
            error(f"Error: {e}")
            logger.debug("Traceback:", exc_info=True)
            return 1


@click.command(
    context_settings={"ignore_unknown_options": True},
    epilog=(
        "Arguments starting with '-' are passed to benchstat, e.g. "
        "'libcbench -alpha=0.01 base.json new.json'; 'libcbench -h' "
        "shows benchstat's own flags. Files sharing a StudyName are merged "
        "into one column."
    ),
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable verbose output (DEBUG level)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Show only errors",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Explicit log level (overrides --verbose/--quiet)",
)
@click.option(
    "--benchstat",
    "benchstat_command",
    default=BENCHSTAT_COMMAND,
    show_default=True,
    metavar="PATH",
    help="benchstat executable",
)
@click.option(
    "--export-dir",
    type=click.Path(file_okay=False, path_type=Path),  # type: ignore[type-var]
    default=None,
    help="Write benchmark text per study to this directory instead of running benchstat",
)
@click.version_option(__version__, "--version", prog_name="libcbench")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(verbose, quiet, log_level, benchstat_command, export_dir, args):
    """Compare LLVM libc benchmark results using benchstat.

    \b
    Usage:
        go install golang.org/x/perf/cmd/benchstat@latest
        libcbench [benchstat flags] baseline.json experiment.json
    """
    if sum([verbose, quiet, log_level is not None]) > 1:
        raise click.UsageError("--verbose, --quiet, and --log-level are mutually exclusive")

    setup_logging(verbose=verbose, quiet=quiet, log_level=log_level)

    if not args:
        raise click.UsageError("no study files given")

    _, files = split_arguments(args)
    if export_dir is not None and not files:
        raise click.UsageError("--export-dir needs at least one study file")

    libcbench_cli = LibcBenchCLI(benchstat_command=benchstat_command)
    exit_code = libcbench_cli.execute(list(args), export_dir=export_dir)

    raise SystemExit(exit_code)


def main():
    """Entry point for libcbench command."""
    cli()


if __name__ == "__main__":
    main()
