"""Merging of study files into per-study-name results."""

import math
from collections.abc import Iterable
from pathlib import Path

from libcbench.benchmarking.naming import benchmark_names
from libcbench.config import NANOSECONDS_PER_SECOND
from libcbench.errors import InvalidConfigurationError, StudyDecodeError
from libcbench.logging import get_logger
from libcbench.models.result import Result
from libcbench.models.study import Study
from libcbench.parsers.study_json import load_study

logger = get_logger(__name__)


class ResultMerger:
    """Groups studies by study name into ordered results.

    Results are kept in the order their study name was first seen; a study
    whose name was already seen extends the existing result.

    Usage:
        merger = ResultMerger()
        for path in paths:
            merger.add_file(path)
        results = merger.results
    """

    def __init__(self):
        self._results: dict[str, Result] = {}

    @property
    def results(self) -> list[Result]:
        """Merged results in first-seen order."""
        return list(self._results.values())

    def add_study(self, study: Study) -> Result:
        """Append a study's benchmarks to the result for its study name.

        Args:
            study: Decoded study

        Returns:
            The Result the study was merged into

        Raises:
            InvalidConfigurationError: If benchmark names cannot be derived or
                a value overflows when converted to nanoseconds
        """
        # Derive names before touching the result so a bad study adds nothing
        names = benchmark_names(study.configuration, len(study.measurements))
        values = [seconds * NANOSECONDS_PER_SECOND for seconds in study.measurements]
        for index, value in enumerate(values):
            if not math.isfinite(value):
                raise InvalidConfigurationError(
                    f"Measurements[{index}]: {study.measurements[index]!r} s overflows in nanoseconds"
                )

        result = self._results.get(study.study_name)
        if result is None:
            result = Result(name=study.study_name)
            self._results[study.study_name] = result
            logger.debug(f"New result: {study.study_name}")

        for name, value in zip(names, values):
            result.add_benchmark(name, value)

        return result

    def add_file(self, path: Path | str) -> Result:
        """Load a study file and merge it.

        Raises:
            StudyDecodeError: If the file cannot be read, decoded or labelled
        """
        study = load_study(path)
        try:
            return self.add_study(study)
        except InvalidConfigurationError as e:
            raise StudyDecodeError(path, e) from e


def merge_files(paths: Iterable[Path | str]) -> list[Result]:
    """Merge study files, in the given order, into results.

    Args:
        paths: Study file paths

    Returns:
        Results in first-seen study name order

    Raises:
        StudyDecodeError: On the first file that fails
    """
    merger = ResultMerger()
    for path in paths:
        merger.add_file(path)
    return merger.results
