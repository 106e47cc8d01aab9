"""libcbench: Compare LLVM libc benchmark results using benchstat."""

from libcbench.benchmarking.merger import ResultMerger, merge_files
from libcbench.config import __version__
from libcbench.logging import get_logger
from libcbench.models.result import Benchmark, Result
from libcbench.models.study import Study, StudyConfiguration
from libcbench.parsers.study_json import load_study

__all__ = [
    "__version__",
    "Benchmark",
    "Result",
    "ResultMerger",
    "Study",
    "StudyConfiguration",
    "get_logger",
    "load_study",
    "merge_files",
]
