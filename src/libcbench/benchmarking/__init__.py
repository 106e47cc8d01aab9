"""Benchmarking layer for libc study results.

This module provides functionality for:
- Deriving benchmark names from study configurations
- Merging studies from several files by study name
- Rendering results in the Go benchmark text format
"""

from libcbench.benchmarking.emitter import emit_result, format_benchmark_line
from libcbench.benchmarking.merger import ResultMerger, merge_files
from libcbench.benchmarking.naming import benchmark_names

__all__ = [
    "ResultMerger",
    "benchmark_names",
    "emit_result",
    "format_benchmark_line",
    "merge_files",
]
