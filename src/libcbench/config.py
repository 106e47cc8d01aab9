"""Configuration constants for libcbench."""

# Version
__version__ = "0.1.0"

# benchstat
BENCHSTAT_COMMAND = "benchstat"
"""Default benchstat executable, resolved through PATH"""

BENCHSTAT_INSTALL_HINT = "go install golang.org/x/perf/cmd/benchstat@latest"
"""Shown when benchstat cannot be found"""

FD_PATH_TEMPLATE = "/dev/fd/{fd}"
"""How benchstat is pointed at an inherited pipe"""

# Benchmark naming
FUNCTION_SEPARATORS = ".:"
"""Characters separating namespace components in a study's Function field"""

NANOSECONDS_PER_SECOND = 1e9
"""Measurements are recorded in seconds, benchstat expects ns/op"""

# Export
EXPORT_SUFFIX = ".txt"
"""Extension of benchmark text files written by --export-dir"""
