"""Merged benchmark result models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Benchmark:
    """A single named measurement, as benchstat sees it."""

    name: str
    """Benchmark name without the 'Benchmark' prefix (e.g. 'memcpy/Google_A')"""

    value: float
    """Measurement in nanoseconds"""


@dataclass
class Result:
    """All benchmarks sharing one study name across the input files."""

    name: str
    """Study name, used as the benchstat column label"""

    benchmarks: list[Benchmark] = field(default_factory=list)
    """Benchmarks in file order, then measurement order"""

    def add_benchmark(self, name: str, value: float) -> None:
        """Append a benchmark to the result.

        Args:
            name: Benchmark name
            value: Measurement in nanoseconds
        """
        self.benchmarks.append(Benchmark(name=name, value=value))