"""Benchmark name derivation.

A benchmark name is '<short function name>/<type label>'. The type label is
either the study's size distribution name or, in sweep mode, the 1-based
index of the trial group a measurement belongs to:

    memcpy/Google_A      (distribution 'memcpy Google A')
    memcpy/3             (third sweep size)
"""

from collections.abc import Iterator

from libcbench.config import FUNCTION_SEPARATORS
from libcbench.errors import InvalidConfigurationError
from libcbench.models.study import StudyConfiguration


def short_function_name(function: str, separators: str = FUNCTION_SEPARATORS) -> str:
    """Strip namespace components from a function identifier.

    Args:
        function: Function identifier (e.g. 'llvm.memcpy', 'libc::memmove')
        separators: Characters that separate namespace components

    Returns:
        Text after the last separator, or the identifier unchanged
    """
    pos = max(function.rfind(sep) for sep in separators) if separators else -1
    if pos == -1:
        return function
    return function[pos + 1 :]


def distribution_label(size_distribution_name: str, short_name: str) -> str:
    """Derive a type label from a size distribution name.

    'memcpy Google A' with short name 'memcpy' becomes 'Google_A'.
    """
    label = size_distribution_name.removeprefix(short_name)
    return "_".join(label.split())


def sweep_labels(count: int, num_trials: int) -> Iterator[str]:
    """Yield sweep group labels for `count` consecutive measurements.

    Every `num_trials` measurements share a label; labels count up from '1'.
    A trailing partial group gets the next label.

    Raises:
        InvalidConfigurationError: If num_trials is not positive
    """
    if num_trials <= 0:
        raise InvalidConfigurationError(f"sweep mode requires a positive NumTrials, got {num_trials}")

    size = 0
    for i in range(count):
        if i % num_trials == 0:
            size += 1
        yield str(size)


def type_labels(configuration: StudyConfiguration, count: int) -> Iterator[str]:
    """Yield the type label of each of `count` measurements."""
    if configuration.is_sweep_mode:
        return sweep_labels(count, configuration.num_trials)

    short_name = short_function_name(configuration.function)
    label = distribution_label(configuration.size_distribution_name, short_name)
    return iter([label] * count)


def benchmark_names(configuration: StudyConfiguration, count: int) -> list[str]:
    """Derive benchmark names for `count` measurements of a study.

    Args:
        configuration: Study configuration
        count: Number of measurements

    Returns:
        One name per measurement, in measurement order

    Raises:
        InvalidConfigurationError: If the configuration cannot be labelled
    """
    short_name = short_function_name(configuration.function)
    return [f"{short_name}/{label}" for label in type_labels(configuration, count)]
