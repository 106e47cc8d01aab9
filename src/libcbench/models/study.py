"""Benchmark study models.

A study is one JSON document written by the LLVM libc benchmarking harness.
Field names follow the harness output; keys missing from a document take
zero values, keys present with the wrong JSON type are rejected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


def _get(data: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    """Fetch a key from a JSON object, checking its type."""
    if key not in data or data[key] is None:
        return default

    value = data[key]
    # bool is an int subclass
    if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
        raise TypeError(f"{key}: unexpected type {type(value).__name__}")
    return value


@dataclass(frozen=True)
class StudyConfiguration:
    """Benchmark configuration recorded with a study."""

    function: str = ""
    """Fully qualified function identifier (e.g. 'libc::memcpy')"""

    is_sweep_mode: bool = False
    """Whether measurements sweep increasing sizes instead of a distribution"""

    num_trials: int = 0
    """Consecutive measurements per sweep size"""

    size_distribution_name: str = ""
    """Size distribution label, usually prefixed by the function name"""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StudyConfiguration:
        """Create a StudyConfiguration from the 'Configuration' JSON object."""
        if not isinstance(data, dict):
            raise TypeError(f"Configuration: expected object, got {type(data).__name__}")

        return cls(
            function=_get(data, "Function", str, ""),
            is_sweep_mode=_get(data, "IsSweepMode", bool, False),
            num_trials=_get(data, "NumTrials", int, 0),
            size_distribution_name=_get(data, "SizeDistributionName", str, ""),
        )


@dataclass(frozen=True)
class Study:
    """One decoded benchmark run."""

    study_name: str
    configuration: StudyConfiguration = field(default_factory=StudyConfiguration)
    measurements: tuple[float, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Study:
        """Create a Study from a decoded JSON document.

        Raises:
            TypeError: If the document or one of its fields has the wrong type
            ValueError: If a measurement is not a finite number
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected JSON object, got {type(data).__name__}")

        configuration = data.get("Configuration")
        raw_measurements = _get(data, "Measurements", list, [])

        measurements = []
        for index, value in enumerate(raw_measurements):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"Measurements[{index}]: expected number, got {type(value).__name__}")
            try:
                number = float(value)
            except OverflowError:
                number = math.inf
            if not math.isfinite(number):
                raise ValueError(f"Measurements[{index}]: {value!r} is not a finite number")
            measurements.append(number)

        return cls(
            study_name=_get(data, "StudyName", str, ""),
            configuration=(
                StudyConfiguration.from_dict(configuration)
                if configuration is not None
                else StudyConfiguration()
            ),
            measurements=tuple(measurements),
        )
