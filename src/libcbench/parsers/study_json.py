"""Parser for libc benchmark study JSON files."""

import json
from pathlib import Path

from libcbench.errors import StudyDecodeError
from libcbench.logging import get_logger
from libcbench.models.study import Study

logger = get_logger(__name__)


def parse_study(text: str) -> Study:
    """Decode a study from JSON text.

    Args:
        text: JSON document

    Returns:
        Decoded Study

    Raises:
        ValueError: If the text is not valid JSON or holds a non-finite number
        TypeError: If the document does not match the study schema
    """
    return Study.from_dict(json.loads(text, parse_constant=_reject_constant))


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid number {name}")


def load_study(path: Path | str) -> Study:
    """Load a study from a JSON file.

    Args:
        path: Path to the study file

    Returns:
        Decoded Study

    Raises:
        StudyDecodeError: If the file cannot be read or decoded
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StudyDecodeError(path, e.strerror or e) from e
    except UnicodeDecodeError as e:
        raise StudyDecodeError(path, e) from e

    try:
        study = parse_study(text)
    except (ValueError, TypeError) as e:
        raise StudyDecodeError(path, e) from e

    logger.debug(
        f"Loaded {path}: study '{study.study_name}', "
        f"function '{study.configuration.function}', "
        f"{len(study.measurements)} measurements"
    )
    return study
