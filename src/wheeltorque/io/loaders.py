"""
JSON input/output for physical constants.

Lets a user size motors with their own gravity, friction, efficiency or
safety margin by pointing the calculator at a small JSON file:

    {"g": 9.81, "mu": 0.06, "eta": 0.75, "safetyFactor": 2.0}

Uses Pydantic for validation; omitted keys keep their defaults.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..calculator.constants import PhysicalConstants

logger = logging.getLogger(__name__)


class ConstantsError(ValueError):
    """Raised when a constants file cannot be read or holds invalid values."""
    pass


def load_constants_json(filepath: Union[str, Path]) -> PhysicalConstants:
    """
    Load physical constants from a JSON file.

    Args:
        filepath: Path to JSON file

    Returns:
        PhysicalConstants

    Raises:
        ConstantsError: If the file is missing, not JSON, or a value is out
            of range (e.g. eta > 1, safetyFactor < 1)
    """
    filepath = Path(filepath)

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConstantsError(f"Constants file not found: {filepath}")
    except OSError as e:
        raise ConstantsError(f"Cannot read constants file {filepath}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConstantsError(f"Invalid JSON in {filepath}: {e}")
    except UnicodeDecodeError as e:
        raise ConstantsError(f"Constants file {filepath} is not UTF-8 text: {e}") from e

    if not isinstance(data, dict):
        raise ConstantsError(f"{filepath}: root must be a JSON object")

    try:
        constants = PhysicalConstants.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected constants file {filepath}")
        raise ConstantsError(f"Invalid constants in {filepath}: {e}") from e

    logger.debug(f"Loaded constants from {filepath}: {constants!r}")
    return constants


def save_constants_json(constants: PhysicalConstants, filepath: Union[str, Path]) -> None:
    """
    Save physical constants to a JSON file (camelCase keys).

    Args:
        constants: PhysicalConstants to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    with open(filepath, 'w') as f:
        json.dump(constants.model_dump(by_alias=True), f, indent=2)
