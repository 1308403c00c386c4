"""
Drive Motor Calculator - torque and speed sizing for mobile robot drives.

This module provides validation and calculation functions for standard,
Mecanum, Omni and Kiwi-drive wheel layouts. Calculations return
MotorRequirements models for type safety.

Example:
    >>> from wheeltorque.calculator import evaluate, WheelType
    >>>
    >>> raw = {"mass": "10", "vmax": "1", "wheelDiameter": "100",
    ...        "accelTime": "2", "numMotors": "4"}
    >>> validation, result = evaluate(raw, WheelType.MECANUM)
    >>> validation.valid
    True
    >>> round(result.final_torque, 4)
    0.2091
"""

from .constants import (
    # Physical constants
    PhysicalConstants,
    DEFAULT_CONSTANTS,
)

from .inputs import (
    # Input parsing
    RawInputs,
    DriveInputs,
    parse_inputs,
    parse_number,
    parse_flag,
)

from .validation import (
    # Validation
    validate_inputs,
    ValidationMessage,
    ValidationResult,
    VALID,
)

from .core import (
    # Calculation
    MotorRequirements,
    wheel_rpm,
    calculate_standard,
    calculate_omni,
    calculate,
    evaluate,
)

from ..enums import (
    # Type-safe enums
    WheelType,
)

from .output import (
    # Output formatters
    errors_to_dict,
    to_json,
    to_markdown,
    to_summary,
)


__all__ = [
    # Constants
    "PhysicalConstants",
    "DEFAULT_CONSTANTS",

    # Enums (type-safe)
    "WheelType",

    # Inputs
    "RawInputs",
    "DriveInputs",
    "parse_inputs",
    "parse_number",
    "parse_flag",

    # Validation
    "validate_inputs",
    "ValidationMessage",
    "ValidationResult",
    "VALID",

    # Calculation
    "MotorRequirements",
    "wheel_rpm",
    "calculate_standard",
    "calculate_omni",
    "calculate",
    "evaluate",

    # Output formatters
    "errors_to_dict",
    "to_json",
    "to_markdown",
    "to_summary",
]
