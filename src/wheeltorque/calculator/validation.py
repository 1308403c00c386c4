"""
Drive Motor Calculator - Input Validation

Checks calculator inputs before any physics is attempted. Every field is
checked independently so a form can show all of its errors at once.
Errors are returned as data; nothing here raises for bad user input.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from ..enums import WheelType
from .constants import (
    ALIGNMENT_FIELD,
    CODE_KIWI_MOTORS,
    CODE_NUMBER,
    CODE_POSITIVE_INTEGER,
    CODE_POSITIVE_NUMBER,
    KIWI_REQUIRED_MOTORS,
    MOTOR_COUNT_FIELD,
    MSG_KIWI_MOTORS,
    MSG_NUMBER,
    MSG_POSITIVE_INTEGER,
    MSG_POSITIVE_NUMBER,
    POSITIVE_NUMBER_FIELDS,
)
from .inputs import DriveInputs, RawInputs, parse_inputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationMessage:
    """A single field error"""
    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Complete validation result. At most one message per field."""
    messages: Tuple[ValidationMessage, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.messages

    @property
    def errors(self) -> Dict[str, str]:
        """Field name -> error message, in field order."""
        return {m.field: m.message for m in self.messages}

    def get(self, field: str) -> Optional[ValidationMessage]:
        for m in self.messages:
            if m.field == field:
                return m
        return None


# Returned for every clean input set; callers may test `result is VALID`
VALID = ValidationResult()


def _is_positive(value: Optional[float]) -> bool:
    return value is not None and value > 0


def _is_positive_integer(value: Optional[float]) -> bool:
    return value is not None and value > 0 and value.is_integer()


def _truncated(value: Optional[float]) -> Optional[int]:
    """Integer part of a motor count, as a form's integer parse would read it."""
    return int(value) if value is not None else None


def validate_inputs(
    raw: Union[RawInputs, DriveInputs],
    wheel_type: Union[WheelType, str] = WheelType.STANDARD,
) -> ValidationResult:
    """
    Validate calculator inputs for the given wheel layout.

    Rules:
    - mass, vmax, wheelDiameter, accelTime: positive number
    - numMotors: positive integer
    - omni/kiwi: alignment, if given, must be a number
    - omni/kiwi with Kiwi drive: numMotors must be 3. This runs after the
      integer check and replaces its message when both fail.

    Args:
        raw: Raw field mapping (text values) or already parsed DriveInputs
        wheel_type: Wheel layout (WheelType or its string value)

    Returns:
        VALID if every field passed, otherwise a ValidationResult with one
        message per failed field
    """
    inputs = parse_inputs(raw)
    wheel_type = WheelType.from_value(wheel_type)

    errors: Dict[str, ValidationMessage] = {}

    for field, value in zip(
        POSITIVE_NUMBER_FIELDS,
        (inputs.mass, inputs.vmax, inputs.wheel_diameter, inputs.accel_time),
    ):
        if not _is_positive(value):
            errors[field] = ValidationMessage(field, CODE_POSITIVE_NUMBER, MSG_POSITIVE_NUMBER)

    if not _is_positive_integer(inputs.num_motors):
        errors[MOTOR_COUNT_FIELD] = ValidationMessage(
            MOTOR_COUNT_FIELD, CODE_POSITIVE_INTEGER, MSG_POSITIVE_INTEGER
        )

    if wheel_type.is_omni:
        if inputs.alignment is None:
            errors[ALIGNMENT_FIELD] = ValidationMessage(ALIGNMENT_FIELD, CODE_NUMBER, MSG_NUMBER)

        kiwi_drive = inputs.kiwi_drive or wheel_type is WheelType.KIWI
        if kiwi_drive and _truncated(inputs.num_motors) != KIWI_REQUIRED_MOTORS:
            errors[MOTOR_COUNT_FIELD] = ValidationMessage(
                MOTOR_COUNT_FIELD, CODE_KIWI_MOTORS, MSG_KIWI_MOTORS
            )

    if not errors:
        return VALID

    logger.debug(f"Rejected {wheel_type.value} inputs: {sorted(errors)}")
    return ValidationResult(messages=tuple(errors.values()))
