"""
Input parsing for the drive motor calculator.

Form fields arrive as text (or loosely typed values from JavaScript). They are
parsed exactly once, here, into a typed DriveInputs record. Validation and
calculation never look at the raw strings again.

Anything that cannot be read as a finite number becomes None, so the
validator can report it without raising.
"""

from math import isfinite
from typing import Any, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_ALIGNMENT_DEG, TRUTHY_FLAG_VALUES

# Flat field -> value mapping as received from a form or any other host
RawInputs = Mapping[str, Any]


def parse_number(value: Any) -> Optional[float]:
    """
    Read a finite float from text or a number.

    Returns None for missing values, empty strings, booleans, text that is
    not a number, and infinities/NaN.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if isfinite(number) else None


def parse_flag(value: Any) -> bool:
    """Read a checkbox-style flag ("true", "on", "1", True, 1...)."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_FLAG_VALUES
    return bool(value)


class DriveInputs(BaseModel):
    """
    Parsed calculator inputs.

    Accepts both the form's camelCase keys (wheelDiameter) and snake_case
    keys (wheel_diameter). Numeric fields are None when the value was
    missing or not a finite number.
    """
    model_config = ConfigDict(frozen=True, extra='ignore', populate_by_name=True)

    mass: Optional[float] = None  # kg
    vmax: Optional[float] = None  # m/s
    wheel_diameter: Optional[float] = Field(
        default=None, validation_alias=AliasChoices('wheelDiameter', 'wheel_diameter')
    )  # mm
    accel_time: Optional[float] = Field(
        default=None, validation_alias=AliasChoices('accelTime', 'accel_time')
    )  # s
    num_motors: Optional[float] = Field(
        default=None, validation_alias=AliasChoices('numMotors', 'num_motors')
    )  # kept as float so fractional counts can be reported
    alignment: Optional[float] = DEFAULT_ALIGNMENT_DEG  # deg, omni only
    kiwi_drive: bool = Field(
        default=False, validation_alias=AliasChoices('kiwiDrive', 'kiwi_drive')
    )

    @field_validator('mass', 'vmax', 'wheel_diameter', 'accel_time', 'num_motors', mode='before')
    @classmethod
    def coerce_number(cls, v):
        return parse_number(v)

    @field_validator('alignment', mode='before')
    @classmethod
    def coerce_alignment(cls, v):
        # Blank alignment box means "not set", not "invalid"
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_ALIGNMENT_DEG
        return parse_number(v)

    @field_validator('kiwi_drive', mode='before')
    @classmethod
    def coerce_flag(cls, v):
        return parse_flag(v)


def parse_inputs(raw: Union[RawInputs, DriveInputs, None]) -> DriveInputs:
    """Parse a raw field mapping into DriveInputs (no-op if already parsed)."""
    if isinstance(raw, DriveInputs):
        return raw
    return DriveInputs.model_validate(dict(raw or {}))
