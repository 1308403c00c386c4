"""
Engineering constants for drive motor calculations.

This module centralizes all numerical constants and user-facing strings used
by the calculator and validation modules. Each physical constant is documented
with its assumption.

MODIFICATION GUIDELINES:
- Physical defaults may be adjusted, but pass alternates through
  PhysicalConstants rather than editing these values at runtime
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_MM, _DEG, _M_S2)

Constants are grouped by category:
- Physics: gravity, friction, efficiency and safety margin defaults
- Units: conversion factors
- Drive geometry: Kiwi drive motor counts
- Inputs: field names and validation messages
"""

from math import isfinite
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Physics defaults
# =============================================================================

# Standard gravity, rounded as used throughout the original sizing sheets
GRAVITY_M_S2: float = 9.8

# Kinetic friction coefficient for small wheels on indoor floors
FRICTION_COEFFICIENT_DEFAULT: float = 0.04

# Drivetrain efficiency (motor gearbox + wheel coupling), 0 < eta <= 1
DRIVETRAIN_EFFICIENCY_DEFAULT: float = 0.8

# Multiplier applied to the per-motor torque, >= 1
SAFETY_FACTOR_DEFAULT: float = 1.5

# =============================================================================
# Units
# =============================================================================

MM_PER_M: float = 1000.0
SECONDS_PER_MINUTE: float = 60.0

# =============================================================================
# Drive geometry
# =============================================================================

# A Kiwi drive has exactly three omni wheels at 120°
KIWI_REQUIRED_MOTORS: int = 3

# Along any direction of travel only two Kiwi wheels deliver useful torque
KIWI_EFFECTIVE_MOTORS: int = 2

# Alignment used when an omni layout omits the roller angle
DEFAULT_ALIGNMENT_DEG: float = 0.0

# =============================================================================
# Inputs
# =============================================================================

# Required numeric fields, in display order (external camelCase names)
POSITIVE_NUMBER_FIELDS: Tuple[str, ...] = ("mass", "vmax", "wheelDiameter", "accelTime")
MOTOR_COUNT_FIELD: str = "numMotors"
ALIGNMENT_FIELD: str = "alignment"

# Text values accepted as "on" for boolean-like flags (compared lower-cased)
TRUTHY_FLAG_VALUES: Tuple[str, ...] = ("1", "true", "yes", "on", "checked")

MSG_POSITIVE_NUMBER: str = "Must be a positive number"
MSG_POSITIVE_INTEGER: str = "Must be a positive integer"
MSG_KIWI_MOTORS: str = "Kiwi Drive requires exactly 3 motors"
MSG_NUMBER: str = "Must be a number"

CODE_POSITIVE_NUMBER: str = "NOT_POSITIVE_NUMBER"
CODE_POSITIVE_INTEGER: str = "NOT_POSITIVE_INTEGER"
CODE_KIWI_MOTORS: str = "KIWI_MOTOR_COUNT"
CODE_NUMBER: str = "NOT_A_NUMBER"


class PhysicalConstants(BaseModel):
    """Immutable set of physical constants used by the calculator.

    Construct an alternate instance to test with different physics; the
    default instance is shared read-only across all calculations.
    """
    model_config = ConfigDict(frozen=True, extra='forbid', populate_by_name=True)

    g: float = Field(default=GRAVITY_M_S2, gt=0)
    mu: float = Field(default=FRICTION_COEFFICIENT_DEFAULT, ge=0)
    eta: float = Field(default=DRIVETRAIN_EFFICIENCY_DEFAULT, gt=0, le=1)
    safety_factor: float = Field(default=SAFETY_FACTOR_DEFAULT, ge=1, alias="safetyFactor")

    @field_validator('g', 'mu', 'eta', 'safety_factor')
    @classmethod
    def must_be_finite(cls, v):
        if not isfinite(v):
            raise ValueError("must be a finite number")
        return v


DEFAULT_CONSTANTS = PhysicalConstants()
