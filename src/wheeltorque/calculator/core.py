"""
Drive Motor Calculator - Core Calculations

Pure functions that size drive motors for standard, Mecanum, Omni and
Kiwi-drive robots. Returns typed MotorRequirements models.

Model assumptions:
- No-slip rolling, motor coupled 1:1 to the wheel (motor RPM = wheel RPM)
- Constant acceleration from rest to vmax over accelTime
- Load shared evenly across the motors that are pushing
- Omni rollers project the travel speed onto their rolling direction by
  cos(alignment)

Inputs must already have passed validate_inputs(); nothing is re-checked
here.
"""

import logging
from math import cos, pi, radians
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..enums import WheelType
from .constants import (
    DEFAULT_CONSTANTS,
    KIWI_EFFECTIVE_MOTORS,
    MM_PER_M,
    SECONDS_PER_MINUTE,
    PhysicalConstants,
)
from .inputs import DriveInputs, RawInputs, parse_inputs
from .validation import ValidationResult, validate_inputs

logger = logging.getLogger(__name__)


class MotorRequirements(BaseModel):
    """Derived motor requirements, SI units unless noted.

    Serialises with camelCase names (frictionForce, wheelRadius, ...) via
    model_dump(by_alias=True).
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    rpm: float                  # motor shaft speed, rev/min
    friction_force: float       # N
    acceleration_force: float   # N
    total_force: float          # N
    wheel_radius: float         # m
    total_torque: float         # N·m, all wheels together
    torque_per_motor: float     # N·m, before safety factor
    final_torque: float         # N·m, required rated torque per motor
    wheel_type: WheelType

    # Omni / Kiwi only
    alignment_angle: Optional[float] = None  # deg, as given
    cos_theta: Optional[float] = None
    kiwi_drive: Optional[bool] = None
    effective_motors: Optional[int] = None


def wheel_rpm(speed_m_s: float, wheel_diameter_m: float) -> float:
    """Wheel speed (rev/min) for a rolling speed, assuming no slip."""
    return (speed_m_s * SECONDS_PER_MINUTE) / (pi * wheel_diameter_m)


def _drive_loads(
    inputs: DriveInputs,
    speed_m_s: float,
    motors: int,
    constants: PhysicalConstants,
) -> dict:
    """Forces and torques shared by every layout.

    speed_m_s is vmax already projected onto the wheel's rolling direction.
    """
    wheel_diameter_m = inputs.wheel_diameter / MM_PER_M
    radius = wheel_diameter_m / 2

    rpm = wheel_rpm(speed_m_s, wheel_diameter_m)

    friction_force = inputs.mass * constants.mu * constants.g
    acceleration_force = inputs.mass * (speed_m_s / inputs.accel_time)
    total_force = friction_force + acceleration_force

    total_torque = total_force * radius
    torque_per_motor = total_torque / (motors * constants.eta)
    final_torque = constants.safety_factor * torque_per_motor

    return {
        "rpm": rpm,
        "friction_force": friction_force,
        "acceleration_force": acceleration_force,
        "total_force": total_force,
        "wheel_radius": radius,
        "total_torque": total_torque,
        "torque_per_motor": torque_per_motor,
        "final_torque": final_torque,
    }


def calculate_standard(
    raw: Union[RawInputs, DriveInputs],
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
    wheel_type: WheelType = WheelType.STANDARD,
) -> MotorRequirements:
    """
    Motor requirements for standard or Mecanum wheels.

    Mecanum wheels use the same force model as plain wheels; wheel_type only
    sets the label on the result.

    Args:
        raw: Validated inputs (raw mapping or DriveInputs)
        constants: Physical constants
        wheel_type: STANDARD or MECANUM

    Returns:
        MotorRequirements with all intermediate values
    """
    inputs = parse_inputs(raw)
    loads = _drive_loads(inputs, inputs.vmax, int(inputs.num_motors), constants)
    return MotorRequirements(wheel_type=wheel_type, **loads)


def calculate_omni(
    raw: Union[RawInputs, DriveInputs],
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
    kiwi_drive: Optional[bool] = None,
) -> MotorRequirements:
    """
    Motor requirements for omni wheels, optionally in a Kiwi layout.

    Speed and acceleration force are scaled by cos(alignment). In a Kiwi
    drive only two of the three wheels push along any direction of travel,
    so the load is shared by 2 motors whatever numMotors says.

    Args:
        raw: Validated inputs (raw mapping or DriveInputs)
        constants: Physical constants
        kiwi_drive: Override the inputs' Kiwi flag (None = use inputs)

    Returns:
        MotorRequirements including alignment and effective motor count
    """
    inputs = parse_inputs(raw)
    if kiwi_drive is None:
        kiwi_drive = inputs.kiwi_drive

    cos_theta = cos(radians(inputs.alignment))
    effective_motors = KIWI_EFFECTIVE_MOTORS if kiwi_drive else int(inputs.num_motors)

    loads = _drive_loads(inputs, inputs.vmax * cos_theta, effective_motors, constants)
    return MotorRequirements(
        wheel_type=WheelType.OMNI,
        alignment_angle=inputs.alignment,
        cos_theta=cos_theta,
        kiwi_drive=kiwi_drive,
        effective_motors=effective_motors,
        **loads,
    )


def calculate(
    raw: Union[RawInputs, DriveInputs],
    wheel_type: Union[WheelType, str] = WheelType.STANDARD,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> MotorRequirements:
    """
    Calculate motor requirements for any supported wheel layout.

    STANDARD and MECANUM share one model; OMNI uses the alignment
    projection; KIWI is OMNI with the Kiwi flag forced on.

    Call only after validate_inputs() reported no errors.
    """
    wheel_type = WheelType.from_value(wheel_type)
    inputs = parse_inputs(raw)

    if wheel_type is WheelType.KIWI:
        result = calculate_omni(inputs, constants, kiwi_drive=True)
    elif wheel_type is WheelType.OMNI:
        result = calculate_omni(inputs, constants)
    else:
        result = calculate_standard(inputs, constants, wheel_type=wheel_type)

    logger.debug(
        f"{wheel_type.value}: rpm={result.rpm:.2f}, final_torque={result.final_torque:.4f} N·m"
    )
    return result


def evaluate(
    raw: Union[RawInputs, DriveInputs],
    wheel_type: Union[WheelType, str] = WheelType.STANDARD,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> Tuple[ValidationResult, Optional[MotorRequirements]]:
    """
    Validate, then calculate only if every field passed.

    Returns:
        (validation, result) where result is None when validation failed
    """
    inputs = parse_inputs(raw)
    validation = validate_inputs(inputs, wheel_type)
    if not validation.valid:
        return validation, None
    return validation, calculate(inputs, wheel_type, constants)
