"""Output formatters for motor requirement results.

Converts typed MotorRequirements models to JSON, Markdown and plain text.
Display precision follows the web calculator: RPM to 2 decimals, forces,
radius and torques to 4.

Uses Pydantic's model_dump(mode='json', by_alias=True) so enums become their
string values and keys use the camelCase names the web UI expects.
"""

import json
from typing import Dict, Optional, TYPE_CHECKING

from .core import MotorRequirements

if TYPE_CHECKING:
    from .inputs import DriveInputs
    from .validation import ValidationResult


def _model_to_dict(model) -> dict:
    """Convert result model to a JSON-compatible camelCase dict, omni-only fields dropped when unset."""
    return model.model_dump(mode='json', by_alias=True, exclude_none=True)


def errors_to_dict(validation: "ValidationResult") -> Dict[str, str]:
    """Field -> message map for a form to display next to each input."""
    return validation.errors


def to_json(
    result: MotorRequirements,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
) -> str:
    """Convert MotorRequirements to JSON string.

    Args:
        result: Output of calculate()
        validation: Optional validation results to include
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with camelCase result fields
    """
    result_dict = _model_to_dict(result)

    if validation is not None:
        result_dict['validation'] = {
            'valid': validation.valid,
            'errors': [
                {
                    'field': msg.field,
                    'code': msg.code,
                    'message': msg.message,
                }
                for msg in validation.messages
            ],
        }

    return json.dumps(result_dict, indent=indent)


def to_markdown(result: MotorRequirements, inputs: Optional["DriveInputs"] = None) -> str:
    """Convert MotorRequirements to a markdown report.

    Args:
        result: Output of calculate()
        inputs: Optional parsed inputs, listed in an extra section

    Returns:
        Markdown string
    """
    md = "# Drive Motor Requirements\n\n"

    md += "## Motor Specification\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Wheel Type | {result.wheel_type.value} |\n"
    md += f"| Required Speed | {result.rpm:.2f} RPM |\n"
    md += f"| Required Torque (per motor) | {result.final_torque:.4f} N·m |\n\n"

    if inputs is not None:
        md += "## Inputs\n\n"
        md += "| Parameter | Value |\n"
        md += "|-----------|-------|\n"
        md += f"| Mass | {inputs.mass:g} kg |\n"
        md += f"| Max Speed | {inputs.vmax:g} m/s |\n"
        md += f"| Wheel Diameter | {inputs.wheel_diameter:g} mm |\n"
        md += f"| Acceleration Time | {inputs.accel_time:g} s |\n"
        md += f"| Motors | {int(inputs.num_motors)} |\n\n"

    md += "## Forces\n\n"
    md += "| Force | Value |\n"
    md += "|-------|-------|\n"
    md += f"| Friction | {result.friction_force:.4f} N |\n"
    md += f"| Acceleration | {result.acceleration_force:.4f} N |\n"
    md += f"| Total | {result.total_force:.4f} N |\n\n"

    md += "## Torques\n\n"
    md += "| Quantity | Value |\n"
    md += "|----------|-------|\n"
    md += f"| Wheel Radius | {result.wheel_radius:.4f} m |\n"
    md += f"| Total Torque | {result.total_torque:.4f} N·m |\n"
    md += f"| Torque per Motor | {result.torque_per_motor:.4f} N·m |\n"
    md += f"| Final Torque (with safety factor) | {result.final_torque:.4f} N·m |\n\n"

    if result.cos_theta is not None:
        md += "## Omni Geometry\n\n"
        md += "| Parameter | Value |\n"
        md += "|-----------|-------|\n"
        md += f"| Roller Alignment | {result.alignment_angle:g}° |\n"
        md += f"| cos(θ) | {result.cos_theta:.4f} |\n"
        md += f"| Kiwi Drive | {'Yes' if result.kiwi_drive else 'No'} |\n"
        md += f"| Effective Motors | {result.effective_motors} |\n\n"

    return md


def to_summary(result: MotorRequirements) -> str:
    """Convert MotorRequirements to formatted text summary.

    Returns:
        Multi-line formatted summary string
    """
    lines = [
        f"═══ Drive Motor Requirements ({result.wheel_type.value}) ═══",
        f"Speed:  {result.rpm:.2f} RPM",
        f"Torque: {result.final_torque:.4f} N·m per motor",
        "",
        "Forces:",
        f"  Friction:      {result.friction_force:.4f} N",
        f"  Acceleration:  {result.acceleration_force:.4f} N",
        f"  Total:         {result.total_force:.4f} N",
        "",
        "Torques:",
        f"  Wheel radius:      {result.wheel_radius:.4f} m",
        f"  Total torque:      {result.total_torque:.4f} N·m",
        f"  Torque per motor:  {result.torque_per_motor:.4f} N·m",
    ]

    if result.cos_theta is not None:
        lines.extend([
            "",
            "Omni geometry:",
            f"  Alignment:         {result.alignment_angle:g}°",
            f"  cos(θ):            {result.cos_theta:.4f}",
            f"  Kiwi drive:        {'Yes' if result.kiwi_drive else 'No'}",
            f"  Effective motors:  {result.effective_motors}",
        ])

    return "\n".join(lines)
