"""
JavaScript-Python bridge for Pyodide.

Provides a single, clean entry point for the web calculator. The page sends
its raw form fields; Python validates, calculates and formats.

Usage from JavaScript:
    pyodide.globals.set('input_json', JSON.stringify({
        wheelType: 'omni', mass: '10', vmax: '1', wheelDiameter: '100',
        accelTime: '2', numMotors: '4', alignment: '45', kiwiDrive: false
    }));
    const result = await pyodide.runPythonAsync(`
        from wheeltorque.calculator.js_bridge import calculate
        calculate(input_json)
    `);
    const output = JSON.parse(result);
    if (!output.valid) { showErrors(output.errors); }
"""

import json
import logging
from typing import Any, Dict, List, Optional

from typing_extensions import TypedDict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import WheelType
from .constants import DEFAULT_CONSTANTS, PhysicalConstants
from .core import evaluate
from .inputs import parse_inputs
from .output import to_markdown, to_summary

logger = logging.getLogger(__name__)


class ValidationMessageDict(TypedDict):
    """Type for validation message dictionaries sent to JavaScript."""
    field: str
    code: str  # e.g., "KIWI_MOTOR_COUNT"
    message: str


# ============================================================================
# Input Models (Pydantic validation for JS inputs)
# ============================================================================

class CalculatorInputs(BaseModel):
    """
    Everything the calculator page sends.

    Form fields stay as loosely typed values here; they are parsed by
    DriveInputs so that bad numbers become field errors rather than a
    failed request.
    """
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    wheel_type: str = Field(default="mecanum", alias="wheelType")

    mass: Any = None
    vmax: Any = None
    wheel_diameter: Any = Field(default=None, alias="wheelDiameter")
    accel_time: Any = Field(default=None, alias="accelTime")
    num_motors: Any = Field(default=None, alias="numMotors")
    alignment: Any = None
    kiwi_drive: Any = Field(default=False, alias="kiwiDrive")

    # Optional override of the physical constants
    constants: Optional[PhysicalConstants] = None

    @field_validator('wheel_type', mode='before')
    @classmethod
    def normalize_wheel_type(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def raw_fields(self) -> Dict[str, Any]:
        """Form fields only, keyed the way the form names them."""
        return self.model_dump(
            by_alias=True,
            include={'mass', 'vmax', 'wheel_diameter', 'accel_time',
                     'num_motors', 'alignment', 'kiwi_drive'},
        )


# ============================================================================
# Output Models
# ============================================================================

class CalculatorOutput(BaseModel):
    """Output from calculate() - matches what JS expects."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None

    # Validation
    valid: bool = True
    errors: Dict[str, str] = Field(default_factory=dict)
    messages: List[ValidationMessageDict] = Field(default_factory=list)

    # Results (camelCase keys, omitted when validation failed)
    results: Optional[Dict[str, Any]] = None

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for all calculator operations from JavaScript.

    Args:
        input_json: JSON string with CalculatorInputs structure

    Returns:
        JSON string with CalculatorOutput structure. Field errors give
        success=True, valid=False; only malformed requests give success=False.
    """
    try:
        data = json.loads(input_json)
        inputs = CalculatorInputs.model_validate(data)

        wheel_type = WheelType.from_value(inputs.wheel_type)
        constants = inputs.constants or DEFAULT_CONSTANTS
        drive_inputs = parse_inputs(inputs.raw_fields())

        validation, result = evaluate(drive_inputs, wheel_type, constants)

        if result is None:
            return CalculatorOutput(
                success=True,
                valid=False,
                errors=validation.errors,
                messages=[
                    {'field': m.field, 'code': m.code, 'message': m.message}
                    for m in validation.messages
                ],
            ).model_dump_json()

        output = CalculatorOutput(
            success=True,
            valid=True,
            results=result.model_dump(mode='json', by_alias=True, exclude_none=True),
            summary=to_summary(result),
            markdown=to_markdown(result, drive_inputs),
        )
        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            valid=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json()

    except Exception as e:
        logger.warning(f"Calculator request failed: {e}")
        return CalculatorOutput(
            success=False,
            valid=False,
            error=str(e)
        ).model_dump_json()
