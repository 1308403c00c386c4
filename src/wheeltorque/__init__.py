"""
Wheeltorque - drive motor sizing for Mecanum, Omni and Kiwi-drive robots.

Turns a handful of physical inputs (mass, top speed, wheel diameter,
acceleration time, motor count, omni roller alignment) into the speed and
torque each drive motor must deliver.

Example:
    >>> from wheeltorque import evaluate, WheelType
    >>>
    >>> raw = {"mass": "10", "vmax": "1", "wheelDiameter": "100",
    ...        "accelTime": "2", "numMotors": "4"}
    >>> validation, result = evaluate(raw, WheelType.MECANUM)
    >>> print(f"{result.rpm:.2f} RPM, {result.final_torque:.4f} N·m")
    190.99 RPM, 0.2091 N·m

Note: All imports are lazy-loaded for fast startup in Pyodide.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"WheelType"}

_CALCULATOR = {
    "PhysicalConstants",
    "DEFAULT_CONSTANTS",
    "DriveInputs",
    "parse_inputs",
    "validate_inputs",
    "ValidationMessage",
    "ValidationResult",
    "VALID",
    "MotorRequirements",
    "calculate_standard",
    "calculate_omni",
    "calculate",
    "evaluate",
    "to_json",
    "to_markdown",
    "to_summary",
}

_IO = {
    "ConstantsError",
    "load_constants_json",
    "save_constants_json",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'wheeltorque' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "WheelType",

    # Calculator (lazy loaded from calculator)
    "PhysicalConstants",
    "DEFAULT_CONSTANTS",
    "DriveInputs",
    "parse_inputs",
    "validate_inputs",
    "ValidationMessage",
    "ValidationResult",
    "VALID",
    "MotorRequirements",
    "calculate_standard",
    "calculate_omni",
    "calculate",
    "evaluate",
    "to_json",
    "to_markdown",
    "to_summary",

    # IO (lazy loaded from io)
    "ConstantsError",
    "load_constants_json",
    "save_constants_json",
]
