"""
Wheeltorque IO - loading and saving physical constants.

Example:
    >>> from wheeltorque.io import load_constants_json, save_constants_json
    >>> from wheeltorque.calculator import PhysicalConstants
    >>>
    >>> save_constants_json(PhysicalConstants(mu=0.06), "constants.json")
    >>> constants = load_constants_json("constants.json")
"""

from .loaders import (
    ConstantsError,
    load_constants_json,
    save_constants_json,
)

__all__ = [
    "ConstantsError",
    "load_constants_json",
    "save_constants_json",
]
