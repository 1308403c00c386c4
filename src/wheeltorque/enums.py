"""Type-safe enums for the drive motor calculator."""

from enum import Enum


class WheelType(Enum):
    """Drive wheel layout"""
    STANDARD = "standard"  # Plain traction wheels
    MECANUM = "mecanum"    # 45° rollers, same force model as standard wheels
    OMNI = "omni"          # Rollers at an arbitrary alignment angle
    KIWI = "kiwi"          # Three omni wheels at 120°

    @property
    def is_omni(self) -> bool:
        """True for layouts that use the roller alignment projection."""
        return self in (WheelType.OMNI, WheelType.KIWI)

    @classmethod
    def from_value(cls, value) -> "WheelType":
        """Coerce a string (any case) or WheelType to WheelType."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(t.value for t in cls)
        raise ValueError(f"Unknown wheel type: {value!r} (expected one of {valid})")
