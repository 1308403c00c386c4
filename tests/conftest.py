"""
Pytest configuration and shared fixtures for wheeltorque tests.
"""

import pytest


# ─── Helper functions (no pytest dependency) ──────────────────────────────


def _reference_inputs():
    """Return the worked example from the sizing sheet as raw form text."""
    return {
        "mass": "10",
        "vmax": "1",
        "wheelDiameter": "100",
        "accelTime": "2",
        "numMotors": "4",
    }


def _kiwi_inputs():
    """Return a valid Kiwi-drive form."""
    return {
        "mass": "6",
        "vmax": "0.8",
        "wheelDiameter": "60",
        "accelTime": "1.5",
        "numMotors": "3",
        "alignment": "30",
        "kiwiDrive": "true",
    }


# ─── Function-scoped fixtures (fresh dict per test, safe to mutate) ───────


@pytest.fixture
def reference_inputs():
    """mass=10 kg, vmax=1 m/s, 100 mm wheels, 2 s, 4 motors."""
    return _reference_inputs()


@pytest.fixture
def omni_inputs():
    """Reference inputs with a 45° roller alignment."""
    raw = _reference_inputs()
    raw["alignment"] = "45"
    return raw


@pytest.fixture
def kiwi_inputs():
    """Valid Kiwi-drive inputs (3 motors, flag set)."""
    return _kiwi_inputs()


@pytest.fixture
def all_invalid_inputs():
    """Every field wrong at once."""
    return {
        "mass": "0",
        "vmax": "-1",
        "wheelDiameter": "",
        "accelTime": "abc",
        "numMotors": "2.5",
    }
