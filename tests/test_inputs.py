"""
Tests for input parsing (text -> DriveInputs).
"""

import pytest
from pydantic import ValidationError

from wheeltorque.calculator.inputs import (
    DriveInputs,
    parse_flag,
    parse_inputs,
    parse_number,
)


class TestParseNumber:

    @pytest.mark.parametrize("value, expected", [
        ("10", 10.0),
        (" 2.5 ", 2.5),
        ("-3", -3.0),
        ("1e-3", 0.001),
        (4, 4.0),
        (0.5, 0.5),
    ])
    def test_numbers(self, value, expected):
        assert parse_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "abc", "12abc", "inf", "nan", True, [1], 10**400, -10**400])
    def test_not_numbers(self, value):
        assert parse_number(value) is None


class TestParseFlag:

    @pytest.mark.parametrize("value", [True, "true", "TRUE", "on", "1", "yes", 1])
    def test_on(self, value):
        assert parse_flag(value) is True

    @pytest.mark.parametrize("value", [False, None, "", "false", "off", "0", 0])
    def test_off(self, value):
        assert parse_flag(value) is False


class TestParseInputs:

    def test_form_fields(self, kiwi_inputs):
        inputs = parse_inputs(kiwi_inputs)

        assert inputs.mass == 6.0
        assert inputs.vmax == 0.8
        assert inputs.wheel_diameter == 60.0
        assert inputs.accel_time == 1.5
        assert inputs.num_motors == 3.0
        assert inputs.alignment == 30.0
        assert inputs.kiwi_drive is True

    def test_missing_fields(self):
        inputs = parse_inputs({})
        assert inputs.mass is None
        assert inputs.num_motors is None
        assert inputs.alignment == 0.0
        assert inputs.kiwi_drive is False

    def test_blank_alignment_is_default(self):
        assert parse_inputs({"alignment": " "}).alignment == 0.0

    def test_bad_alignment_is_none(self):
        assert parse_inputs({"alignment": "north"}).alignment is None

    def test_already_parsed_returned_unchanged(self, reference_inputs):
        inputs = parse_inputs(reference_inputs)
        assert parse_inputs(inputs) is inputs

    def test_frozen(self, reference_inputs):
        inputs = parse_inputs(reference_inputs)
        with pytest.raises(ValidationError):
            inputs.mass = 1.0

    def test_direct_construction_by_name(self):
        inputs = DriveInputs(mass=1, wheel_diameter="50", kiwi_drive="on")
        assert inputs.wheel_diameter == 50.0
        assert inputs.kiwi_drive is True
