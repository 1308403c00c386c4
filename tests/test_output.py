"""
Tests for output formatters (to_json, to_markdown, to_summary).
"""

import json
import pytest

from wheeltorque.calculator.core import calculate
from wheeltorque.calculator.inputs import parse_inputs
from wheeltorque.calculator.output import (
    errors_to_dict,
    to_json,
    to_markdown,
    to_summary,
)
from wheeltorque.calculator.validation import validate_inputs, VALID
from wheeltorque.enums import WheelType


@pytest.fixture
def mecanum_result(reference_inputs):
    return calculate(reference_inputs, WheelType.MECANUM)


@pytest.fixture
def kiwi_result(kiwi_inputs):
    return calculate(kiwi_inputs, WheelType.KIWI)


class TestToJson:

    def test_camel_case_keys(self, mecanum_result):
        data = json.loads(to_json(mecanum_result))

        assert data["wheelType"] == "mecanum"
        assert data["finalTorque"] == pytest.approx(0.2090625)
        assert data["wheelRadius"] == pytest.approx(0.05)
        assert "cosTheta" not in data
        assert "validation" not in data

    def test_omni_fields(self, kiwi_result):
        data = json.loads(to_json(kiwi_result))
        assert data["wheelType"] == "omni"
        assert data["effectiveMotors"] == 2
        assert data["kiwiDrive"] is True

    def test_includes_validation(self, mecanum_result):
        data = json.loads(to_json(mecanum_result, validation=VALID))
        assert data["validation"] == {"valid": True, "errors": []}

    def test_indent(self, mecanum_result):
        assert "\n" not in to_json(mecanum_result, indent=None)


class TestToSummary:

    def test_display_precision(self, mecanum_result):
        summary = to_summary(mecanum_result)

        assert "190.99 RPM" in summary
        assert "0.2091 N·m per motor" in summary
        assert "3.9200 N" in summary
        assert "5.0000 N" in summary
        assert "8.9200 N" in summary
        assert "0.0500 m" in summary
        assert "0.4460 N·m" in summary
        assert "0.1394 N·m" in summary
        assert "(mecanum)" in summary

    def test_no_omni_section_for_mecanum(self, mecanum_result):
        assert "Omni geometry" not in to_summary(mecanum_result)

    def test_kiwi_section(self, kiwi_result):
        summary = to_summary(kiwi_result)
        assert "Omni geometry:" in summary
        assert "Kiwi drive:        Yes" in summary
        assert "Effective motors:  2" in summary


class TestToMarkdown:

    def test_sections(self, mecanum_result):
        md = to_markdown(mecanum_result)

        assert md.startswith("# Drive Motor Requirements")
        assert "## Forces" in md
        assert "## Torques" in md
        assert "| Required Speed | 190.99 RPM |" in md
        assert "## Inputs" not in md
        assert "## Omni Geometry" not in md

    def test_with_inputs(self, reference_inputs, mecanum_result):
        md = to_markdown(mecanum_result, parse_inputs(reference_inputs))
        assert "| Mass | 10 kg |" in md
        assert "| Wheel Diameter | 100 mm |" in md
        assert "| Motors | 4 |" in md

    def test_omni_geometry(self, kiwi_result):
        md = to_markdown(kiwi_result)
        assert "## Omni Geometry" in md
        assert "| Roller Alignment | 30° |" in md
        assert "| Kiwi Drive | Yes |" in md


class TestErrorsToDict:

    def test_field_messages(self, all_invalid_inputs):
        errors = errors_to_dict(validate_inputs(all_invalid_inputs))
        assert errors["numMotors"] == "Must be a positive integer"
        assert len(errors) == 5

    def test_valid_is_empty(self):
        assert errors_to_dict(VALID) == {}
