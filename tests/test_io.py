"""
Tests for loading and saving physical constants.
"""

import json
import pytest

from wheeltorque.calculator.constants import PhysicalConstants
from wheeltorque.io import ConstantsError, load_constants_json, save_constants_json


class TestLoadConstants:

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "constants.json"
        path.write_text(json.dumps({"mu": 0.06, "safetyFactor": 2.0}))

        constants = load_constants_json(path)

        assert constants.mu == 0.06
        assert constants.safety_factor == 2.0
        assert constants.g == 9.8
        assert constants.eta == 0.8

    def test_snake_case_key(self, tmp_path):
        path = tmp_path / "constants.json"
        path.write_text(json.dumps({"safety_factor": 1.2}))
        assert load_constants_json(str(path)).safety_factor == 1.2

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConstantsError, match="not found"):
            load_constants_json(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{ nope")
        with pytest.raises(ConstantsError, match="Invalid JSON"):
            load_constants_json(path)

    def test_root_not_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[9.8]")
        with pytest.raises(ConstantsError, match="JSON object"):
            load_constants_json(path)

    def test_out_of_range(self, tmp_path):
        path = tmp_path / "eta.json"
        path.write_text(json.dumps({"eta": 1.5}))
        with pytest.raises(ConstantsError, match="Invalid constants"):
            load_constants_json(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(ConstantsError, match="Cannot read"):
            load_constants_json(tmp_path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"mu": 0.05, "note": "\xe9\xff"}')
        with pytest.raises(ConstantsError, match="UTF-8"):
            load_constants_json(path)

    def test_error_is_value_error(self):
        assert issubclass(ConstantsError, ValueError)


class TestSaveConstants:

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "out.json"
        original = PhysicalConstants(g=9.81, mu=0.05, eta=0.7, safety_factor=2.0)

        save_constants_json(original, path)

        assert json.loads(path.read_text())["safetyFactor"] == 2.0
        assert load_constants_json(path) == original
