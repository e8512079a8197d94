"""
Tests for Kokwame options.
"""

import json

import pytest

from kokwame.core.config import Border, Options
from kokwame.core.errors import ConfigError, UnknownOption


class TestOptions:
    """Tests for building options."""

    def test_defaults(self):
        options = Options()
        assert options.is_diagnostic_producer is False
        assert options.border is Border.ROUNDED
        assert options.threshold_low == 7
        assert options.threshold_high == 12

    def test_from_mapping(self):
        options = Options.from_mapping({"is_diagnostic_producer": True, "border": "double"})
        assert options.is_diagnostic_producer is True
        assert options.border is Border.DOUBLE

    def test_from_none(self):
        assert Options.from_mapping(None) == Options()

    def test_unknown_option(self):
        with pytest.raises(UnknownOption) as excinfo:
            Options.from_mapping({"produce_diagnostics": True})
        assert excinfo.value.option == "produce_diagnostics"
        assert isinstance(excinfo.value, ConfigError)

    def test_invalid_border(self):
        with pytest.raises(ConfigError):
            Options.from_mapping({"border": "wavy"})

    def test_producer_flag_must_be_boolean(self):
        with pytest.raises(ConfigError):
            Options.from_mapping({"is_diagnostic_producer": "yes"})

    def test_thresholds_must_be_ordered(self):
        with pytest.raises(ConfigError):
            Options(threshold_low=12, threshold_high=12)
        with pytest.raises(ConfigError):
            Options(threshold_low=10, threshold_high=5)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_thresholds_must_be_finite(self, value):
        with pytest.raises(ConfigError):
            Options(threshold_low=value)
        with pytest.raises(ConfigError):
            Options.from_mapping({"threshold_high": value})

    def test_thresholds_must_be_numbers(self):
        with pytest.raises(ConfigError):
            Options.from_mapping({"threshold_low": "7"})

    def test_merged(self):
        options = Options().merged({"threshold_low": 3, "threshold_high": 5})
        assert (options.threshold_low, options.threshold_high) == (3, 5)
        with pytest.raises(UnknownOption):
            Options().merged({"colour": "red"})

    def test_to_dict(self):
        assert Options(border=Border.NONE).to_dict() == {
            "is_diagnostic_producer": False,
            "border": "none",
            "threshold_low": 7,
            "threshold_high": 12,
        }


class TestOptionsLoading:
    """Tests for loading options from files."""

    def test_no_path(self):
        assert Options.load(None) == Options()

    def test_yaml(self, tmp_path):
        path = tmp_path / "kokwame.yaml"
        path.write_text("is_diagnostic_producer: true\nborder: single\nthreshold_high: 20\n", encoding="utf-8")
        options = Options.load(str(path))
        assert options.is_diagnostic_producer is True
        assert options.border is Border.SINGLE
        assert options.threshold_high == 20

    def test_yaml_section(self, tmp_path):
        path = tmp_path / "tools.yml"
        path.write_text("kokwame:\n  threshold_low: 4\n", encoding="utf-8")
        assert Options.load(str(path)).threshold_low == 4

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "kokwame.yaml"
        path.write_text("", encoding="utf-8")
        assert Options.load(str(path)) == Options()

    def test_json(self, tmp_path):
        path = tmp_path / "kokwame.json"
        path.write_text(json.dumps({"border": "solid"}), encoding="utf-8")
        assert Options.load(str(path)).border is Border.SOLID

    def test_unknown_key_in_file(self, tmp_path):
        path = tmp_path / "kokwame.yaml"
        path.write_text("bordr: single\n", encoding="utf-8")
        with pytest.raises(UnknownOption):
            Options.load(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            Options.load(str(tmp_path / "absent.yaml"))

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "kokwame.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            Options.load(str(path))

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "kokwame.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Options.load(str(path))
