"""
Tests for advisory bolt spec validation and unit conversion.
"""

import pytest

from boltweight.calculator import convert_units, validate_bolt_spec
from boltweight.calculator.validation import (
    Severity,
    ValidationMessage,
    ValidationResult,
    _validate_inch_length,
    _validate_metric_size,
)
from boltweight.enums import StandardFamily
from boltweight.errors import InvalidInputError


def _codes(result):
    """Extract code strings from a ValidationResult."""
    return [m.code for m in result.messages]


class TestValidateBoltSpec:
    """Tests for validate_bolt_spec."""

    def test_valid_metric(self):
        result = validate_bolt_spec("M10", 50, StandardFamily.METRIC)
        assert result.valid is True
        assert result.messages == []

    def test_metric_size_format(self):
        result = validate_bolt_spec("10", 50, "ISO")
        assert _codes(result) == ["METRIC_SIZE_FORMAT"]
        assert result.valid is True  # advisory only

    def test_lowercase_metric_flagged(self):
        """Lower-case 'm' is accepted by lookup but flagged as non-canonical."""
        assert "METRIC_SIZE_FORMAT" in _codes(validate_bolt_spec("m10", 50))

    @pytest.mark.parametrize("length", [5, 9.9, 500.1, 1000])
    def test_metric_length_range(self, length):
        assert _codes(validate_bolt_spec("M10", length)) == ["METRIC_LENGTH_RANGE"]

    @pytest.mark.parametrize("length", [10, 500])
    def test_metric_length_bounds_inclusive(self, length):
        assert validate_bolt_spec("M10", length).messages == []

    def test_carriage_uses_metric_rules(self):
        assert _codes(validate_bolt_spec("10", 5, StandardFamily.METRIC_CARRIAGE)) == [
            "METRIC_SIZE_FORMAT", "METRIC_LENGTH_RANGE"
        ]

    def test_valid_inch(self):
        assert validate_bolt_spec("1/2", 3, "ASME").messages == []

    def test_inch_size_unknown(self):
        result = validate_bolt_spec("9/16", 3, StandardFamily.INCH)
        assert _codes(result) == ["INCH_SIZE_UNKNOWN"]
        assert "1/4" in result.messages[0].message

    @pytest.mark.parametrize("length", [0.25, 12.5])
    def test_inch_length_range(self, length):
        assert _codes(validate_bolt_spec("1/2", length, StandardFamily.INCH)) == ["INCH_LENGTH_RANGE"]

    def test_unknown_standard_is_error(self):
        result = validate_bolt_spec("M10", 50, "BSW")
        assert result.valid is False
        assert _codes(result) == ["STANDARD_UNKNOWN"]
        assert result.errors[0].severity == Severity.ERROR

    @pytest.mark.parametrize("length", [None, "50", [50]])
    def test_non_numeric_length_is_reported(self, length):
        result = validate_bolt_spec("M10", length)
        assert _codes(result) == ["LENGTH_NOT_NUMBER"]
        assert result.valid is True

    def test_bool_length_is_reported(self):
        assert "LENGTH_NOT_NUMBER" in _codes(validate_bolt_spec("1/2", True, StandardFamily.INCH))

    def test_non_numeric_length_inch(self):
        result = validate_bolt_spec("1/2", "3", StandardFamily.INCH)
        assert _codes(result) == ["LENGTH_NOT_NUMBER"]

    @pytest.mark.parametrize("standard,code", [
        (StandardFamily.METRIC, "METRIC_SIZE_FORMAT"),
        (StandardFamily.INCH, "INCH_SIZE_UNKNOWN"),
    ])
    def test_unhashable_size_is_reported(self, standard, code):
        result = validate_bolt_spec(["M10"], 3, standard)
        assert code in _codes(result)

    def test_warnings_property(self):
        result = validate_bolt_spec("X", 1000)
        assert len(result.warnings) == 2
        assert result.errors == []
        assert result.infos == []

    def test_as_strings(self):
        result = validate_bolt_spec("M10", 5)
        assert result.as_strings() == ["Length should be between 10-500 mm for metric bolts"]


class TestValidatorInternals:
    """Direct tests of individual rules."""

    def test_metric_size_rule(self):
        assert _validate_metric_size("M24") == []
        assert _validate_metric_size(None)[0].code == "METRIC_SIZE_FORMAT"

    def test_inch_length_rule(self):
        messages = _validate_inch_length(20)
        assert messages[0].severity == Severity.WARNING
        assert "0.5-12 inches" in messages[0].message

    def test_result_groups(self):
        result = ValidationResult(valid=False, messages=[
            ValidationMessage(Severity.ERROR, "A", "a"),
            ValidationMessage(Severity.WARNING, "B", "b"),
            ValidationMessage(Severity.INFO, "C", "c"),
        ])
        assert [m.code for m in result.errors] == ["A"]
        assert [m.code for m in result.warnings] == ["B"]
        assert [m.code for m in result.infos] == ["C"]


class TestConvertUnits:
    """Tests for the ad-hoc unit converter."""

    @pytest.mark.parametrize("value,from_unit,to_unit,expected", [
        (25.4, "in", "mm", 645.16),
        (100, "mm", "in", 3.93701),
        (1, "oz", "g", 28.3495),
        (1000, "g", "oz", 35.274),
        (2, "kg", "lb", 4.40924),
        (1, "lb", "kg", 0.453592),
    ])
    def test_pairs(self, value, from_unit, to_unit, expected):
        assert convert_units(value, from_unit, to_unit) == pytest.approx(expected)

    def test_case_insensitive(self):
        assert convert_units(1, "IN", "MM") == pytest.approx(25.4)

    def test_same_unit(self):
        assert convert_units(7.5, "kg", "kg") == 7.5

    def test_unsupported_pair(self):
        with pytest.raises(InvalidInputError):
            convert_units(1, "kg", "mm")
