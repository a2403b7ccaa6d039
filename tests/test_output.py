"""
Tests for output formatters (to_json, to_markdown, to_summary).
"""

import json
import pytest

from boltweight.calculator import build_report, estimate_weight, validate_bolt_spec
from boltweight.calculator.output import to_json, to_markdown, to_summary
from boltweight.enums import StandardFamily
from boltweight.io import FastenerSpec, WeightResult
from boltweight.io.schema import SCHEMA_VERSION


@pytest.fixture
def m10_weight():
    return estimate_weight("M10", 50)


@pytest.fixture
def m10_spec():
    return FastenerSpec(size="M10", length=50, standard="ISO", material="steel", grade="10.9")


@pytest.fixture
def report(metric_items):
    return build_report(metric_items, StandardFamily.METRIC, "STEEL")


class TestToJson:
    """Tests for to_json."""

    def test_single_weight(self, m10_weight):
        data = json.loads(to_json(m10_weight))
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["weight"]["grams"] == pytest.approx(m10_weight.grams)
        assert data["weight"]["volume_clamped"] is False
        assert "spec" not in data

    def test_with_spec(self, m10_weight, m10_spec):
        data = json.loads(to_json(m10_weight, spec=m10_spec))
        assert data["spec"]["size"] == "M10"
        assert data["spec"]["standard"] == "metric"
        assert data["spec"]["grade"] == "10.9"

    def test_with_validation(self, m10_weight):
        validation = validate_bolt_spec("M10", 600)
        data = json.loads(to_json(m10_weight, validation=validation))
        assert data["validation"]["valid"] is True
        assert data["validation"]["warnings"][0]["code"] == "METRIC_LENGTH_RANGE"
        assert data["validation"]["errors"] == []

    def test_report(self, report):
        data = json.loads(to_json(report))
        assert data["standard"] == "metric"
        assert len(data["lines"]) == 3
        assert data["total_kilograms"] == pytest.approx(report.total_kilograms)

    def test_indent(self, m10_weight):
        assert "\n    " in to_json(m10_weight, indent=4)


class TestToMarkdown:
    """Tests for to_markdown."""

    def test_table_rows(self, report):
        md = to_markdown(report)
        assert md.startswith("# Bolt Weight Report")
        assert "| Standard | METRIC |" in md
        assert "| M10 | 50 | 4 |" in md
        assert "| M8 | 30 | 10 |" in md
        assert f"**Project Total:** {report.total_kilograms:.4f} kg" in md

    def test_inch_length_unit(self, inch_items):
        md = to_markdown(build_report(inch_items, StandardFamily.INCH))
        assert "Length (in)" in md
        assert "| 1/4 | 1.5 | 8 |" in md

    def test_validation_section(self, report):
        md = to_markdown(report, validate_bolt_spec("10", 5))
        assert "## Validation" in md
        assert "`METRIC_SIZE_FORMAT`" in md

    def test_no_validation_section_when_clean(self, report):
        assert "## Validation" not in to_markdown(report, validate_bolt_spec("M10", 50))


class TestToSummary:
    """Tests for to_summary."""

    def test_units_listed(self, m10_weight):
        text = to_summary(m10_weight)
        assert text.startswith("═══ Bolt Weight ═══")
        assert f"{m10_weight.grams:.2f} g" in text
        assert f"{m10_weight.pounds:.4f} lb" in text

    def test_spec_header(self, m10_weight, m10_spec):
        text = to_summary(m10_weight, m10_spec)
        assert "M10 x 50 mm (METRIC, STEEL)" in text
        assert "Grade: 10.9" in text

    def test_clamped_note(self):
        result = WeightResult(grams=0.0, kilograms=0.0, pounds=0.0, ounces=0.0, volume_clamped=True)
        assert "volume clamped" in to_summary(result)
