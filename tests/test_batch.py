"""
Tests for batch calculation and project totals.
"""

import pytest

from boltweight.calculator import (
    build_report,
    calculate_batch,
    calculate_project_weight,
    estimate_weight,
)
from boltweight.enums import StandardFamily
from boltweight.errors import InvalidInputError, UnknownSizeError
from boltweight.io import BatchItem, BatchLine, BatchReport, EstimateOptions


class TestCalculateBatch:
    """Tests for calculate_batch."""

    def test_order_preserved(self, metric_items):
        lines = calculate_batch(metric_items, StandardFamily.METRIC)
        assert [line.size for line in lines] == ["M10", "M8", "M12"]
        assert [line.quantity for line in lines] == [4, 10, 2]

    def test_line_weights_match_single_estimates(self, metric_items):
        lines = calculate_batch(metric_items, "ISO", "BRASS")
        for item, line in zip(metric_items, lines):
            assert line.weight == estimate_weight(item["size"], item["length"], StandardFamily.METRIC, "BRASS")

    def test_accepts_models(self):
        items = [BatchItem(size="1/2", length=3, quantity=2)]
        lines = calculate_batch(items, StandardFamily.INCH)
        assert lines[0].weight == estimate_weight("1/2", 3, StandardFamily.INCH)

    def test_quantity_defaults_to_one(self):
        lines = calculate_batch([{"size": "M6", "length": 20}])
        assert lines[0].quantity == 1

    def test_options_apply_to_every_line(self, metric_items):
        options = EstimateOptions(full_thread=True)
        plain = calculate_batch(metric_items)
        full = calculate_batch(metric_items, options=options)
        for a, b in zip(plain, full):
            assert b.weight.grams == pytest.approx(a.weight.grams * 1.025)

    def test_unknown_size_propagates(self):
        with pytest.raises(UnknownSizeError):
            calculate_batch([{"size": "M10", "length": 50}, {"size": "M9", "length": 50}])

    def test_zero_quantity(self):
        with pytest.raises(InvalidInputError):
            calculate_batch([{"size": "M10", "length": 50, "quantity": 0}])

    def test_empty(self):
        assert calculate_batch([]) == []


class TestProjectWeight:
    """Tests for calculate_project_weight."""

    def test_sum_of_kilograms_times_quantity(self, metric_items):
        lines = calculate_batch(metric_items)
        expected = sum(line.weight.kilograms * line.quantity for line in lines)
        assert calculate_project_weight(lines) == pytest.approx(expected)

    def test_missing_weight_counts_as_zero(self):
        lines = [
            BatchLine(size="M10", length=50, quantity=3),
            BatchLine(size="M10", length=50, quantity=2, weight=estimate_weight("M10", 50)),
        ]
        assert calculate_project_weight(lines) == pytest.approx(2 * estimate_weight("M10", 50).kilograms)

    def test_plain_dicts(self):
        lines = [
            {"weight": {"kilograms": 0.5}, "quantity": 4},
            {"quantity": 10},
            {"weight": None, "quantity": 1},
        ]
        assert calculate_project_weight(lines) == pytest.approx(2.0)

    def test_empty(self):
        assert calculate_project_weight([]) == 0.0


class TestBuildReport:
    """Tests for build_report."""

    def test_report_fields(self, metric_items):
        report = build_report(metric_items, "DIN", "stainless_steel")
        assert isinstance(report, BatchReport)
        assert report.standard is StandardFamily.METRIC
        assert report.material == "STAINLESS_STEEL"
        assert len(report.lines) == 3
        assert report.total_kilograms == pytest.approx(calculate_project_weight(report.lines))

    def test_default_material_name(self, inch_items):
        report = build_report(inch_items, StandardFamily.INCH)
        assert report.material == "STEEL"

    def test_unknown_material_reported_as_steel(self, metric_items):
        """The report names the material whose density was used."""
        report = build_report(metric_items, StandardFamily.METRIC, "titanium")
        assert report.material == "STEEL"
        assert report.lines == build_report(metric_items, StandardFamily.METRIC, "STEEL").lines
