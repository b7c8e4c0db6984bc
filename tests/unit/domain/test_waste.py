"""Unit tests for waste records, categories and formatting."""

import pytest
from pydantic import ValidationError

from wastekpi.domain.shared import format_percentage, format_weight
from wastekpi.domain.waste import WasteCategory, WasteRecord, waste_type_color


class TestWasteCategory:
    """Test label lookup and colors."""

    @pytest.mark.parametrize(
        ("label", "color"),
        [
            ("concrete debris", "#795548"),
            ("wood waste", "#8BC34A"),
            ("metal scrap", "#607D8B"),
            ("plastic", "#03A9F4"),
            ("paper", "#FFC107"),
            ("mixed waste", "#9E9E9E"),
            ("glass", "#00BCD4"),
            ("other", "#E91E63"),
        ],
    )
    def test_known_labels(self, label, color):
        assert waste_type_color(label) == color

    def test_lookup_ignores_case_and_whitespace(self):
        assert WasteCategory.from_label("  Wood Waste ") is WasteCategory.WOOD

    def test_unknown_label_falls_back_to_other(self):
        assert WasteCategory.from_label("asbestos") is WasteCategory.OTHER
        assert waste_type_color("asbestos") == "#E91E63"


class TestWasteRecord:
    def test_weights_default_to_zero(self):
        record = WasteRecord(
            site_code="SITE001",
            year_month="2024-04",
            waste_type="glass",
        )

        assert record.total_weight == 0.0
        assert record.recovered_weight == 0.0

    def test_rejects_invalid_period(self):
        with pytest.raises(ValidationError):
            WasteRecord(site_code="SITE001", year_month="2024/04", waste_type="glass")

    def test_recovered_weight(self):
        record = WasteRecord(
            site_code="SITE001",
            year_month="2024-04",
            waste_type="wood waste",
            recycled_weight=300.0,
            thermal_recycled_weight=150.0,
        )

        assert record.recovered_weight == 450.0


class TestFormatting:
    @pytest.mark.parametrize(
        ("weight", "expected"),
        [
            (850.0, "850 kg"),
            (999.4, "999 kg"),
            (1000.0, "1.00 t"),
            (1500.0, "1.50 t"),
            (0.0, "0 kg"),
        ],
    )
    def test_format_weight(self, weight, expected):
        assert format_weight(weight) == expected

    def test_format_percentage(self):
        assert format_percentage(76.6666) == "76.7%"
        assert format_percentage(76.6666, digits=2) == "76.67%"
