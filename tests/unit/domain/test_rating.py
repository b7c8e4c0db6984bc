"""Unit tests for KPI rating and targets."""

import pytest

from wastekpi.domain.kpi import KPI_TARGETS, KPIKind, KPIRating, rate_kpi


class TestRateKpi:
    """Test threshold classification."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (96.0, KPIRating.EXCELLENT),
            (95.0, KPIRating.EXCELLENT),
            (92.0, KPIRating.GOOD),
            (85.0, KPIRating.AVERAGE),
            (70.0, KPIRating.POOR),
            (69.9, KPIRating.CRITICAL),
        ],
    )
    def test_sorting_rate_higher_is_better(self, value, expected):
        assert rate_kpi(KPIKind.SORTING_RATE, value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (90.0, KPIRating.GOOD),
            (85.0, KPIRating.AVERAGE),
            (76.7, KPIRating.CRITICAL),
        ],
    )
    def test_real_recycling_rate(self, value, expected):
        assert rate_kpi(KPIKind.REAL_RECYCLING_RATE, value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1.5, KPIRating.EXCELLENT),
            (3.0, KPIRating.GOOD),
            (4.0, KPIRating.AVERAGE),
            (7.0, KPIRating.POOR),
            (23.3, KPIRating.CRITICAL),
        ],
    )
    def test_final_disposal_rate_lower_is_better(self, value, expected):
        assert rate_kpi(KPIKind.FINAL_DISPOSAL_RATE, value) == expected

    def test_waste_intensity_lower_is_better(self):
        assert rate_kpi(KPIKind.WASTE_INTENSITY, 0.03) == KPIRating.EXCELLENT
        assert rate_kpi(KPIKind.WASTE_INTENSITY, 55.0) == KPIRating.AVERAGE
        assert rate_kpi(KPIKind.WASTE_INTENSITY, 80.0) == KPIRating.CRITICAL


class TestKpiKind:
    def test_lower_is_better(self):
        assert KPIKind.FINAL_DISPOSAL_RATE.lower_is_better
        assert KPIKind.WASTE_INTENSITY.lower_is_better
        assert not KPIKind.SORTING_RATE.lower_is_better

    def test_targets(self):
        assert KPI_TARGETS == {
            KPIKind.SORTING_RATE: 90.0,
            KPIKind.REAL_RECYCLING_RATE: 85.0,
            KPIKind.FINAL_DISPOSAL_RATE: 3.0,
            KPIKind.WASTE_INTENSITY: 50.0,
        }

    def test_every_rating_has_a_color(self):
        for rating in KPIRating:
            assert rating.color.startswith("#")
