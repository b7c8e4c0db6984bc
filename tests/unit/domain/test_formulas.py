"""Unit tests for KPI formulas."""

import pytest

from wastekpi.domain.kpi import (
    TrendDirection,
    WasteMetrics,
    achievement_rate,
    derive_kpis,
    final_disposal_rate,
    monthly_trend,
    real_recycling_rate,
    sorting_rate,
    waste_intensity,
)


class TestRates:
    """Test the three percentage rates."""

    def test_sorting_rate(self):
        assert sorting_rate(1000.0, 100.0) == pytest.approx(90.0)

    def test_sorting_rate_without_mixed_waste(self):
        assert sorting_rate(500.0, 0.0) == pytest.approx(100.0)

    def test_real_recycling_rate_adds_thermal_recycling(self):
        rate = real_recycling_rate(1100.0, 50.0, 1500.0)

        assert rate == pytest.approx(76.6667, 1e-4)

    def test_final_disposal_rate(self):
        assert final_disposal_rate(350.0, 1500.0) == pytest.approx(23.3333, 1e-4)

    @pytest.mark.parametrize(
        "value",
        [
            sorting_rate(0.0, 0.0),
            sorting_rate(0.0, 50.0),
            real_recycling_rate(0.0, 0.0, 0.0),
            real_recycling_rate(30.0, 20.0, 0.0),
            final_disposal_rate(0.0, 0.0),
            final_disposal_rate(10.0, 0.0),
        ],
    )
    def test_zero_total_yields_zero(self, value):
        assert value == 0.0

    @pytest.mark.parametrize(
        ("total", "mixed", "recycled", "thermal", "final"),
        [
            (1000.0, 0.0, 1000.0, 0.0, 0.0),
            (1000.0, 1000.0, 0.0, 0.0, 1000.0),
            (1500.0, 100.0, 1100.0, 50.0, 350.0),
            (0.5, 0.25, 0.1, 0.1, 0.3),
        ],
    )
    def test_consistent_inputs_stay_within_percent_range(
        self, total, mixed, recycled, thermal, final,
    ):
        rates = [
            sorting_rate(total, mixed),
            real_recycling_rate(recycled, thermal, total),
            final_disposal_rate(final, total),
        ]

        assert all(0.0 <= rate <= 100.0 for rate in rates)


class TestWasteIntensity:
    """Test waste intensity in tons per 100M JPY."""

    def test_converts_kg_to_tons(self):
        # 2500 kg = 2.5 t over 100 (100M JPY)
        assert waste_intensity(2500.0, 100.0) == pytest.approx(0.025)

    def test_zero_construction_amount_yields_zero(self):
        assert waste_intensity(2500.0, 0.0) == 0.0


class TestDeriveKpis:
    """Test derive_kpis composition."""

    def test_worked_company_example(self):
        metrics = WasteMetrics(
            total_waste=1500.0,
            sorted_waste=1400.0,
            mixed_waste=100.0,
            recycled_waste=1100.0,
            thermal_recycled_waste=50.0,
            final_disposal_waste=350.0,
        )

        kpis = derive_kpis(metrics)

        assert kpis.final_disposal_rate == pytest.approx(23.33, abs=0.01)
        assert kpis.real_recycling_rate == pytest.approx(76.67, abs=0.01)
        assert kpis.sorting_rate == pytest.approx(93.33, abs=0.01)
        assert kpis.waste_intensity is None

    def test_intensity_present_with_positive_construction_amount(self):
        metrics = WasteMetrics(total_waste=3000.0, construction_amount=100.0)

        kpis = derive_kpis(metrics)

        assert kpis.has_waste_intensity
        assert kpis.waste_intensity == pytest.approx(0.03)

    @pytest.mark.parametrize("amount", [None, 0.0, -5.0])
    def test_intensity_absent_without_positive_amount(self, amount):
        metrics = WasteMetrics(total_waste=3000.0, construction_amount=amount)

        assert derive_kpis(metrics).waste_intensity is None

    def test_empty_metrics_yield_zero_rates(self):
        kpis = derive_kpis(WasteMetrics())

        assert kpis.sorting_rate == 0.0
        assert kpis.real_recycling_rate == 0.0
        assert kpis.final_disposal_rate == 0.0
        assert kpis.waste_intensity is None


class TestAchievementRate:
    def test_actual_over_target(self):
        assert achievement_rate(93.0, 90.0) == pytest.approx(103.333, 1e-4)

    def test_zero_target_yields_zero(self):
        assert achievement_rate(12.0, 0.0) == 0.0


class TestMonthlyTrend:
    """Test month-over-month comparison."""

    def test_increase(self):
        trend = monthly_trend(10.0, 8.0)

        assert trend.delta == pytest.approx(2.0)
        assert trend.percentage == pytest.approx(25.0)
        assert trend.direction == TrendDirection.UP

    def test_zero_previous_guards_percentage(self):
        trend = monthly_trend(5.0, 0.0)

        assert trend.delta == pytest.approx(5.0)
        assert trend.percentage == 0.0
        assert trend.direction == TrendDirection.UP

    def test_decrease(self):
        trend = monthly_trend(6.0, 8.0)

        assert trend.delta == pytest.approx(-2.0)
        assert trend.percentage == pytest.approx(-25.0)
        assert trend.direction == TrendDirection.DOWN

    def test_unchanged(self):
        trend = monthly_trend(7.5, 7.5)

        assert trend.delta == 0.0
        assert trend.direction == TrendDirection.FLAT
