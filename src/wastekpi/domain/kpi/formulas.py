"""KPI formula definitions.

Pure functions over aggregate weight totals. Inputs are assumed
non-negative; a zero denominator yields 0 ("no data") instead of raising.
"""

from wastekpi.domain.kpi.value_objects import (
    KPIResult,
    MonthlyTrend,
    TrendDirection,
    WasteMetrics,
)
from wastekpi.domain.shared.formatting import KG_PER_TON


def sorting_rate(total: float, mixed: float) -> float:
    """Sorting rate (%) = (total - mixed) / total * 100."""
    if total == 0:
        return 0.0
    return (total - mixed) / total * 100


def real_recycling_rate(
    recycled: float,
    thermal_recycled: float,
    total: float,
) -> float:
    """Real recycling rate (%) = (recycled + thermal recycled) / total * 100."""
    if total == 0:
        return 0.0
    return (recycled + thermal_recycled) / total * 100


def final_disposal_rate(final_disposal: float, total: float) -> float:
    """Final disposal rate (%) = final disposal / total * 100."""
    if total == 0:
        return 0.0
    return final_disposal / total * 100


def waste_intensity(total_kg: float, construction_amount: float) -> float:
    """Waste intensity (t per 100M JPY) = total (t) / construction amount."""
    if construction_amount == 0:
        return 0.0
    return (total_kg / KG_PER_TON) / construction_amount


def derive_kpis(metrics: WasteMetrics) -> KPIResult:
    """Compute all KPIs for an aggregate.

    ``waste_intensity`` is only set when the aggregate carries a positive
    construction amount; otherwise it stays ``None``.
    """
    intensity = None
    if metrics.has_construction_amount:
        intensity = waste_intensity(
            metrics.total_waste,
            metrics.construction_amount,  # type: ignore[arg-type]
        )

    return KPIResult(
        sorting_rate=sorting_rate(metrics.total_waste, metrics.mixed_waste),
        real_recycling_rate=real_recycling_rate(
            metrics.recycled_waste,
            metrics.thermal_recycled_waste,
            metrics.total_waste,
        ),
        final_disposal_rate=final_disposal_rate(
            metrics.final_disposal_waste,
            metrics.total_waste,
        ),
        waste_intensity=intensity,
    )


def achievement_rate(actual: float, target: float) -> float:
    """Achievement rate (%) of an actual value against its target."""
    if target == 0:
        return 0.0
    return actual / target * 100


def monthly_trend(current: float, previous: float) -> MonthlyTrend:
    """Compare a value with its previous-period value."""
    delta = current - previous
    percentage = delta / previous * 100 if previous != 0 else 0.0

    if delta > 0:
        direction = TrendDirection.UP
    elif delta < 0:
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.FLAT

    return MonthlyTrend(delta=delta, percentage=percentage, direction=direction)
