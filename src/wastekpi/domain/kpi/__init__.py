"""KPI domain: formulas, aggregation and period windows."""

from wastekpi.domain.kpi.aggregation import (
    aggregate_by_waste_type,
    aggregate_records,
    total_construction_amount,
)
from wastekpi.domain.kpi.formulas import (
    achievement_rate,
    derive_kpis,
    final_disposal_rate,
    monthly_trend,
    real_recycling_rate,
    sorting_rate,
    waste_intensity,
)
from wastekpi.domain.kpi.periods import (
    available_periods,
    latest_periods,
    previous_period,
)
from wastekpi.domain.kpi.rating import (
    KPI_TARGETS,
    KPIKind,
    KPIRating,
    rate_kpi,
)
from wastekpi.domain.kpi.value_objects import (
    KPIResult,
    MonthlyTrend,
    TrendDirection,
    WasteMetrics,
)

__all__ = [
    # Value Objects
    "KPIResult",
    "MonthlyTrend",
    "TrendDirection",
    "WasteMetrics",
    # Formulas
    "achievement_rate",
    "derive_kpis",
    "final_disposal_rate",
    "monthly_trend",
    "real_recycling_rate",
    "sorting_rate",
    "waste_intensity",
    # Aggregation
    "aggregate_by_waste_type",
    "aggregate_records",
    "total_construction_amount",
    # Periods
    "available_periods",
    "latest_periods",
    "previous_period",
    # Rating
    "KPI_TARGETS",
    "KPIKind",
    "KPIRating",
    "rate_kpi",
]
