"""Value objects for KPI computation."""

from wastekpi.domain.kpi.value_objects.kpi_result import KPIResult
from wastekpi.domain.kpi.value_objects.monthly_trend import (
    MonthlyTrend,
    TrendDirection,
)
from wastekpi.domain.kpi.value_objects.waste_metrics import WasteMetrics

__all__ = [
    "KPIResult",
    "MonthlyTrend",
    "TrendDirection",
    "WasteMetrics",
]
