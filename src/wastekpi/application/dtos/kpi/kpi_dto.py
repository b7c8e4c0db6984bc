"""KPI DTOs for dashboards and trend charts.

Each result flattens the aggregate weights and the derived KPIs next to
the identity fields of the target, so the presentation layer can render
summary cards and comparison bars without further lookups.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from wastekpi.domain.kpi import (
    KPIKind,
    KPIRating,
    KPIResult,
    MonthlyTrend,
    WasteMetrics,
)
from wastekpi.domain.organization import HierarchyLevel


@dataclass(frozen=True, kw_only=True)
class KPIFigures:
    """Aggregate weights (kg) and KPIs for one target and period."""

    year_month: str

    # Summed weights
    total_waste: float
    sorted_waste: float
    mixed_waste: float
    recycled_waste: float
    thermal_recycled_waste: float
    final_disposal_waste: float

    # Derived KPIs (%)
    sorting_rate: float
    real_recycling_rate: float
    final_disposal_rate: float

    # Optional: None means "not applicable", not zero
    construction_amount: Optional[float] = None
    waste_intensity: Optional[float] = None

    @property
    def metrics(self) -> WasteMetrics:
        return WasteMetrics(
            total_waste=self.total_waste,
            sorted_waste=self.sorted_waste,
            mixed_waste=self.mixed_waste,
            recycled_waste=self.recycled_waste,
            thermal_recycled_waste=self.thermal_recycled_waste,
            final_disposal_waste=self.final_disposal_waste,
            construction_amount=self.construction_amount,
        )

    @property
    def kpis(self) -> KPIResult:
        return KPIResult(
            sorting_rate=self.sorting_rate,
            real_recycling_rate=self.real_recycling_rate,
            final_disposal_rate=self.final_disposal_rate,
            waste_intensity=self.waste_intensity,
        )

    def kpi_value(self, kind: KPIKind) -> Optional[float]:
        return getattr(self, kind.value)


def kpi_fields(
    year_month: str,
    metrics: WasteMetrics,
    kpis: KPIResult,
) -> dict[str, Any]:
    """Keyword arguments shared by all KPIFigures subclasses."""
    return {
        "year_month": year_month,
        "total_waste": metrics.total_waste,
        "sorted_waste": metrics.sorted_waste,
        "mixed_waste": metrics.mixed_waste,
        "recycled_waste": metrics.recycled_waste,
        "thermal_recycled_waste": metrics.thermal_recycled_waste,
        "final_disposal_waste": metrics.final_disposal_waste,
        "construction_amount": metrics.construction_amount,
        "sorting_rate": kpis.sorting_rate,
        "real_recycling_rate": kpis.real_recycling_rate,
        "final_disposal_rate": kpis.final_disposal_rate,
        "waste_intensity": kpis.waste_intensity,
    }


@dataclass(frozen=True, kw_only=True)
class SiteKPI(KPIFigures):
    """KPIs of a single site."""

    site_id: str
    site_code: str
    site_name: str
    branch_name: str


@dataclass(frozen=True, kw_only=True)
class BranchKPI(KPIFigures):
    """KPIs of a branch, rolled up over its active sites."""

    branch_id: str
    branch_code: str
    branch_name: str
    site_count: int  # Active sites


@dataclass(frozen=True, kw_only=True)
class CompanyKPI(KPIFigures):
    """Company-wide KPIs read from the pre-aggregated company records."""

    branch_count: int  # Excludes the whole-company branch
    site_count: int  # Active real sites


LevelKPI = Union[SiteKPI, BranchKPI, CompanyKPI]


@dataclass(frozen=True)
class KPISummary:
    """Current KPIs with month-over-month trends, targets and ratings.

    ``trends`` only holds entries for KPIs present in both periods, so it
    is empty when there is no earlier period.
    """

    level: HierarchyLevel
    current: LevelKPI
    previous: Optional[LevelKPI] = None
    trends: dict[KPIKind, MonthlyTrend] = field(default_factory=dict)
    targets: dict[KPIKind, float] = field(default_factory=dict)
    achievement_rates: dict[KPIKind, float] = field(default_factory=dict)
    ratings: dict[KPIKind, KPIRating] = field(default_factory=dict)
