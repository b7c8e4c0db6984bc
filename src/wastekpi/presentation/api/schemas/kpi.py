"""Pydantic schemas for KPI endpoints.

Optional figures (``construction_amount``, ``waste_intensity``) are left
out of the JSON body when they do not apply; routes serialize with
``response_model_exclude_none``.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from wastekpi.domain.kpi import KPIKind, KPIRating, TrendDirection
from wastekpi.domain.organization import HierarchyLevel
from wastekpi.domain.shared import period_label


class KPIFiguresResponse(BaseModel):
    """Weights (kg) and KPIs shared by every hierarchy level."""

    year_month: str = Field(description="Period in YYYY-MM format")

    total_waste: float = Field(description="Total waste (kg)")
    sorted_waste: float = Field(description="Sorted waste (kg)")
    mixed_waste: float = Field(description="Mixed waste (kg)")
    recycled_waste: float = Field(description="Material recycling (kg)")
    thermal_recycled_waste: float = Field(description="Thermal recycling (kg)")
    final_disposal_waste: float = Field(description="Final disposal (kg)")

    sorting_rate: float = Field(description="Sorting rate (%)")
    real_recycling_rate: float = Field(description="Real recycling rate (%)")
    final_disposal_rate: float = Field(description="Final disposal rate (%)")

    construction_amount: Optional[float] = Field(
        default=None,
        description="Construction amount (100M JPY), omitted when not declared",
    )
    waste_intensity: Optional[float] = Field(
        default=None,
        description="Waste intensity (t per 100M JPY), omitted without amount",
    )

    model_config = ConfigDict(from_attributes=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def period_label(self) -> str:
        """Human-readable label for chart axes (e.g. 'Apr 2024')."""
        return period_label(self.year_month)


class SiteKPIResponse(KPIFiguresResponse):
    site_id: str
    site_code: str
    site_name: str
    branch_name: str

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "year_month": "2024-04",
                "period_label": "Apr 2024",
                "site_id": "S001",
                "site_code": "SITE001",
                "site_name": "Harbor Tower",
                "branch_name": "Tokyo Branch",
                "total_waste": 12500.0,
                "sorted_waste": 11250.0,
                "mixed_waste": 1250.0,
                "recycled_waste": 9800.0,
                "thermal_recycled_waste": 1200.0,
                "final_disposal_waste": 300.0,
                "sorting_rate": 90.0,
                "real_recycling_rate": 88.0,
                "final_disposal_rate": 2.4,
                "construction_amount": 250.0,
                "waste_intensity": 0.05,
            }
        },
    )


class BranchKPIResponse(KPIFiguresResponse):
    branch_id: str
    branch_code: str
    branch_name: str
    site_count: int = Field(description="Number of active sites")


class CompanyKPIResponse(KPIFiguresResponse):
    branch_count: int = Field(description="Number of branches (company excluded)")
    site_count: int = Field(description="Number of active sites")


LevelKPIResponse = Union[SiteKPIResponse, BranchKPIResponse, CompanyKPIResponse]

LEVEL_RESPONSE_MODELS: dict[HierarchyLevel, type[KPIFiguresResponse]] = {
    HierarchyLevel.SITE: SiteKPIResponse,
    HierarchyLevel.BRANCH: BranchKPIResponse,
    HierarchyLevel.COMPANY: CompanyKPIResponse,
}


class KPITrendResponse(BaseModel):
    """Per-period KPIs, oldest first."""

    level: HierarchyLevel = Field(description="site, branch or company")
    target_id: Optional[str] = Field(default=None, description="Site or branch id")
    months: int = Field(description="Requested number of periods")
    data: list[LevelKPIResponse] = Field(
        description="Ascending by period; periods without a result are skipped",
    )


class MonthlyTrendResponse(BaseModel):
    delta: float = Field(description="Current minus previous value")
    percentage: float = Field(description="Relative change (%), 0 without base")
    direction: TrendDirection

    model_config = ConfigDict(from_attributes=True)


class KPIIndicatorResponse(BaseModel):
    """One KPI with its target, rating and month-over-month trend."""

    kind: KPIKind
    value: float
    target: float
    achievement_rate: float = Field(description="value / target * 100")
    rating: KPIRating
    rating_color: str = Field(description="Display color of the rating")
    trend: Optional[MonthlyTrendResponse] = Field(
        default=None,
        description="Omitted when no earlier period carries this KPI",
    )


class KPISummaryResponse(BaseModel):
    level: HierarchyLevel
    year_month: str
    previous_year_month: Optional[str] = Field(
        default=None,
        description="Closest earlier period with data",
    )
    current: LevelKPIResponse
    indicators: list[KPIIndicatorResponse]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "level": "company",
                "year_month": "2024-04",
                "previous_year_month": "2024-03",
                "current": {"year_month": "2024-04", "total_waste": 1000.0},
                "indicators": [
                    {
                        "kind": "sorting_rate",
                        "value": 92.5,
                        "target": 90.0,
                        "achievement_rate": 102.8,
                        "rating": "good",
                        "rating_color": "#4CAF50",
                        "trend": {
                            "delta": 1.5,
                            "percentage": 1.6,
                            "direction": "up",
                        },
                    }
                ],
            }
        }
    )
