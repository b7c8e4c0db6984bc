"""Application queries - read-only operations over the record source."""

from wastekpi.application.queries.flow import WasteFlowQuery
from wastekpi.application.queries.kpi import (
    BranchComparisonQuery,
    BranchKPIQuery,
    CompanyKPIQuery,
    KPISummaryQuery,
    KPITrendQuery,
    LevelKPIQuery,
    SiteKPIQuery,
)
from wastekpi.application.queries.organization import (
    AvailablePeriodsQuery,
    ListBranchesQuery,
    SiteOverviewQuery,
)

__all__ = [
    "AvailablePeriodsQuery",
    "BranchComparisonQuery",
    "BranchKPIQuery",
    "CompanyKPIQuery",
    "KPISummaryQuery",
    "KPITrendQuery",
    "LevelKPIQuery",
    "ListBranchesQuery",
    "SiteKPIQuery",
    "SiteOverviewQuery",
    "WasteFlowQuery",
]
