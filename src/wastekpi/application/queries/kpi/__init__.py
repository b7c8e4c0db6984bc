"""KPI queries for site, branch and company dashboards."""

from wastekpi.application.queries.kpi.branch_comparison_query import (
    BranchComparisonQuery,
)
from wastekpi.application.queries.kpi.branch_kpi_query import (
    BranchKPIQuery,
    compute_branch_kpi,
)
from wastekpi.application.queries.kpi.company_kpi_query import CompanyKPIQuery
from wastekpi.application.queries.kpi.kpi_summary_query import KPISummaryQuery
from wastekpi.application.queries.kpi.kpi_trend_query import (
    DEFAULT_TREND_MONTHS,
    KPITrendQuery,
)
from wastekpi.application.queries.kpi.level_kpi_query import LevelKPIQuery
from wastekpi.application.queries.kpi.site_kpi_query import SiteKPIQuery

__all__ = [
    "DEFAULT_TREND_MONTHS",
    "BranchComparisonQuery",
    "BranchKPIQuery",
    "CompanyKPIQuery",
    "KPISummaryQuery",
    "KPITrendQuery",
    "LevelKPIQuery",
    "SiteKPIQuery",
    "compute_branch_kpi",
]
