"""API request/response schemas."""

from wastekpi.presentation.api.schemas.kpi import (
    LEVEL_RESPONSE_MODELS,
    BranchKPIResponse,
    CompanyKPIResponse,
    KPIFiguresResponse,
    KPIIndicatorResponse,
    KPISummaryResponse,
    KPITrendResponse,
    LevelKPIResponse,
    MonthlyTrendResponse,
    SiteKPIResponse,
)
from wastekpi.presentation.api.schemas.organization import (
    BranchResponse,
    PeriodsResponse,
    SiteOverviewResponse,
)
from wastekpi.presentation.api.schemas.waste_flow import (
    SankeyLinkResponse,
    SankeyNodeResponse,
    WasteFlowResponse,
)

__all__ = [
    "LEVEL_RESPONSE_MODELS",
    "BranchKPIResponse",
    "BranchResponse",
    "CompanyKPIResponse",
    "KPIFiguresResponse",
    "KPIIndicatorResponse",
    "KPISummaryResponse",
    "KPITrendResponse",
    "LevelKPIResponse",
    "MonthlyTrendResponse",
    "PeriodsResponse",
    "SankeyLinkResponse",
    "SankeyNodeResponse",
    "SiteKPIResponse",
    "SiteOverviewResponse",
    "WasteFlowResponse",
]
