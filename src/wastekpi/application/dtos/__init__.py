"""Data transfer objects returned by application queries."""

from wastekpi.application.dtos.flow import (
    SankeyData,
    SankeyGraph,
    SankeyLink,
    SankeyNode,
    WasteFlowItem,
)
from wastekpi.application.dtos.kpi import (
    BranchKPI,
    CompanyKPI,
    KPIFigures,
    KPISummary,
    LevelKPI,
    SiteKPI,
    kpi_fields,
)
from wastekpi.application.dtos.organization import SiteOverviewItem

__all__ = [
    "BranchKPI",
    "CompanyKPI",
    "KPIFigures",
    "KPISummary",
    "LevelKPI",
    "SankeyData",
    "SankeyGraph",
    "SankeyLink",
    "SankeyNode",
    "SiteKPI",
    "SiteOverviewItem",
    "WasteFlowItem",
    "kpi_fields",
]
