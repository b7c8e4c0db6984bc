"""KPI DTOs."""

from wastekpi.application.dtos.kpi.kpi_dto import (
    BranchKPI,
    CompanyKPI,
    KPIFigures,
    KPISummary,
    LevelKPI,
    SiteKPI,
    kpi_fields,
)

__all__ = [
    "BranchKPI",
    "CompanyKPI",
    "KPIFigures",
    "KPISummary",
    "LevelKPI",
    "SiteKPI",
    "kpi_fields",
]
