"""KPI router for site, branch and company dashboards.

All figures are computed on request from the record source; there is no
caching between requests.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Query

from wastekpi.application.queries import (
    BranchComparisonQuery,
    BranchKPIQuery,
    CompanyKPIQuery,
    KPISummaryQuery,
    KPITrendQuery,
    SiteKPIQuery,
)
from wastekpi.domain.kpi import KPIKind
from wastekpi.domain.organization import (
    BranchNotFoundError,
    HierarchyLevel,
    MissingTargetError,
    SiteNotFoundError,
)
from wastekpi.presentation.api.dependencies import AppSettings, SourceFactoryDep
from wastekpi.presentation.api.routers.params import YearMonthParam
from wastekpi.presentation.api.schemas.kpi import (
    LEVEL_RESPONSE_MODELS,
    BranchKPIResponse,
    CompanyKPIResponse,
    KPIIndicatorResponse,
    KPISummaryResponse,
    KPITrendResponse,
    MonthlyTrendResponse,
    SiteKPIResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

LevelParam = Annotated[
    HierarchyLevel,
    Query(alias="type", description="Hierarchy level: site, branch or company"),
]
TargetIdParam = Annotated[
    Optional[str],
    Query(description="Site or branch id (required unless type=company)"),
]
MonthsParam = Annotated[
    Optional[int],
    Query(ge=1, le=60, description="Number of most recent periods"),
]


def _not_found(level: HierarchyLevel, target_id: Optional[str]) -> Exception:
    if level is HierarchyLevel.SITE:
        return SiteNotFoundError(site_id=target_id)
    return BranchNotFoundError(target_id or "")


@router.get(
    "/company",
    summary="Get company-wide KPIs",
    response_model_exclude_none=True,
    responses={
        200: {"description": "KPIs from the pre-aggregated company records"},
    },
)
def get_company_kpi(
    factory: SourceFactoryDep,
    settings: AppSettings,
    year_month: YearMonthParam = None,
) -> CompanyKPIResponse:
    """
    Get company-wide waste KPIs for a period.

    Weights are read from the company's own aggregated records; they are
    not summed from branches. Waste intensity uses the construction
    amounts of all active sites.
    """
    query = CompanyKPIQuery.from_factory(factory)
    result = query.execute(year_month or settings.default_year_month)
    return CompanyKPIResponse.model_validate(result)


@router.get(
    "/branches",
    summary="Compare branches",
    response_model_exclude_none=True,
    responses={
        200: {"description": "KPIs of every branch that produced waste"},
    },
)
def list_branch_kpis(
    factory: SourceFactoryDep,
    settings: AppSettings,
    year_month: YearMonthParam = None,
) -> list[BranchKPIResponse]:
    """
    Get KPIs of every branch for a bar-chart comparison.

    Branches without waste in the period are left out.
    """
    query = BranchComparisonQuery.from_factory(factory)
    results = query.execute(year_month or settings.default_year_month)
    return [BranchKPIResponse.model_validate(result) for result in results]


@router.get(
    "/branches/{branch_id}",
    summary="Get branch KPIs",
    response_model_exclude_none=True,
    responses={
        200: {"description": "KPIs rolled up over the branch's active sites"},
        404: {"description": "Branch not found"},
    },
)
def get_branch_kpi(
    branch_id: str,
    factory: SourceFactoryDep,
    settings: AppSettings,
    year_month: YearMonthParam = None,
) -> BranchKPIResponse:
    """Get KPIs of one branch, aggregated over its active sites."""
    query = BranchKPIQuery.from_factory(factory)
    result = query.execute(branch_id, year_month or settings.default_year_month)
    if result is None:
        raise BranchNotFoundError(branch_id)
    return BranchKPIResponse.model_validate(result)


@router.get(
    "/sites/by-code/{site_code}",
    summary="Get site KPIs by site code",
    response_model_exclude_none=True,
    responses={
        200: {"description": "KPIs of a single site"},
        404: {"description": "Site not found"},
    },
)
def get_site_kpi_by_code(
    site_code: str,
    factory: SourceFactoryDep,
    settings: AppSettings,
    year_month: YearMonthParam = None,
) -> SiteKPIResponse:
    query = SiteKPIQuery.from_factory(factory)
    result = query.execute_by_code(
        site_code,
        year_month or settings.default_year_month,
    )
    if result is None:
        raise SiteNotFoundError(site_code=site_code)
    return SiteKPIResponse.model_validate(result)


@router.get(
    "/sites/{site_id}",
    summary="Get site KPIs",
    response_model_exclude_none=True,
    responses={
        200: {"description": "KPIs of a single site"},
        404: {"description": "Site not found"},
    },
)
def get_site_kpi(
    site_id: str,
    factory: SourceFactoryDep,
    settings: AppSettings,
    year_month: YearMonthParam = None,
) -> SiteKPIResponse:
    """
    Get KPIs of one site.

    Waste intensity is only present when the site declares a positive
    construction amount.
    """
    query = SiteKPIQuery.from_factory(factory)
    result = query.execute(site_id, year_month or settings.default_year_month)
    if result is None:
        raise SiteNotFoundError(site_id=site_id)
    return SiteKPIResponse.model_validate(result)


@router.get(
    "/trend",
    summary="Get KPI trend over recent periods",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Per-period KPIs, oldest first"},
        400: {"description": "target_id missing for site or branch"},
    },
)
def get_kpi_trend(
    level: LevelParam,
    factory: SourceFactoryDep,
    settings: AppSettings,
    target_id: TargetIdParam = None,
    months: MonthsParam = None,
) -> KPITrendResponse:
    """
    Get KPIs for the most recent periods with data.

    Returns time series data suitable for:
    - Line charts of the three rates
    - Bar charts of total waste per month

    Periods come from the data itself, so there are no gaps and fewer
    points than `months` when less history exists.
    """
    if level.requires_target_id() and not target_id:
        raise MissingTargetError(level.value)

    months = months or settings.default_trend_months
    query = KPITrendQuery.from_factory(factory)
    series = query.execute(level, target_id=target_id, months=months)
    response_model = LEVEL_RESPONSE_MODELS[level]

    return KPITrendResponse(
        level=level,
        target_id=target_id,
        months=months,
        data=[response_model.model_validate(point) for point in series],
    )


@router.get(
    "/summary",
    summary="Get KPI summary with targets and month-over-month trends",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Current KPIs rated against their targets"},
        400: {"description": "target_id missing for site or branch"},
        404: {"description": "Site or branch not found"},
    },
)
def get_kpi_summary(
    level: LevelParam,
    factory: SourceFactoryDep,
    settings: AppSettings,
    target_id: TargetIdParam = None,
    year_month: YearMonthParam = None,
) -> KPISummaryResponse:
    """
    Get summary cards: each KPI with target, achievement rate, rating and
    the change against the closest earlier period.
    """
    if level.requires_target_id() and not target_id:
        raise MissingTargetError(level.value)

    period = year_month or settings.default_year_month
    query = KPISummaryQuery.from_factory(factory)
    summary = query.execute(level, target_id, period)
    if summary is None:
        raise _not_found(level, target_id)

    indicators = []
    for kind in KPIKind:
        if kind not in summary.targets:
            continue
        value = summary.current.kpi_value(kind)
        trend = summary.trends.get(kind)
        indicators.append(
            KPIIndicatorResponse(
                kind=kind,
                value=value,
                target=summary.targets[kind],
                achievement_rate=summary.achievement_rates[kind],
                rating=summary.ratings[kind],
                rating_color=summary.ratings[kind].color,
                trend=MonthlyTrendResponse.model_validate(trend) if trend else None,
            ),
        )

    return KPISummaryResponse(
        level=level,
        year_month=period,
        previous_year_month=(
            summary.previous.year_month if summary.previous else None
        ),
        current=LEVEL_RESPONSE_MODELS[level].model_validate(summary.current),
        indicators=indicators,
    )
