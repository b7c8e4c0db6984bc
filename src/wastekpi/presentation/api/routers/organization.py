"""Organization router: branches, sites and available periods."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from wastekpi.application.queries import (
    AvailablePeriodsQuery,
    ListBranchesQuery,
    SiteOverviewQuery,
)
from wastekpi.presentation.api.dependencies import AppSettings, SourceFactoryDep
from wastekpi.presentation.api.routers.params import YearMonthParam
from wastekpi.presentation.api.schemas.organization import (
    BranchResponse,
    PeriodsResponse,
    SiteOverviewResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/branches", summary="List branches")
def list_branches(
    factory: SourceFactoryDep,
    include_company: Annotated[
        bool,
        Query(description="Include the whole-company branch"),
    ] = False,
) -> list[BranchResponse]:
    query = ListBranchesQuery.from_factory(factory)
    branches = query.execute(include_company=include_company)
    return [BranchResponse.model_validate(branch) for branch in branches]


@router.get(
    "/sites",
    summary="List sites with their period totals",
    response_model_exclude_none=True,
)
def list_sites(
    factory: SourceFactoryDep,
    settings: AppSettings,
    year_month: YearMonthParam = None,
) -> list[SiteOverviewResponse]:
    """
    List all sites, active first and then by newest start date.

    Each site carries the total waste of the requested period.
    """
    query = SiteOverviewQuery.from_factory(factory)
    items = query.execute(year_month or settings.default_year_month)
    return [SiteOverviewResponse.model_validate(item) for item in items]


@router.get("/periods", summary="List periods with data")
def list_periods(factory: SourceFactoryDep) -> PeriodsResponse:
    query = AvailablePeriodsQuery.from_factory(factory)
    periods = query.execute()
    return PeriodsResponse(periods=periods, latest=periods[-1] if periods else None)
