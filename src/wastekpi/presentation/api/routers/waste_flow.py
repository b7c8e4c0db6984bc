"""Waste flow router providing Sankey diagram data."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Query

from wastekpi.application.queries import WasteFlowQuery
from wastekpi.domain.shared import period_label
from wastekpi.presentation.api.dependencies import AppSettings, SourceFactoryDep
from wastekpi.presentation.api.routers.params import YearMonthParam
from wastekpi.presentation.api.schemas.waste_flow import (
    SankeyLinkResponse,
    SankeyNodeResponse,
    WasteFlowResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

OptionalIdParam = Annotated[Optional[str], Query()]


@router.get(
    "",
    summary="Get Sankey diagram data for waste flow",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Sankey nodes and links for waste flow visualization"},
    },
)
def get_waste_flow(
    factory: SourceFactoryDep,
    settings: AppSettings,
    year_month: YearMonthParam = None,
    site_id: OptionalIdParam = None,
    site_code: OptionalIdParam = None,
    branch_id: OptionalIdParam = None,
) -> WasteFlowResponse:
    """
    Get Sankey diagram data showing how waste flows to treatment.

    **Flow structure:**
    - Total waste → waste types (largest first)
    - Waste type → Recycled (material + thermal) and Final disposal

    **Scope:** `site_code` wins over `site_id`, which wins over
    `branch_id`. Without any of them the company totals are used.
    """
    period = year_month or settings.default_year_month
    query = WasteFlowQuery.from_factory(factory)
    result = query.execute(
        period,
        site_id=site_id,
        site_code=site_code,
        branch_id=branch_id,
    )

    return WasteFlowResponse(
        nodes=[SankeyNodeResponse.model_validate(node) for node in result.nodes],
        links=[SankeyLinkResponse.model_validate(link) for link in result.links],
        year_month=result.year_month,
        period_label=period_label(result.year_month),
        scope=result.scope,
        total_weight=result.total_weight,
        message=result.message,
    )
