"""Pydantic schemas for organization endpoints."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wastekpi.domain.organization import SiteStatus


class BranchResponse(BaseModel):
    id: str
    code: str
    name: str
    region: str = ""

    model_config = ConfigDict(from_attributes=True)


class SiteOverviewResponse(BaseModel):
    """A site with its branch and period total."""

    site_id: str
    site_code: str
    site_name: str
    branch_id: str
    branch_name: str = Field(description="'Unknown' when the branch is missing")
    construction_type: str
    status: SiteStatus
    total_waste: float = Field(description="Total waste of the period (kg)")
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    construction_amount: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)


class PeriodsResponse(BaseModel):
    periods: list[str] = Field(description="Periods with data, oldest first")
    latest: Optional[str] = Field(default=None, description="Most recent period")
