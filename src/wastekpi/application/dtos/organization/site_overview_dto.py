"""Site listing DTO."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from wastekpi.domain.organization import SiteStatus


@dataclass(frozen=True)
class SiteOverviewItem:
    """A site with its branch name and the waste total of one period."""

    site_id: str
    site_code: str
    site_name: str
    branch_id: str
    branch_name: str
    construction_type: str
    status: SiteStatus
    total_waste: float
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    construction_amount: Optional[float] = None
