"""Organization queries: branches, sites and periods."""

from wastekpi.application.queries.organization.available_periods_query import (
    AvailablePeriodsQuery,
)
from wastekpi.application.queries.organization.list_branches_query import (
    ListBranchesQuery,
)
from wastekpi.application.queries.organization.site_overview_query import (
    SiteOverviewQuery,
)

__all__ = [
    "AvailablePeriodsQuery",
    "ListBranchesQuery",
    "SiteOverviewQuery",
]
