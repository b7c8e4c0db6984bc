"""Organization domain: company, branches and sites."""

from wastekpi.domain.organization.entities import Branch, Site, SiteStatus
from wastekpi.domain.organization.exceptions import (
    BranchNotFoundError,
    MissingTargetError,
    SiteNotFoundError,
)
from wastekpi.domain.organization.hierarchy_level import HierarchyLevel
from wastekpi.domain.organization.well_known_codes import WellKnownCodes

__all__ = [
    # Entities
    "Branch",
    "Site",
    "SiteStatus",
    "HierarchyLevel",
    # Well-known codes
    "WellKnownCodes",
    # Exceptions
    "BranchNotFoundError",
    "MissingTargetError",
    "SiteNotFoundError",
]
