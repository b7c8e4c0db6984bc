"""Organization hierarchy levels KPIs can be computed for."""

from enum import Enum


class HierarchyLevel(str, Enum):
    SITE = "site"
    BRANCH = "branch"
    COMPANY = "company"

    def requires_target_id(self) -> bool:
        return self is not HierarchyLevel.COMPANY
