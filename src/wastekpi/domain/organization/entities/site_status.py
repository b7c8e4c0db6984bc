"""Site lifecycle status enumeration."""

from enum import Enum


class SiteStatus(str, Enum):
    """Lifecycle status of a construction site."""

    ACTIVE = "active"  # Currently operating, included in rollups
    COMPLETED = "completed"
    SUSPENDED = "suspended"

    def is_operating(self) -> bool:
        return self is SiteStatus.ACTIVE
