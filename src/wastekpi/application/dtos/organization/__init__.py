"""Organization DTOs."""

from wastekpi.application.dtos.organization.site_overview_dto import SiteOverviewItem

__all__ = ["SiteOverviewItem"]
