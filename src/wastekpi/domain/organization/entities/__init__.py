from wastekpi.domain.organization.entities.branch import Branch
from wastekpi.domain.organization.entities.site import Site
from wastekpi.domain.organization.entities.site_status import SiteStatus

__all__ = ["Branch", "Site", "SiteStatus"]
