"""Site entity."""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from wastekpi.domain.organization.entities.site_status import SiteStatus
from wastekpi.domain.organization.well_known_codes import WellKnownCodes


class Site(BaseModel):
    """A physical construction location belonging to exactly one branch.

    ``construction_amount`` is the construction investment (unit: 100 million
    JPY) used as the waste intensity denominator. ``None`` means the site
    does not declare an amount, which is different from a declared zero.
    """

    id: str
    code: str
    name: str
    branch_id: str
    construction_type: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    construction_amount: Optional[float] = None
    status: SiteStatus = SiteStatus.ACTIVE

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("start_date", "end_date", "construction_amount", mode="before")
    @classmethod
    def empty_to_none(cls, v: Any) -> Any:
        """CSV cells are strings; an empty cell means the value is absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def is_active(self) -> bool:
        return self.status.is_operating()

    @property
    def is_company(self) -> bool:
        return self.code == WellKnownCodes.COMPANY_SITE

    @property
    def positive_construction_amount(self) -> Optional[float]:
        """The construction amount when it can serve as a denominator."""
        if self.construction_amount is not None and self.construction_amount > 0:
            return self.construction_amount
        return None

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"
