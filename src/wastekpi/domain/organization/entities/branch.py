"""Branch entity."""

from pydantic import BaseModel, ConfigDict, field_validator

from wastekpi.domain.organization.well_known_codes import WellKnownCodes


class Branch(BaseModel):
    """An organizational unit owning construction sites.

    The branch with code ``WellKnownCodes.COMPANY_BRANCH`` stands for the
    whole company and is not a real branch.
    """

    id: str
    code: str
    name: str
    region: str = ""

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("id", "code")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        if not v:
            msg = f"Branch {info.field_name} cannot be empty"
            raise ValueError(msg)
        return v

    @property
    def is_company(self) -> bool:
        return self.code == WellKnownCodes.COMPANY_BRANCH

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"
