"""Monthly waste observation for one site."""

from pydantic import BaseModel, ConfigDict, field_validator

from wastekpi.domain.shared.year_month import is_valid_year_month


class WasteRecord(BaseModel):
    """One month of waste weights (kg) for one site and waste type.

    Records reference their site by code, not by id. Weight fields are not
    required to add up: recycled + thermal + final disposal may be less than
    the total (e.g. material still in interim storage).
    """

    site_code: str
    year_month: str
    waste_type: str
    total_weight: float = 0.0
    sorted_weight: float = 0.0
    mixed_weight: float = 0.0
    recycled_weight: float = 0.0
    thermal_recycled_weight: float = 0.0
    final_disposal_weight: float = 0.0

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("year_month")
    @classmethod
    def validate_year_month(cls, v: str) -> str:
        if not is_valid_year_month(v):
            msg = f"year_month must be in YYYY-MM format, got {v!r}"
            raise ValueError(msg)
        return v

    @property
    def recovered_weight(self) -> float:
        """Material plus thermal recycling."""
        return self.recycled_weight + self.thermal_recycled_weight
