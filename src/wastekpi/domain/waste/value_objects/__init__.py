"""Value objects for the waste domain."""

from wastekpi.domain.waste.value_objects.waste_record import WasteRecord
from wastekpi.domain.waste.value_objects.waste_type import (
    WASTE_CATEGORY_COLORS,
    WasteCategory,
    waste_type_color,
)

__all__ = [
    "WASTE_CATEGORY_COLORS",
    "WasteCategory",
    "WasteRecord",
    "waste_type_color",
]
