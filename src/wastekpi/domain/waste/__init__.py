"""Waste domain layer exports."""

from wastekpi.domain.waste.value_objects import (
    WASTE_CATEGORY_COLORS,
    WasteCategory,
    WasteRecord,
    waste_type_color,
)

__all__ = [
    "WASTE_CATEGORY_COLORS",
    "WasteCategory",
    "WasteRecord",
    "waste_type_color",
]
