"""Waste type categories and their display colors."""

from enum import Enum


class WasteCategory(str, Enum):
    """Known waste categories; any unrecognized label falls into OTHER."""

    CONCRETE = "concrete debris"
    WOOD = "wood waste"
    METAL = "metal scrap"
    PLASTIC = "plastic"
    PAPER = "paper"
    MIXED = "mixed waste"
    GLASS = "glass"
    OTHER = "other"

    @classmethod
    def from_label(cls, label: str) -> "WasteCategory":
        normalized = label.strip().lower()
        for category in cls:
            if category.value == normalized:
                return category
        return cls.OTHER

    @property
    def color(self) -> str:
        return WASTE_CATEGORY_COLORS[self]


WASTE_CATEGORY_COLORS: dict[WasteCategory, str] = {
    WasteCategory.CONCRETE: "#795548",  # brown
    WasteCategory.WOOD: "#8BC34A",  # light green
    WasteCategory.METAL: "#607D8B",  # blue grey
    WasteCategory.PLASTIC: "#03A9F4",  # light blue
    WasteCategory.PAPER: "#FFC107",  # amber
    WasteCategory.MIXED: "#9E9E9E",  # grey
    WasteCategory.GLASS: "#00BCD4",  # cyan
    WasteCategory.OTHER: "#E91E63",  # pink
}


def waste_type_color(label: str) -> str:
    """Color for a free-form waste type label."""
    return WasteCategory.from_label(label).color
