"""Sankey diagram DTOs for waste flow visualization."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class WasteFlowItem:
    """Aggregated flow of one waste type for the Sankey transformer."""

    waste_type: str
    total_weight: float
    recycled_weight: float
    thermal_recycled_weight: float
    final_disposal_weight: float

    @property
    def recovered_weight(self) -> float:
        return self.recycled_weight + self.thermal_recycled_weight


@dataclass(frozen=True)
class SankeyNode:
    """A node in the Sankey diagram, addressed by its list position."""

    name: str
    color: Optional[str] = None


@dataclass(frozen=True)
class SankeyLink:
    """A flow (kg) between two node indices."""

    source: int
    target: int
    value: float


@dataclass
class SankeyGraph:
    """Positionally addressed nodes plus links referencing node indices."""

    nodes: list[SankeyNode] = field(default_factory=list)
    links: list[SankeyLink] = field(default_factory=list)


@dataclass
class SankeyData:
    """Complete data structure for a waste flow diagram."""

    nodes: list[SankeyNode] = field(default_factory=list)
    links: list[SankeyLink] = field(default_factory=list)
    year_month: str = ""
    scope: str = "company"  # "site:<code>" | "branch:<id>" | "company"
    total_weight: float = 0.0
    message: Optional[str] = None  # Set when no records matched
