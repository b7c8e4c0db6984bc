"""Waste flow DTOs - Sankey diagram data structures."""

from wastekpi.application.dtos.flow.sankey_dto import (
    SankeyData,
    SankeyGraph,
    SankeyLink,
    SankeyNode,
    WasteFlowItem,
)

__all__ = [
    "SankeyData",
    "SankeyGraph",
    "SankeyLink",
    "SankeyNode",
    "WasteFlowItem",
]
