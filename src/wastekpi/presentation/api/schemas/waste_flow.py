"""Pydantic schemas for the waste flow (Sankey) endpoint."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SankeyNodeResponse(BaseModel):
    """Node of the Sankey diagram, referenced by its list index."""

    name: str = Field(description="Display label")
    color: Optional[str] = Field(default=None, description="Hex color")

    model_config = ConfigDict(from_attributes=True)


class SankeyLinkResponse(BaseModel):
    source: int = Field(description="Source node index")
    target: int = Field(description="Target node index")
    value: float = Field(description="Flow weight (kg)")

    model_config = ConfigDict(from_attributes=True)


class WasteFlowResponse(BaseModel):
    """Sankey diagram data: total → waste types → treatment.

    **Chart libraries:**
    - recharts Sankey
    - D3.js sankey
    - plotly.js
    """

    nodes: list[SankeyNodeResponse]
    links: list[SankeyLinkResponse]
    year_month: str
    period_label: str
    scope: str = Field(description="'site:<code>', 'branch:<id>' or 'company'")
    total_weight: float = Field(description="Total waste of the selection (kg)")
    message: Optional[str] = Field(
        default=None,
        description="Set when no records matched the selection",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "nodes": [
                    {"name": "Total waste", "color": "#616161"},
                    {"name": "concrete debris", "color": "#795548"},
                    {"name": "Recycled", "color": "#4CAF50"},
                    {"name": "Final disposal", "color": "#F44336"},
                ],
                "links": [
                    {"source": 0, "target": 1, "value": 600.0},
                    {"source": 1, "target": 2, "value": 590.0},
                    {"source": 1, "target": 3, "value": 10.0},
                ],
                "year_month": "2024-04",
                "period_label": "Apr 2024",
                "scope": "company",
                "total_weight": 600.0,
            }
        }
    )
