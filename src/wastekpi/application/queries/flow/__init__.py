"""Waste flow queries."""

from wastekpi.application.queries.flow.waste_flow_query import WasteFlowQuery

__all__ = ["WasteFlowQuery"]
