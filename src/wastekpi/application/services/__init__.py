"""Application services."""

from wastekpi.application.services.sankey_builder import build_sankey_graph

__all__ = ["build_sankey_graph"]
