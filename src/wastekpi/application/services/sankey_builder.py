"""Turn per-waste-type flows into a positionally addressed Sankey graph.

Layout (for ``n`` flows)::

    0          total
    1 .. n     one node per flow, in input order
    n + 1      recycled
    n + 2      final disposal

The first ``n`` links run from the total node to each flow node. Terminal
links follow per flow and are only emitted for positive weights.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from wastekpi.application.dtos.flow import (
    SankeyGraph,
    SankeyLink,
    SankeyNode,
    WasteFlowItem,
)
from wastekpi.domain.waste import waste_type_color

logger = logging.getLogger(__name__)

TOTAL_NODE_NAME = "Total waste"
RECYCLED_NODE_NAME = "Recycled"
FINAL_DISPOSAL_NODE_NAME = "Final disposal"

TOTAL_COLOR = "#616161"  # gray-700
RECYCLED_COLOR = "#4CAF50"  # success-500
FINAL_DISPOSAL_COLOR = "#F44336"  # danger-500


def build_sankey_graph(flows: Sequence[WasteFlowItem]) -> SankeyGraph:
    """Build the Sankey graph for ``flows`` (already ordered by the caller)."""
    nodes: list[SankeyNode] = [SankeyNode(name=TOTAL_NODE_NAME, color=TOTAL_COLOR)]
    links: list[SankeyLink] = []

    for idx, flow in enumerate(flows, start=1):
        nodes.append(
            SankeyNode(
                name=flow.waste_type,
                color=waste_type_color(flow.waste_type),
            ),
        )
        links.append(SankeyLink(source=0, target=idx, value=flow.total_weight))

    recycled_idx = len(flows) + 1
    final_disposal_idx = len(flows) + 2
    nodes.append(SankeyNode(name=RECYCLED_NODE_NAME, color=RECYCLED_COLOR))
    nodes.append(
        SankeyNode(name=FINAL_DISPOSAL_NODE_NAME, color=FINAL_DISPOSAL_COLOR),
    )

    for idx, flow in enumerate(flows, start=1):
        recovered = flow.recovered_weight
        if recovered > 0:
            links.append(
                SankeyLink(source=idx, target=recycled_idx, value=recovered),
            )
        if flow.final_disposal_weight > 0:
            links.append(
                SankeyLink(
                    source=idx,
                    target=final_disposal_idx,
                    value=flow.final_disposal_weight,
                ),
            )

    logger.debug(
        "Built Sankey graph with %d nodes and %d links",
        len(nodes),
        len(links),
    )
    return SankeyGraph(nodes=nodes, links=links)
