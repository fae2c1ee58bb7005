"""Positional layout for the tiered curriculum graph.

Tiers are stacked top to bottom at a fixed vertical spacing. Within a tier,
nodes are spread evenly across the usable width: dividing the span into
``n + 1`` gaps leaves one gap of padding at each end.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from curriculum_graph.coordinates import Margins, Point
from curriculum_graph.tiers import TIER_ORDER

if TYPE_CHECKING:
    from curriculum_graph.graph.core import CurriculumGraph
    from curriculum_graph.tiers import NodeId

logger = logging.getLogger(__name__)

LAYER_SPACING = 200.0
DEFAULT_MARGINS = Margins()

# Floor for the horizontal span between margins
MIN_SPAN = 1.0


def compute_positions(
    graph: CurriculumGraph,
    width: float,
    *,
    margins: Margins | None = None,
    layer_spacing: float = LAYER_SPACING,
) -> dict[NodeId, Point]:
    """Compute the center of every node for a viewport *width*.

    Args:
        graph: Graph whose tier membership drives the layout
        width: Viewport width; non-positive or tiny widths are floored
        margins: Padding around the drawing area
        layer_spacing: Vertical distance between consecutive tiers

    Returns:
        Map of node id -> position
    """
    m = margins or DEFAULT_MARGINS
    span = max(width - m.left - m.right, MIN_SPAN)

    positions: dict[NodeId, Point] = {}
    for level, tier in enumerate(TIER_ORDER):
        nodes = graph.tier(tier)
        step = span / (len(nodes) + 1)
        y = m.top + level * layer_spacing
        for i, node in enumerate(nodes):
            positions[node.id] = Point(m.left + step * (i + 1), y)
    return positions


def assign_positions(
    graph: CurriculumGraph,
    width: float,
    height: float,
    *,
    margins: Margins | None = None,
    layer_spacing: float = LAYER_SPACING,
) -> CurriculumGraph:
    """Return a copy of *graph* with every node positioned for the viewport.

    Positions depend only on the viewport and tier membership, so calling
    this twice with the same dimensions yields identical geometry.

    Args:
        graph: Graph to lay out
        width: Viewport width
        height: Viewport height (tiers do not stretch vertically; kept so
            callers pass the full viewport)
        margins: Padding around the drawing area
        layer_spacing: Vertical distance between consecutive tiers

    Returns:
        New CurriculumGraph; the same node ids map to refreshed positions

    Example:
        >>> from curriculum_graph.generate import generate
        >>> from curriculum_graph.tiers import Tier
        >>> g = assign_positions(generate(seed=1), 700, 600)
        >>> g.tier(Tier.CLASS)[0].position
        Point(x=150.0, y=250.0)
    """
    positions = compute_positions(graph, width, margins=margins, layer_spacing=layer_spacing)
    logger.debug("Laid out %d nodes for viewport %sx%s", len(positions), width, height)
    return graph.with_positions(positions)


def layout_extent(
    *,
    margins: Margins | None = None,
    layer_spacing: float = LAYER_SPACING,
) -> float:
    """Minimum height that fits all five tiers plus the bottom margin."""
    m = margins or DEFAULT_MARGINS
    return m.top + (len(TIER_ORDER) - 1) * layer_spacing + m.bottom
