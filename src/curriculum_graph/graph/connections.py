"""Connection tracing for a selected node.

Given a selection, ``resolve_connections`` derives the directed edges to
highlight. The traversal has three parts, emitted in this order:

1. Upward trace: follow parent references from the selected node until the
   Topic tier (e.g. lecture -> objective -> class -> topic). Lateral links
   are never followed upward.
2. Downward, one hop: every node in the tier below that references the
   selected node.
3. Lateral (course objectives only): every other objective whose lateral
   links include the selected one, then every objective the selected one
   links to that is not already covered.

Edges are not de-duplicated across parts: a node reachable along two
paths yields two edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from curriculum_graph.tiers import NodeId

if TYPE_CHECKING:
    from curriculum_graph.coordinates import Point
    from curriculum_graph.graph.core import CurriculumGraph


class EdgeDirection(str, Enum):
    """How an edge was reached from the selection."""

    UPWARD = "upward"
    DOWNWARD = "downward"
    LATERAL = "lateral"


@dataclass(frozen=True)
class Edge:
    """A derived directed connection between two nodes.

    Positions are copied from the graph the edge was resolved against, so
    resolve connections after assigning positions.
    """

    source: NodeId
    target: NodeId
    source_position: Point
    target_position: Point
    direction: EdgeDirection

    @property
    def id(self) -> str:
        """Stable edge id, e.g. ``'lecture-1-objective-1'``."""
        return f"{self.source}-{self.target}"

    @property
    def same_tier(self) -> bool:
        return self.source.tier is self.target.tier

    def endpoints(self) -> tuple[NodeId, NodeId]:
        return (self.source, self.target)

    def to_dict(self) -> dict[str, object]:
        """JSON-friendly form used by the CLI and the HTML page."""
        return {
            "id": self.id,
            "from": str(self.source),
            "to": str(self.target),
            "x1": self.source_position.x,
            "y1": self.source_position.y,
            "x2": self.target_position.x,
            "y2": self.target_position.y,
            "direction": self.direction.value,
        }


def resolve_connections(
    graph: CurriculumGraph,
    selected: NodeId | str | None,
) -> list[Edge]:
    """Resolve every edge to highlight for *selected*.

    Args:
        graph: Graph with positions assigned
        selected: Selected node, its string id, or None for no selection

    Returns:
        Edges in upward, downward, lateral order (empty for no selection)

    Raises:
        InvalidNodeIdError: If a string id is malformed
        NodeNotFoundError: If the node is not in the graph
    """
    if selected is None:
        return []

    node = graph.get_node(selected)
    edges: list[Edge] = []

    _trace_upward(graph, node.id, edges, visited=set())

    for child in graph.children_of(node.id):
        edges.append(_edge(node.id, node.position, child.id, child.position, EdgeDirection.DOWNWARD))

    sources = graph.lateral_sources(node.id)
    for other in sources:
        edges.append(_edge(node.id, node.position, other.id, other.position, EdgeDirection.LATERAL))

    linked_back = {other.id for other in sources}
    for other in graph.lateral_targets(node.id):
        if other.id not in linked_back:
            edges.append(_edge(node.id, node.position, other.id, other.position, EdgeDirection.LATERAL))

    return edges


def _trace_upward(
    graph: CurriculumGraph,
    node_id: NodeId,
    edges: list[Edge],
    visited: set[NodeId],
) -> None:
    """Append child->parent edges from *node_id* up to the Topic tier."""
    if node_id in visited:
        return
    visited.add(node_id)

    node = graph.get_node(node_id)
    for parent in graph.parents_of(node_id):
        edges.append(_edge(node.id, node.position, parent.id, parent.position, EdgeDirection.UPWARD))
        _trace_upward(graph, parent.id, edges, visited)


def _edge(
    source: NodeId,
    source_position: Point,
    target: NodeId,
    target_position: Point,
    direction: EdgeDirection,
) -> Edge:
    return Edge(
        source=source,
        target=target,
        source_position=source_position,
        target_position=target_position,
        direction=direction,
    )


def visible_nodes(graph: CurriculumGraph, selected: NodeId | str | None) -> set[NodeId]:
    """All nodes shown at full opacity for *selected*.

    With no selection every node is visible. Otherwise the selected node and
    every endpoint of its resolved edges are visible.
    """
    if selected is None:
        return {node.id for node in graph.iter_nodes()}

    selected_id = graph.get_node(selected).id
    result = {selected_id}
    for edge in resolve_connections(graph, selected_id):
        result.update(edge.endpoints())
    return result


def is_visible(
    graph: CurriculumGraph,
    node_id: NodeId | str,
    selected: NodeId | str | None,
) -> bool:
    """Display predicate: is *node_id* highlighted for *selected*?"""
    if selected is None:
        return True
    nid = NodeId.parse(node_id)
    if nid == NodeId.parse(selected):
        return True
    return any(nid in edge.endpoints() for edge in resolve_connections(graph, selected))
