"""Drawable scene: the contract between the graph model and the renderers.

The scene is computed entirely in Python. Renderers (SVG, HTML) only draw
what they are given: node markers with their visible / selected state, and
one curve per resolved connection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from curriculum_graph.graph.connections import resolve_connections, visible_nodes
from curriculum_graph.viz.geometry import CurveGeometry, curve_for

if TYPE_CHECKING:
    from curriculum_graph.coordinates import Point
    from curriculum_graph.graph.core import CurriculumGraph
    from curriculum_graph.tiers import Tier
    from curriculum_graph.viz.view_state import ViewState


@dataclass(frozen=True)
class NodeMarker:
    """A node as drawn: a circle with a label underneath."""

    id: str
    label: str
    tier: Tier
    center: Point
    visible: bool = True
    selected: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "tier": self.tier.value,
            "x": self.center.x,
            "y": self.center.y,
            "visible": self.visible,
            "selected": self.selected,
        }


@dataclass(frozen=True)
class EdgeCurve:
    """A resolved connection as drawn."""

    id: str
    source: str
    target: str
    curve: CurveGeometry
    same_tier: bool
    hovered: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "d": self.curve.path_data,
            "sameTier": self.same_tier,
            "hovered": self.hovered,
        }


@dataclass
class Scene:
    """Everything a renderer needs for one frame."""

    width: float
    height: float
    nodes: list[NodeMarker] = field(default_factory=list)
    edges: list[EdgeCurve] = field(default_factory=list)
    selected: str | None = None

    def get_node(self, node_id: str) -> NodeMarker | None:
        """Find a marker by id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    @property
    def visible_ids(self) -> set[str]:
        return {n.id for n in self.nodes if n.visible}

    @property
    def dimmed_ids(self) -> set[str]:
        return {n.id for n in self.nodes if not n.visible}

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "selected": self.selected,
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


def build_scene(graph: CurriculumGraph, view: ViewState) -> Scene:
    """Build the drawable scene for *graph* under *view*.

    The graph must already be laid out for ``view.viewport``; edges are
    drawn only while a node is selected.

    Args:
        graph: Positioned curriculum graph
        view: Current selection, hover and viewport

    Returns:
        Scene with one marker per node and one curve per resolved edge
    """
    selected = view.selected
    shown = visible_nodes(graph, selected)

    scene = Scene(
        width=view.viewport.width,
        height=view.viewport.height,
        selected=str(selected) if selected is not None else None,
    )

    for node in graph.iter_nodes():
        scene.nodes.append(
            NodeMarker(
                id=str(node.id),
                label=node.name,
                tier=node.tier,
                center=node.position,
                visible=node.id in shown,
                selected=node.id == selected,
            )
        )

    for edge in resolve_connections(graph, selected):
        scene.edges.append(
            EdgeCurve(
                id=edge.id,
                source=str(edge.source),
                target=str(edge.target),
                curve=curve_for(edge),
                same_tier=edge.same_tier,
                hovered=edge.id == view.hovered_edge,
            )
        )

    return scene
