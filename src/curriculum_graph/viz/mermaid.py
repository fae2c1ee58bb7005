"""Mermaid flowchart exporter for curriculum graphs.

Without a selection the diagram shows the full reference topology: solid
arrows from each node to the nodes below that reference it, dotted arrows
for lateral course-objective links. With a selection it shows only the
resolved connections and marks unrelated nodes as dimmed, matching the
interactive view.

Usage:
    to_mermaid(graph)                          # Renders in notebooks
    to_mermaid(graph, selected="lecture-1")    # Highlight one trace
    print(to_mermaid(graph))                   # Raw Mermaid source
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from curriculum_graph.graph.connections import EdgeDirection, resolve_connections, visible_nodes
from curriculum_graph.tiers import TIER_ORDER, NodeId, Tier

if TYPE_CHECKING:
    from curriculum_graph.graph.core import CurriculumGraph

# =============================================================================
# Constants
# =============================================================================

_VALID_DIRECTIONS = {"TD", "TB", "BT", "LR", "RL"}

# Characters unsafe in Mermaid IDs (anything not alphanumeric or underscore)
_UNSAFE_ID_RE = re.compile(r"[^a-zA-Z0-9_]")

# Mermaid reserved words that cannot be used as bare node IDs
_RESERVED_WORDS = frozenset({
    "end", "subgraph", "direction", "click", "style", "classDef", "class",
    "linkStyle", "graph", "flowchart",
})

DEFAULT_COLORS: dict[str, dict[str, str]] = {
    "tier_topic": {
        "fill": "#E3F2FD", "stroke": "#1976D2", "stroke-width": "2px", "color": "#0D47A1",
    },
    "tier_class": {
        "fill": "#E8F5E8", "stroke": "#388E3C", "stroke-width": "2px", "color": "#1B5E20",
    },
    "tier_objective": {
        "fill": "#F3E5F5", "stroke": "#7B1FA2", "stroke-width": "2px", "color": "#4A148C",
    },
    "tier_lecture": {
        "fill": "#FFF3E0", "stroke": "#F57C00", "stroke-width": "2px", "color": "#E65100",
    },
    "tier_assessment": {
        "fill": "#ECEFF1", "stroke": "#546E7A", "stroke-width": "2px", "color": "#263238",
    },
    "selected": {
        "fill": "#3B82F6", "stroke": "#1D4ED8", "stroke-width": "3px", "color": "#FFFFFF",
    },
    "dimmed": {
        "opacity": "0.3",
    },
}

_TIER_TITLES = {
    Tier.TOPIC: "Topics",
    Tier.CLASS: "Classes",
    Tier.COURSE_OBJECTIVE: "Course Objectives",
    Tier.LECTURE_OBJECTIVE: "Lecture Objectives",
    Tier.ASSESSMENT: "Assessments",
}

# =============================================================================
# MermaidDiagram (notebook-renderable result)
# =============================================================================


class MermaidDiagram:
    """A Mermaid diagram that renders in Jupyter notebooks.

    - **JupyterLab 4.1+ / Notebook 7.1+**: native ``text/vnd.mermaid`` MIME
      type.
    - **Terminal / plain**: raw Mermaid source via ``text/plain``.
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def __str__(self) -> str:
        return self.source

    def __repr__(self) -> str:
        lines = self.source.split("\n")
        preview = lines[0] if lines else ""
        return f"MermaidDiagram({preview!r}, {len(lines)} lines)"

    def __contains__(self, item: str) -> bool:
        return item in self.source

    def startswith(self, prefix: str) -> bool:
        """Delegate to source string."""
        return self.source.startswith(prefix)

    def _repr_mimebundle_(self, **kwargs: Any) -> dict[str, str]:
        return {
            "text/vnd.mermaid": self.source,
            "text/plain": str(self),
        }


# =============================================================================
# ID Sanitization
# =============================================================================


def _sanitize_id(node_id: NodeId | str) -> str:
    """Convert a node id to a Mermaid-safe identifier ('topic-1' -> 'topic_1')."""
    safe = _UNSAFE_ID_RE.sub("_", str(node_id))
    if safe and (safe.lower() in _RESERVED_WORDS or safe[0:1].isdigit()):
        safe = f"n_{safe}"
    return safe or "n_empty"


def _escape_label(text: str) -> str:
    """Escape characters that have special meaning in Mermaid labels."""
    return text.replace('"', "&quot;").replace("<", "&lt;").replace(">", "&gt;")


# =============================================================================
# Public API
# =============================================================================


def to_mermaid(
    graph: CurriculumGraph,
    selected: NodeId | str | None = None,
    *,
    direction: str = "TD",
    colors: dict[str, dict[str, str]] | None = None,
) -> MermaidDiagram:
    """Convert a curriculum graph to a Mermaid flowchart.

    Args:
        graph: Curriculum graph (positions are not used)
        selected: Node whose trace to show, or None for the full topology
        direction: Flowchart direction, one of "TD", "TB", "LR", "RL", "BT"
        colors: Custom color overrides per class, e.g.
            {"tier_topic": {"fill": "#fff"}}

    Returns:
        MermaidDiagram that renders in notebooks and converts to string.

    Raises:
        ValueError: On an invalid direction
        InvalidNodeIdError / NodeNotFoundError: On a bad selection
    """
    if direction not in _VALID_DIRECTIONS:
        msg = f"Invalid direction {direction!r}. Must be one of {sorted(_VALID_DIRECTIONS)}"
        raise ValueError(msg)

    selected_id = graph.get_node(selected).id if selected is not None else None
    shown = visible_nodes(graph, selected_id)

    lines: list[str] = [f"flowchart {direction}"]
    node_class_map: dict[NodeId, str] = {}

    # --- Nodes, one subgraph per non-empty tier ---
    for tier in TIER_ORDER:
        nodes = graph.tier(tier)
        if not nodes:
            continue
        lines.append(f'    subgraph layer_{tier.prefix}["{_TIER_TITLES[tier]}"]')
        lines.append("        direction LR")
        for node in nodes:
            lines.append(f'        {_sanitize_id(node.id)}(("{_escape_label(node.name)}"))')
            if node.id == selected_id:
                node_class_map[node.id] = "selected"
            elif node.id not in shown:
                node_class_map[node.id] = "dimmed"
            else:
                node_class_map[node.id] = f"tier_{tier.prefix}"
        lines.append("    end")

    # --- Edges ---
    lateral_indices: list[int] = []
    edge_lines: list[str] = []
    if selected_id is None:
        for node in graph.iter_nodes():
            for child in graph.children_of(node.id):
                edge_lines.append(f"    {_sanitize_id(node.id)} --> {_sanitize_id(child.id)}")
            for peer_id in node.peer_ids:
                lateral_indices.append(len(edge_lines))
                edge_lines.append(f"    {_sanitize_id(node.id)} -.-> {_sanitize_id(peer_id)}")
    else:
        for edge in resolve_connections(graph, selected_id):
            src, tgt = _sanitize_id(edge.source), _sanitize_id(edge.target)
            if edge.direction is EdgeDirection.LATERAL:
                lateral_indices.append(len(edge_lines))
                edge_lines.append(f"    {src} -.-> {tgt}")
            else:
                edge_lines.append(f"    {src} --> {tgt}")
    lines.extend(edge_lines)

    # --- Styles ---
    lines.extend(_build_style_section(colors, node_class_map, lateral_indices))

    return MermaidDiagram("\n".join(lines))


def _build_style_section(
    colors: dict[str, dict[str, str]] | None,
    node_class_map: dict[NodeId, str],
    lateral_edge_indices: list[int],
) -> list[str]:
    """Build classDef, class assignments, and linkStyle lines."""
    effective = {cls: props.copy() for cls, props in DEFAULT_COLORS.items()}
    if colors:
        for key, val in colors.items():
            effective.setdefault(key, {}).update(val)

    lines: list[str] = []

    used_classes = set(node_class_map.values())
    for cls_name, props in effective.items():
        if cls_name not in used_classes:
            continue
        prop_str = ",".join(f"{k}:{v}" for k, v in props.items())
        lines.append(f"    classDef {cls_name} {prop_str}")

    class_to_ids: dict[str, list[str]] = {}
    for node_id, cls in node_class_map.items():
        class_to_ids.setdefault(cls, []).append(_sanitize_id(node_id))

    for cls_name, ids in sorted(class_to_ids.items()):
        lines.append(f"    class {','.join(ids)} {cls_name}")

    # Lateral links in purple, matching the interactive view
    if lateral_edge_indices:
        indices = ",".join(str(i) for i in lateral_edge_indices)
        lines.append(f"    linkStyle {indices} stroke:#c084fc,stroke-width:1.5px")

    return lines
