"""Graph package - curriculum structure, validation and connection tracing."""

from curriculum_graph.graph.connections import (
    Edge,
    EdgeDirection,
    is_visible,
    resolve_connections,
    visible_nodes,
)
from curriculum_graph.graph.core import CurriculumGraph
from curriculum_graph.graph.validation import validate_reference_graph, validate_topology

__all__ = [
    "CurriculumGraph",
    "Edge",
    "EdgeDirection",
    "is_visible",
    "resolve_connections",
    "validate_reference_graph",
    "validate_topology",
    "visible_nodes",
]
