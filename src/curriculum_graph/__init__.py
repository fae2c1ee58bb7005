"""curriculum_graph - Connection tracing and layout for five-tier curriculum maps."""

from curriculum_graph.coordinates import Margins, Point, Viewport
from curriculum_graph.events import (
    BaseEvent,
    EdgeHoverEvent,
    Event,
    EventDispatcher,
    EventProcessor,
    LayoutComputedEvent,
    SelectionChangedEvent,
    TypedEventProcessor,
    ViewportResizedEvent,
)
from curriculum_graph.exceptions import (
    InvalidNodeIdError,
    NodeNotFoundError,
    TopologyError,
)
from curriculum_graph.generate import generate
from curriculum_graph.graph import (
    CurriculumGraph,
    Edge,
    EdgeDirection,
    is_visible,
    resolve_connections,
    visible_nodes,
)
from curriculum_graph.nodes import CurriculumNode
from curriculum_graph.tiers import TIER_ORDER, NodeId, Tier
from curriculum_graph.viz import (
    ViewState,
    VizSession,
    assign_positions,
    build_scene,
    generate_html,
    render_svg,
    to_mermaid,
)

__all__ = [
    # Model
    "CurriculumGraph",
    "CurriculumNode",
    "NodeId",
    "TIER_ORDER",
    "Tier",
    "generate",
    # Queries
    "Edge",
    "EdgeDirection",
    "is_visible",
    "resolve_connections",
    "visible_nodes",
    # Layout and rendering
    "Margins",
    "Point",
    "ViewState",
    "Viewport",
    "VizSession",
    "assign_positions",
    "build_scene",
    "generate_html",
    "render_svg",
    "to_mermaid",
    # Events
    "BaseEvent",
    "EdgeHoverEvent",
    "Event",
    "EventDispatcher",
    "EventProcessor",
    "LayoutComputedEvent",
    "SelectionChangedEvent",
    "TypedEventProcessor",
    "ViewportResizedEvent",
    # Exceptions
    "InvalidNodeIdError",
    "NodeNotFoundError",
    "TopologyError",
]
