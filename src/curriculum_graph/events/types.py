"""Event types emitted by an interactive visualization session."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field

from curriculum_graph.tiers import NodeId


def generate_session_id() -> str:
    """Generate a unique session ID."""
    return uuid.uuid4().hex[:16]


def _now() -> float:
    """Current timestamp."""
    return time.time()


@dataclass(frozen=True)
class BaseEvent:
    """Base class for all session events.

    Attributes:
        session_id: Identifier of the session that produced this event.
        timestamp: Unix timestamp when the event was created.
    """

    session_id: str
    timestamp: float = field(default_factory=_now)


@dataclass(frozen=True)
class SelectionChangedEvent(BaseEvent):
    """Emitted when the selected node changes.

    Attributes:
        previous: Selection before the change, or None.
        selected: Selection after the change, or None when cleared.
        edge_count: Number of connections resolved for the new selection.
    """

    previous: NodeId | None = None
    selected: NodeId | None = None
    edge_count: int = 0

    @property
    def cleared(self) -> bool:
        return self.selected is None


@dataclass(frozen=True)
class ViewportResizedEvent(BaseEvent):
    """Emitted when a resize request is applied.

    Attributes:
        width: Clamped viewport width.
        height: Clamped viewport height.
        ticket: Resize ticket that was applied.
    """

    width: float = 0.0
    height: float = 0.0
    ticket: int = 0


@dataclass(frozen=True)
class LayoutComputedEvent(BaseEvent):
    """Emitted after node positions are recomputed.

    Attributes:
        width: Viewport width the layout was computed for.
        height: Viewport height the layout was computed for.
        node_count: Number of positioned nodes.
    """

    width: float = 0.0
    height: float = 0.0
    node_count: int = 0


@dataclass(frozen=True)
class EdgeHoverEvent(BaseEvent):
    """Emitted when the pointer enters or leaves a drawn connection.

    Attributes:
        edge_id: Hovered edge, or None when the pointer left it.
    """

    edge_id: str | None = None


Event = SelectionChangedEvent | ViewportResizedEvent | LayoutComputedEvent | EdgeHoverEvent
