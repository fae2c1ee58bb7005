"""Event system for observing an interactive visualization session."""

from curriculum_graph.events.dispatcher import EventDispatcher
from curriculum_graph.events.processor import EventProcessor, TypedEventProcessor
from curriculum_graph.events.types import (
    BaseEvent,
    EdgeHoverEvent,
    Event,
    LayoutComputedEvent,
    SelectionChangedEvent,
    ViewportResizedEvent,
)

__all__ = [
    # Event types
    "BaseEvent",
    "EdgeHoverEvent",
    "Event",
    "LayoutComputedEvent",
    "SelectionChangedEvent",
    "ViewportResizedEvent",
    # Processor interfaces
    "EventProcessor",
    "TypedEventProcessor",
    # Dispatcher
    "EventDispatcher",
]
