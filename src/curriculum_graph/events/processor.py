"""Event processor base classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from curriculum_graph.events.types import (
        EdgeHoverEvent,
        Event,
        LayoutComputedEvent,
        SelectionChangedEvent,
        ViewportResizedEvent,
    )


# Mapping from event class name to handler method name.
_EVENT_METHOD_MAP: dict[str, str] = {
    "SelectionChangedEvent": "on_selection_changed",
    "ViewportResizedEvent": "on_viewport_resized",
    "LayoutComputedEvent": "on_layout_computed",
    "EdgeHoverEvent": "on_edge_hover",
}


class EventProcessor:
    """Base class for event consumers.

    Subclass and override ``on_event`` to receive all events,
    or use ``TypedEventProcessor`` for per-type dispatch.
    """

    def on_event(self, event: Event) -> None:
        """Called for every event. Override in subclasses."""

    def shutdown(self) -> None:
        """Called once when the session closes. Override to flush buffers."""


class TypedEventProcessor(EventProcessor):
    """Dispatches ``on_event`` to typed handler methods automatically.

    Override any of the ``on_*`` methods below to handle specific event types.
    Unhandled event types are silently ignored.
    """

    def on_event(self, event: Event) -> None:
        method_name = _EVENT_METHOD_MAP.get(type(event).__name__)
        if method_name is not None:
            method = getattr(self, method_name, None)
            if method is not None:
                method(event)

    def on_selection_changed(self, event: SelectionChangedEvent) -> None: ...
    def on_viewport_resized(self, event: ViewportResizedEvent) -> None: ...
    def on_layout_computed(self, event: LayoutComputedEvent) -> None: ...
    def on_edge_hover(self, event: EdgeHoverEvent) -> None: ...
