"""Interactive session: the controller between UI signals and the graph model.

A session owns the laid-out graph, the current ViewState and an event
dispatcher. UI glue calls ``click_node``, ``click_background``,
``hover_edge`` and the resize methods; each call replaces the ViewState
wholesale and emits an event describing what changed.

Resize requests may arrive faster than they can be applied. Each request
gets a ticket; ``apply_resize`` only honors the most recent ticket and drops
stale ones (last write wins).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from curriculum_graph.events.dispatcher import EventDispatcher
from curriculum_graph.events.types import (
    EdgeHoverEvent,
    LayoutComputedEvent,
    SelectionChangedEvent,
    ViewportResizedEvent,
    generate_session_id,
)
from curriculum_graph.graph.connections import resolve_connections
from curriculum_graph.tiers import NodeId
from curriculum_graph.viz.html_generator import generate_html
from curriculum_graph.viz.scene import build_scene
from curriculum_graph.viz.svg import render_svg
from curriculum_graph.viz.view_state import ViewState

if TYPE_CHECKING:
    from curriculum_graph.events.processor import EventProcessor
    from curriculum_graph.graph.connections import Edge
    from curriculum_graph.graph.core import CurriculumGraph
    from curriculum_graph.viz.scene import Scene

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ResizeRequest:
    ticket: int
    width: float
    height: float


class VizSession:
    """Stateful wrapper that drives a curriculum graph from UI events.

    Example:
        >>> from curriculum_graph.generate import generate
        >>> session = VizSession(generate(seed=3))
        >>> session.click_node("class-1").selected
        NodeId(tier=<Tier.CLASS: 'class'>, ordinal=1)
        >>> session.click_node("class-1").selected is None
        True
    """

    def __init__(
        self,
        graph: CurriculumGraph,
        *,
        view: ViewState | None = None,
        processors: list[EventProcessor] | None = None,
        strict_events: bool = False,
        session_id: str | None = None,
    ) -> None:
        view = view or ViewState()
        self.session_id = session_id or generate_session_id()
        self._view = view.with_viewport(view.viewport.width, view.viewport.height)
        if self._view.selected is not None:
            graph.get_node(self._view.selected)
        self._graph = graph.with_layout(self._view.viewport.width, self._view.viewport.height)
        self._dispatcher = EventDispatcher(processors, strict=strict_events)
        self._next_ticket = 0
        self._pending: _ResizeRequest | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def graph(self) -> CurriculumGraph:
        """Graph laid out for the current viewport."""
        return self._graph

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def dispatcher(self) -> EventDispatcher:
        return self._dispatcher

    def connections(self) -> list[Edge]:
        """Resolved edges for the current selection."""
        return resolve_connections(self._graph, self._view.selected)

    def scene(self) -> Scene:
        return build_scene(self._graph, self._view)

    def render_svg(self, *, theme: str = "light") -> str:
        return render_svg(self.scene(), theme=theme)

    def render_html(self, *, theme: str = "light") -> str:
        return generate_html(self._graph, self._view, theme=theme)

    # ------------------------------------------------------------------
    # Selection and hover
    # ------------------------------------------------------------------

    def click_node(self, node_id: NodeId | str) -> ViewState:
        """Toggle selection of *node_id* (clicking the selected node clears it).

        Raises:
            InvalidNodeIdError: If a string id is malformed
            NodeNotFoundError: If the node is not in the graph
        """
        nid = self._graph.get_node(node_id).id
        return self._set_view(self._view.toggle_selection(nid))

    def click_background(self) -> ViewState:
        """Clear the selection (click on empty canvas)."""
        return self._set_view(self._view.clear_selection())

    def hover_edge(self, edge_id: str | None) -> ViewState:
        """Mark *edge_id* as hovered, or clear hover with None."""
        new_view = self._view.unhover() if edge_id is None else self._view.hover(edge_id)
        if new_view != self._view:
            self._view = new_view
            self._dispatcher.emit(EdgeHoverEvent(session_id=self.session_id, edge_id=edge_id))
        return self._view

    def _set_view(self, new_view: ViewState) -> ViewState:
        previous = self._view.selected
        self._view = new_view
        if new_view.selected != previous:
            edge_count = len(self.connections())
            logger.debug("Selection %s -> %s (%d edges)", previous, new_view.selected, edge_count)
            self._dispatcher.emit(
                SelectionChangedEvent(
                    session_id=self.session_id,
                    previous=previous,
                    selected=new_view.selected,
                    edge_count=edge_count,
                )
            )
        return self._view

    # ------------------------------------------------------------------
    # Resize
    # ------------------------------------------------------------------

    def request_resize(self, width: float, height: float) -> int:
        """Record a resize request and return its ticket.

        A newer request supersedes any request not yet applied.
        """
        self._next_ticket += 1
        if self._pending is not None:
            logger.debug("Resize ticket %d superseded by %d", self._pending.ticket, self._next_ticket)
        self._pending = _ResizeRequest(self._next_ticket, width, height)
        return self._next_ticket

    def apply_resize(self, ticket: int) -> bool:
        """Apply the resize for *ticket* if it is still the latest request.

        Returns:
            True if the layout was recomputed, False if the ticket was stale
        """
        pending = self._pending
        if pending is None or pending.ticket != ticket:
            logger.warning("Dropping stale resize ticket %d", ticket)
            return False

        self._pending = None
        self._view = self._view.with_viewport(pending.width, pending.height)
        viewport = self._view.viewport
        self._graph = self._graph.with_layout(viewport.width, viewport.height)

        self._dispatcher.emit(
            ViewportResizedEvent(
                session_id=self.session_id,
                width=viewport.width,
                height=viewport.height,
                ticket=ticket,
            )
        )
        self._dispatcher.emit(
            LayoutComputedEvent(
                session_id=self.session_id,
                width=viewport.width,
                height=viewport.height,
                node_count=len(self._graph),
            )
        )
        return True

    def resize(self, width: float, height: float) -> ViewState:
        """Request and immediately apply a resize."""
        self.apply_resize(self.request_resize(width, height))
        return self._view

    def close(self) -> None:
        """Shut down event processors."""
        self._dispatcher.shutdown()
