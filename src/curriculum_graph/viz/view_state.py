"""Immutable UI state passed into the query and rendering functions.

Each interaction replaces the whole ViewState instead of mutating fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from curriculum_graph.coordinates import Viewport
from curriculum_graph.tiers import NodeId


@dataclass(frozen=True)
class ViewState:
    """Selection, hover and viewport for one rendered frame.

    Attributes:
        selected: Currently selected node, or None
        hovered_edge: Id of the edge under the pointer, or None
        viewport: Clamped drawing surface size

    Example:
        >>> state = ViewState().toggle_selection("class-1")
        >>> str(state.selected)
        'class-1'
        >>> state.toggle_selection("class-1").selected is None
        True
    """

    selected: NodeId | None = None
    hovered_edge: str | None = None
    viewport: Viewport = field(default_factory=Viewport)

    def __post_init__(self) -> None:
        if isinstance(self.selected, str):
            object.__setattr__(self, "selected", NodeId.parse(self.selected))

    @property
    def has_selection(self) -> bool:
        return self.selected is not None

    def toggle_selection(self, node_id: NodeId | str) -> ViewState:
        """Select *node_id*, or clear the selection if it is already selected.

        Hover state is dropped because the drawn edge set changes.
        """
        nid = NodeId.parse(node_id)
        new_selected = None if nid == self.selected else nid
        return replace(self, selected=new_selected, hovered_edge=None)

    def clear_selection(self) -> ViewState:
        return replace(self, selected=None, hovered_edge=None)

    def with_viewport(self, width: float, height: float) -> ViewState:
        """New state for a resized container, clamped to the minimum floors."""
        return replace(self, viewport=Viewport(width, height).clamped())

    def hover(self, edge_id: str) -> ViewState:
        return replace(self, hovered_edge=edge_id)

    def unhover(self) -> ViewState:
        return replace(self, hovered_edge=None)
