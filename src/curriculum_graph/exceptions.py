"""Exceptions for curriculum graph construction and queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from curriculum_graph.tiers import NodeId


class InvalidNodeIdError(ValueError):
    """Node identifier string could not be parsed.

    Raised at the API boundary (CLI arguments, string selections) when a
    value is not of the form ``"{prefix}-{ordinal}"`` with a known tier
    prefix and a positive integer ordinal.

    Attributes:
        raw: The string that failed to parse
        message: Human-readable error message
    """

    def __init__(self, raw: str, message: str | None = None) -> None:
        self.raw = raw
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        from curriculum_graph.tiers import Tier

        prefixes = ", ".join(t.prefix for t in Tier)
        return (
            f"Invalid node id: '{self.raw}'\n\n"
            f"  -> Expected '<prefix>-<ordinal>' with prefix one of: {prefixes}\n\n"
            f"Example: 'lecture-3'"
        )


class NodeNotFoundError(LookupError):
    """Well-formed node id that does not exist in the graph.

    Attributes:
        node_id: The requested id
        tier_size: Number of nodes in the requested tier
        message: Human-readable error message
    """

    def __init__(
        self,
        node_id: NodeId,
        tier_size: int,
        message: str | None = None,
    ) -> None:
        self.node_id = node_id
        self.tier_size = tier_size
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        tier = self.node_id.tier
        if self.tier_size == 0:
            return f"Node '{self.node_id}' not found: the {tier.label} tier is empty"
        return (
            f"Node '{self.node_id}' not found: "
            f"{tier.label} ordinals run from 1 to {self.tier_size}"
        )

    def __str__(self) -> str:
        # LookupError would otherwise repr() the message like KeyError does
        return self.message


class TopologyError(Exception):
    """Reference data violates the curriculum hierarchy invariants.

    Raised while building a CurriculumGraph, before any query runs.

    Attributes:
        node_id: Node whose references are invalid, if one is to blame
        message: Human-readable error message
    """

    def __init__(self, message: str, *, node_id: NodeId | None = None) -> None:
        self.message = message
        self.node_id = node_id
        super().__init__(message)
