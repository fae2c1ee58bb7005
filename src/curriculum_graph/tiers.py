"""Tier definitions and tagged node identifiers.

The curriculum hierarchy has exactly five tiers, stacked top to bottom:

    Topic -> Class -> Course Objective -> Lecture Objective -> Assessment

Every node is addressed by a ``NodeId``: its tier plus a dense, 1-based
ordinal within that tier. The ``"prefix-ordinal"`` string form is only used
at the edges of the system (CLI, SVG ids, JSON); ``NodeId.parse`` turns such a
string back into a ``NodeId`` once, so queries never split strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from curriculum_graph.exceptions import InvalidNodeIdError

_NODE_ID_RE = re.compile(r"([a-z]+)-([0-9]+)")


class Tier(str, Enum):
    """The five curriculum tiers, in top-to-bottom order.

    The enum value is the identifier prefix used in string node ids.
    """

    TOPIC = "topic"
    CLASS = "class"
    COURSE_OBJECTIVE = "objective"
    LECTURE_OBJECTIVE = "lecture"
    ASSESSMENT = "assessment"

    @property
    def prefix(self) -> str:
        """Identifier prefix, e.g. ``'objective'``."""
        return self.value

    @property
    def level(self) -> int:
        """0-based position of the tier from the top of the hierarchy."""
        return TIER_ORDER.index(self)

    @property
    def label(self) -> str:
        """Human-readable tier name."""
        return _LABELS[self]

    @property
    def short_name(self) -> str:
        """Prefix used for node display names (``'CO'`` -> ``'CO 3'``)."""
        return _SHORT_NAMES[self]

    @property
    def parent(self) -> Tier | None:
        """Tier that this tier's references point up to (None for Topic)."""
        if self.level == 0:
            return None
        return TIER_ORDER[self.level - 1]

    @property
    def child(self) -> Tier | None:
        """Tier directly below this one (None for Assessment)."""
        if self.level == len(TIER_ORDER) - 1:
            return None
        return TIER_ORDER[self.level + 1]

    @property
    def parent_range(self) -> tuple[int, int]:
        """Inclusive (min, max) number of upward references per node."""
        return _PARENT_RANGES[self]

    @property
    def has_peers(self) -> bool:
        """True if nodes in this tier carry lateral (same-tier) references."""
        return self is Tier.COURSE_OBJECTIVE

    @property
    def default_size(self) -> int:
        """Node count used by ``generate()`` when no size is configured."""
        return DEFAULT_TIER_SIZES[self]

    @classmethod
    def from_prefix(cls, prefix: str) -> Tier:
        """Look up a tier by its id prefix.

        Raises:
            ValueError: If the prefix names no tier
        """
        return cls(prefix)


TIER_ORDER: tuple[Tier, ...] = (
    Tier.TOPIC,
    Tier.CLASS,
    Tier.COURSE_OBJECTIVE,
    Tier.LECTURE_OBJECTIVE,
    Tier.ASSESSMENT,
)

DEFAULT_TIER_SIZES: dict[Tier, int] = {
    Tier.TOPIC: 5,
    Tier.CLASS: 5,
    Tier.COURSE_OBJECTIVE: 15,
    Tier.LECTURE_OBJECTIVE: 30,
    Tier.ASSESSMENT: 45,
}

# Lateral references per course objective
PEER_RANGE: tuple[int, int] = (1, 2)

_LABELS = {
    Tier.TOPIC: "Topic",
    Tier.CLASS: "Class",
    Tier.COURSE_OBJECTIVE: "Course Objective",
    Tier.LECTURE_OBJECTIVE: "Lecture Objective",
    Tier.ASSESSMENT: "Assessment",
}

_SHORT_NAMES = {
    Tier.TOPIC: "Topic",
    Tier.CLASS: "Class",
    Tier.COURSE_OBJECTIVE: "CO",
    Tier.LECTURE_OBJECTIVE: "LO",
    Tier.ASSESSMENT: "A",
}

_PARENT_RANGES = {
    Tier.TOPIC: (0, 0),
    Tier.CLASS: (1, 2),
    Tier.COURSE_OBJECTIVE: (1, 1),
    Tier.LECTURE_OBJECTIVE: (1, 1),
    Tier.ASSESSMENT: (1, 1),
}


@dataclass(frozen=True)
class NodeId:
    """Tagged node identifier: tier plus 1-based ordinal.

    Example:
        >>> nid = NodeId(Tier.LECTURE_OBJECTIVE, 3)
        >>> str(nid)
        'lecture-3'
        >>> NodeId.parse("lecture-3") == nid
        True
    """

    tier: Tier
    ordinal: int

    def __str__(self) -> str:
        return f"{self.tier.prefix}-{self.ordinal}"

    @property
    def index(self) -> int:
        """0-based position within the tier."""
        return self.ordinal - 1

    @property
    def sort_key(self) -> tuple[int, int]:
        """Key ordering ids top tier first, then by ordinal."""
        return (self.tier.level, self.ordinal)

    @classmethod
    def parse(cls, raw: str | NodeId) -> NodeId:
        """Parse a boundary string like ``'objective-4'``.

        ``NodeId`` instances pass through unchanged.

        Raises:
            InvalidNodeIdError: If the string is malformed or names no tier
        """
        if isinstance(raw, NodeId):
            return raw
        match = _NODE_ID_RE.fullmatch(raw.strip()) if isinstance(raw, str) else None
        if match is None:
            raise InvalidNodeIdError(str(raw))
        prefix, ordinal = match.group(1), int(match.group(2))
        try:
            tier = Tier.from_prefix(prefix)
        except ValueError:
            raise InvalidNodeIdError(raw) from None
        if ordinal < 1:
            raise InvalidNodeIdError(raw)
        return cls(tier, ordinal)


def display_name(node_id: NodeId) -> str:
    """Default display name for a node, e.g. ``'CO 4'`` or ``'Topic 1'``."""
    return f"{node_id.tier.short_name} {node_id.ordinal}"
