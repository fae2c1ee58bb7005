"""Node record for the curriculum hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from curriculum_graph.coordinates import ORIGIN, Point
from curriculum_graph.tiers import NodeId, Tier, display_name


@dataclass(frozen=True)
class CurriculumNode:
    """A single node in one of the five tiers.

    References are stored on the lower-tier node pointing up, as ordinals
    into the parent tier. Course objectives additionally reference peer
    objectives sideways. Edges are never stored; they are derived on demand.

    Attributes:
        id: Tagged identifier (tier + ordinal)
        name: Display name, e.g. "CO 4"
        parents: Ordinals in the tier above (connectedTopics, connectedClasses, ...)
        peers: Ordinals of lateral course-objective links (empty for other tiers)
        position: Center of the node, assigned by the layout pass
    """

    id: NodeId
    name: str = ""
    parents: tuple[int, ...] = ()
    peers: tuple[int, ...] = ()
    position: Point = field(default=ORIGIN, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", display_name(self.id))
        object.__setattr__(self, "parents", tuple(self.parents))
        object.__setattr__(self, "peers", tuple(self.peers))

    @property
    def tier(self) -> Tier:
        return self.id.tier

    @property
    def ordinal(self) -> int:
        return self.id.ordinal

    @property
    def parent_ids(self) -> tuple[NodeId, ...]:
        """Parent references as NodeIds in the tier above."""
        parent_tier = self.tier.parent
        if parent_tier is None:
            return ()
        return tuple(NodeId(parent_tier, o) for o in self.parents)

    @property
    def peer_ids(self) -> tuple[NodeId, ...]:
        """Lateral references as NodeIds in the same tier."""
        return tuple(NodeId(self.tier, o) for o in self.peers)

    def at(self, position: Point) -> CurriculumNode:
        """Copy of this node moved to *position*."""
        return replace(self, position=position)
