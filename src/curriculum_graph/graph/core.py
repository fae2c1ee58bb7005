"""CurriculumGraph: the five ordered tiers and their reference topology."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING

import networkx as nx

from curriculum_graph.exceptions import NodeNotFoundError
from curriculum_graph.graph.validation import validate_reference_graph, validate_topology
from curriculum_graph.nodes import CurriculumNode
from curriculum_graph.tiers import TIER_ORDER, NodeId, Tier

if TYPE_CHECKING:
    from curriculum_graph.coordinates import Margins, Point


class CurriculumGraph:
    """Immutable five-tier curriculum graph.

    CurriculumGraph is a pure structure: it holds the nodes of each tier in
    order and derives a NetworkX DiGraph of their references. Edges are
    never stored on the nodes; ``parent`` edges point from a node to each
    node it references in the tier above, ``peer`` edges from a course
    objective to each objective it links to laterally.

    The topology is validated on construction, so every ordinal reachable
    from a query is known to exist.

    Attributes:
        nx_graph: Reference graph keyed by NodeId

    Example:
        >>> g = CurriculumGraph.from_tiers(
        ...     topics=[CurriculumNode(NodeId(Tier.TOPIC, 1))],
        ...     classes=[CurriculumNode(NodeId(Tier.CLASS, 1), parents=(1,))],
        ... )
        >>> len(g)
        2
        >>> [str(n.id) for n in g.tier(Tier.CLASS)]
        ['class-1']
    """

    def __init__(self, tiers: Mapping[Tier, Sequence[CurriculumNode]]) -> None:
        """Create a graph from per-tier node sequences.

        Args:
            tiers: Map of tier -> nodes ordered by ordinal. Every tier must be
                present; lower tiers may be empty.

        Raises:
            TopologyError: If the references break a hierarchy invariant
        """
        validate_topology(tiers)
        self._tiers: dict[Tier, tuple[CurriculumNode, ...]] = {
            tier: tuple(tiers[tier]) for tier in TIER_ORDER
        }
        self._nx_graph = self._build_graph()
        validate_reference_graph(self._nx_graph)

    @classmethod
    def from_tiers(
        cls,
        topics: Iterable[CurriculumNode] = (),
        classes: Iterable[CurriculumNode] = (),
        course_objectives: Iterable[CurriculumNode] = (),
        lecture_objectives: Iterable[CurriculumNode] = (),
        assessments: Iterable[CurriculumNode] = (),
    ) -> CurriculumGraph:
        """Build a graph from one iterable per tier, top to bottom."""
        return cls(
            {
                Tier.TOPIC: tuple(topics),
                Tier.CLASS: tuple(classes),
                Tier.COURSE_OBJECTIVE: tuple(course_objectives),
                Tier.LECTURE_OBJECTIVE: tuple(lecture_objectives),
                Tier.ASSESSMENT: tuple(assessments),
            }
        )

    def _build_graph(self) -> nx.DiGraph:
        G = nx.DiGraph()
        for node in self.iter_nodes():
            G.add_node(node.id, name=node.name, tier=node.tier)
        for node in self.iter_nodes():
            for parent_id in node.parent_ids:
                G.add_edge(node.id, parent_id, edge_type="parent")
            for peer_id in node.peer_ids:
                G.add_edge(node.id, peer_id, edge_type="peer")
        return G

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def nx_graph(self) -> nx.DiGraph:
        """Underlying NetworkX reference graph."""
        return self._nx_graph

    @property
    def tiers(self) -> dict[Tier, tuple[CurriculumNode, ...]]:
        """Map of tier -> ordered nodes."""
        return dict(self._tiers)  # Return copy to prevent mutation

    @property
    def sizes(self) -> dict[Tier, int]:
        """Node count per tier."""
        return {tier: len(nodes) for tier, nodes in self._tiers.items()}

    def tier(self, tier: Tier) -> tuple[CurriculumNode, ...]:
        """Nodes of one tier, ordered by ordinal."""
        return self._tiers[tier]

    def iter_nodes(self) -> Iterator[CurriculumNode]:
        """Iterate over every node, top tier first."""
        for tier in TIER_ORDER:
            yield from self._tiers[tier]

    def get_node(self, node_id: NodeId | str) -> CurriculumNode:
        """Look up a node by id.

        Raises:
            InvalidNodeIdError: If a string id is malformed
            NodeNotFoundError: If the ordinal is outside the tier
        """
        nid = NodeId.parse(node_id)
        nodes = self._tiers[nid.tier]
        if not 1 <= nid.ordinal <= len(nodes):
            raise NodeNotFoundError(nid, len(nodes))
        return nodes[nid.index]

    def position_of(self, node_id: NodeId) -> Point:
        return self.get_node(node_id).position

    def __contains__(self, node_id: object) -> bool:
        if not isinstance(node_id, NodeId):
            return False
        return 1 <= node_id.ordinal <= len(self._tiers[node_id.tier])

    def __len__(self) -> int:
        return sum(len(nodes) for nodes in self._tiers.values())

    def __iter__(self) -> Iterator[CurriculumNode]:
        return self.iter_nodes()

    def __repr__(self) -> str:
        sizes = "/".join(str(len(self._tiers[t])) for t in TIER_ORDER)
        return f"CurriculumGraph({sizes})"

    # ------------------------------------------------------------------
    # Reference lookups
    # ------------------------------------------------------------------

    def parents_of(self, node_id: NodeId) -> list[CurriculumNode]:
        """Nodes in the tier above that *node_id* references, in ordinal order."""
        node = self.get_node(node_id)
        return [self.get_node(pid) for pid in sorted(node.parent_ids, key=lambda n: n.ordinal)]

    def children_of(self, node_id: NodeId) -> list[CurriculumNode]:
        """Nodes in the tier below whose references include *node_id*."""
        node = self.get_node(node_id)
        child_tier = node.tier.child
        if child_tier is None:
            return []
        return [c for c in self._tiers[child_tier] if node.ordinal in c.parents]

    def lateral_sources(self, node_id: NodeId) -> list[CurriculumNode]:
        """Other same-tier nodes whose lateral links include *node_id*."""
        node = self.get_node(node_id)
        if not node.tier.has_peers:
            return []
        return [
            other
            for other in self._tiers[node.tier]
            if other.id != node.id and node.ordinal in other.peers
        ]

    def lateral_targets(self, node_id: NodeId) -> list[CurriculumNode]:
        """Same-tier nodes that *node_id* links to laterally, in ordinal order."""
        node = self.get_node(node_id)
        if not node.tier.has_peers:
            return []
        return [self.get_node(pid) for pid in sorted(node.peer_ids, key=lambda n: n.ordinal)]

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def with_positions(self, positions: Mapping[NodeId, Point]) -> CurriculumGraph:
        """Copy of this graph with nodes moved to *positions*.

        Nodes missing from *positions* keep their current position.
        """
        return _with_nodes(
            self,
            {
                tier: tuple(
                    n.at(positions[n.id]) if n.id in positions else n for n in nodes
                )
                for tier, nodes in self._tiers.items()
            },
        )

    def with_layout(
        self,
        width: float,
        height: float,
        *,
        margins: Margins | None = None,
        layer_spacing: float | None = None,
    ) -> CurriculumGraph:
        """Shortcut for ``assign_positions(self, width, height, ...)``."""
        from curriculum_graph.viz.layout import LAYER_SPACING, assign_positions

        return assign_positions(
            self,
            width,
            height,
            margins=margins,
            layer_spacing=LAYER_SPACING if layer_spacing is None else layer_spacing,
        )


def _with_nodes(
    graph: CurriculumGraph,
    tiers: dict[Tier, tuple[CurriculumNode, ...]],
) -> CurriculumGraph:
    """Swap node records without re-validating an unchanged topology."""
    clone = object.__new__(CurriculumGraph)
    clone._tiers = tiers
    clone._nx_graph = graph._nx_graph
    return clone
