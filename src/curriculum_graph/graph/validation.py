"""Topology validation.

This module contains all build-time checks for CurriculumGraph construction.
Every check raises TopologyError naming the offending node, so a malformed
dataset fails fast instead of producing lookup errors during tracing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

import networkx as nx

from curriculum_graph.exceptions import TopologyError
from curriculum_graph.tiers import PEER_RANGE, TIER_ORDER, Tier

if TYPE_CHECKING:
    from curriculum_graph.nodes import CurriculumNode

logger = logging.getLogger(__name__)


def validate_topology(tiers: Mapping[Tier, Sequence[CurriculumNode]]) -> None:
    """Run all build-time validations on the five tiers.

    Args:
        tiers: Map of tier -> ordered nodes (every tier must be present)
    """
    _validate_tier_keys(tiers)
    for tier in TIER_ORDER:
        nodes = tiers[tier]
        _validate_membership_and_ordinals(tier, nodes)
        _validate_parent_tier_populated(tier, nodes, tiers)
        for node in nodes:
            _validate_parents(node, tiers)
            _validate_peers(node, len(nodes))


def _validate_tier_keys(tiers: Mapping[Tier, Sequence[CurriculumNode]]) -> None:
    missing = [t.label for t in TIER_ORDER if t not in tiers]
    if missing:
        raise TopologyError(
            f"Missing tiers: {', '.join(missing)}\n\n"
            f"How to fix:\n"
            f"  Pass every tier, using an empty sequence for unused tiers"
        )


def _validate_membership_and_ordinals(tier: Tier, nodes: Sequence[CurriculumNode]) -> None:
    """Nodes belong to their tier and ordinals run 1..n in order."""
    for expected, node in enumerate(nodes, start=1):
        if node.tier is not tier:
            raise TopologyError(
                f"Node '{node.id}' listed under the {tier.label} tier\n\n"
                f"  -> Each tier may only hold its own nodes",
                node_id=node.id,
            )
        if node.ordinal != expected:
            raise TopologyError(
                f"Non-dense ordinals in the {tier.label} tier: "
                f"expected '{tier.prefix}-{expected}', found '{node.id}'\n\n"
                f"  -> Ordinals are 1-based and must not skip or repeat",
                node_id=node.id,
            )


def _validate_parent_tier_populated(
    tier: Tier,
    nodes: Sequence[CurriculumNode],
    tiers: Mapping[Tier, Sequence[CurriculumNode]],
) -> None:
    parent_tier = tier.parent
    if parent_tier is None or not nodes:
        return
    if not tiers[parent_tier]:
        raise TopologyError(
            f"The {tier.label} tier has {len(nodes)} nodes "
            f"but the {parent_tier.label} tier is empty\n\n"
            f"  -> Every {tier.label} must reference a {parent_tier.label}",
            node_id=nodes[0].id,
        )


def _validate_parents(
    node: CurriculumNode,
    tiers: Mapping[Tier, Sequence[CurriculumNode]],
) -> None:
    """Upward references: count within range, unique, and pointing at real nodes."""
    low, high = node.tier.parent_range
    count = len(node.parents)
    if not low <= count <= high:
        expected = str(low) if low == high else f"{low}-{high}"
        raise TopologyError(
            f"Invalid references on '{node.id}': {count} parents\n\n"
            f"  -> A {node.tier.label} references exactly {expected} "
            f"{node.tier.parent.label if node.tier.parent else 'parent'} node(s)",
            node_id=node.id,
        )
    if len(set(node.parents)) != count:
        raise TopologyError(
            f"Duplicate parent ordinals on '{node.id}': {list(node.parents)}",
            node_id=node.id,
        )
    parent_tier = node.tier.parent
    if parent_tier is None:
        return
    size = len(tiers[parent_tier])
    for ordinal in node.parents:
        if not 1 <= ordinal <= size:
            raise TopologyError(
                f"Out-of-range reference on '{node.id}': "
                f"'{parent_tier.prefix}-{ordinal}' does not exist\n\n"
                f"  -> {parent_tier.label} ordinals run from 1 to {size}",
                node_id=node.id,
            )


def _validate_peers(node: CurriculumNode, tier_size: int) -> None:
    """Lateral references: only on course objectives, never self, in range."""
    if not node.tier.has_peers:
        if node.peers:
            raise TopologyError(
                f"Lateral references on '{node.id}'\n\n"
                f"  -> Only Course Objectives carry lateral links",
                node_id=node.id,
            )
        return

    # A lone objective has nobody to link to
    low = min(PEER_RANGE[0], tier_size - 1)
    high = PEER_RANGE[1]
    count = len(node.peers)
    if not low <= count <= high:
        raise TopologyError(
            f"Invalid lateral references on '{node.id}': {count} peers\n\n"
            f"  -> A Course Objective links to {low}-{high} other objectives",
            node_id=node.id,
        )
    if node.ordinal in node.peers:
        raise TopologyError(
            f"Self-reference on '{node.id}'\n\n"
            f"How to fix:\n"
            f"  Remove {node.ordinal} from its lateral links",
            node_id=node.id,
        )
    if len(set(node.peers)) != count:
        raise TopologyError(
            f"Duplicate lateral ordinals on '{node.id}': {list(node.peers)}",
            node_id=node.id,
        )
    for ordinal in node.peers:
        if not 1 <= ordinal <= tier_size:
            raise TopologyError(
                f"Out-of-range lateral reference on '{node.id}': "
                f"'{node.tier.prefix}-{ordinal}' does not exist",
                node_id=node.id,
            )


def validate_reference_graph(nx_graph: nx.DiGraph) -> None:
    """Checks that need the assembled reference graph.

    Parent references must form a DAG pointing strictly up the hierarchy.
    Lateral cycles are legal (lateral links are never traced transitively)
    and only logged.
    """
    parent_edges = [
        (u, v) for u, v, data in nx_graph.edges(data=True) if data.get("edge_type") == "parent"
    ]
    upward = nx.DiGraph(parent_edges)
    if not nx.is_directed_acyclic_graph(upward):
        cycle = nx.find_cycle(upward)
        raise TopologyError(f"Cyclic parent references: {cycle}")

    peer_edges = [
        (u, v) for u, v, data in nx_graph.edges(data=True) if data.get("edge_type") == "peer"
    ]
    if peer_edges and logger.isEnabledFor(logging.DEBUG):
        lateral = nx.DiGraph(peer_edges)
        cycles = list(nx.simple_cycles(lateral))
        if cycles:
            logger.debug("Lateral links contain %d cycle(s), e.g. %s", len(cycles), cycles[0])
