"""Sample dataset generation.

Builds a five-tier curriculum with the reference shape of the demo
data: classes pick one or two random topics, every lower tier maps onto the
tier above in contiguous blocks, and each course objective links laterally to
one or two random other objectives.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping

from curriculum_graph.graph.core import CurriculumGraph
from curriculum_graph.nodes import CurriculumNode
from curriculum_graph.tiers import DEFAULT_TIER_SIZES, PEER_RANGE, TIER_ORDER, NodeId, Tier

logger = logging.getLogger(__name__)

# Random parent count for classes; other tiers use block mapping
_CLASS_TOPIC_RANGE = Tier.CLASS.parent_range


def generate(
    *,
    seed: int | None = None,
    sizes: Mapping[Tier | str, int] | None = None,
) -> CurriculumGraph:
    """Generate a sample curriculum graph.

    Args:
        seed: Random seed. The same seed and sizes always give the same
            topology; None draws fresh randomness.
        sizes: Per-tier node counts overriding the defaults (5/5/15/30/45).
            Keys may be Tier members or id prefixes ("objective").

    Returns:
        A validated CurriculumGraph with all positions at the origin

    Example:
        >>> g = generate(seed=7)
        >>> g.sizes[Tier.ASSESSMENT]
        45
    """
    tier_sizes = resolve_sizes(sizes)
    rng = random.Random(seed)
    logger.debug("Generating curriculum graph (seed=%s, sizes=%s)", seed, tier_sizes)

    n_topics = tier_sizes[Tier.TOPIC]
    n_classes = tier_sizes[Tier.CLASS]
    n_objectives = tier_sizes[Tier.COURSE_OBJECTIVE]
    n_lectures = tier_sizes[Tier.LECTURE_OBJECTIVE]
    n_assessments = tier_sizes[Tier.ASSESSMENT]

    topics = [CurriculumNode(NodeId(Tier.TOPIC, i + 1)) for i in range(n_topics)]
    classes = [
        CurriculumNode(
            NodeId(Tier.CLASS, i + 1),
            parents=random_subset(rng, range(1, n_topics + 1), *_CLASS_TOPIC_RANGE),
        )
        for i in range(n_classes)
    ]
    objectives = [
        CurriculumNode(
            NodeId(Tier.COURSE_OBJECTIVE, i + 1),
            parents=(block_parent(i, n_objectives, n_classes),),
            peers=random_subset(
                rng,
                [o for o in range(1, n_objectives + 1) if o != i + 1],
                *PEER_RANGE,
            ),
        )
        for i in range(n_objectives)
    ]
    lectures = [
        CurriculumNode(
            NodeId(Tier.LECTURE_OBJECTIVE, i + 1),
            parents=(block_parent(i, n_lectures, n_objectives),),
        )
        for i in range(n_lectures)
    ]
    assessments = [
        CurriculumNode(
            NodeId(Tier.ASSESSMENT, i + 1),
            parents=(block_parent(i, n_assessments, n_lectures),),
        )
        for i in range(n_assessments)
    ]

    return CurriculumGraph.from_tiers(topics, classes, objectives, lectures, assessments)


def resolve_sizes(sizes: Mapping[Tier | str, int] | None = None) -> dict[Tier, int]:
    """Merge size overrides into the default tier sizes.

    Raises:
        ValueError: On an unknown tier name or a negative count
    """
    result = dict(DEFAULT_TIER_SIZES)
    for key, count in (sizes or {}).items():
        tier = key if isinstance(key, Tier) else Tier.from_prefix(key)
        if count < 0:
            raise ValueError(f"Tier size for '{tier.prefix}' must be >= 0, got {count}")
        result[tier] = int(count)
    return {tier: result[tier] for tier in TIER_ORDER}


def random_subset(
    rng: random.Random,
    population: range | list[int],
    low: int,
    high: int,
) -> tuple[int, ...]:
    """Pick between *low* and *high* distinct values from *population*.

    The count is capped by the population size, so a population of one
    yields at most one value and an empty population yields ``()``.
    """
    pool = list(population)
    count = rng.randint(low, high)
    return tuple(rng.sample(pool, min(count, len(pool))))


def block_parent(index: int, n_children: int, n_parents: int) -> int:
    """Parent ordinal for the child at 0-based *index* under block mapping.

    Children are split into contiguous, near-equal runs, one per parent:
    with 15 objectives over 5 classes, objectives 1-3 map to class 1.

    Example:
        >>> [block_parent(i, 45, 30) for i in range(4)]
        [1, 1, 2, 3]
    """
    return index * n_parents // n_children + 1
