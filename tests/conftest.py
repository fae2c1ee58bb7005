"""Shared fixtures for curriculum graph tests.

This module provides:
1. A small hand-built graph with known references (``small_graph``)
2. A generated default-size graph with a fixed seed (``generated_graph``)
3. A Topics + Classes only graph for partial datasets
"""

import pytest

from curriculum_graph import CurriculumGraph, CurriculumNode, NodeId, Tier, generate


def topic(n):
    return CurriculumNode(NodeId(Tier.TOPIC, n))


def klass(n, *topics):
    return CurriculumNode(NodeId(Tier.CLASS, n), parents=topics)


def objective(n, class_ordinal, *peers):
    return CurriculumNode(NodeId(Tier.COURSE_OBJECTIVE, n), parents=(class_ordinal,), peers=peers)


def lecture(n, objective_ordinal):
    return CurriculumNode(NodeId(Tier.LECTURE_OBJECTIVE, n), parents=(objective_ordinal,))


def assessment(n, lecture_ordinal):
    return CurriculumNode(NodeId(Tier.ASSESSMENT, n), parents=(lecture_ordinal,))


# =============================================================================
# Graph fixtures
# =============================================================================


def build_small_graph() -> CurriculumGraph:
    """Two topics, two classes, three objectives, three lectures, three assessments.

    References:
        class-1 -> topic-1
        class-2 -> topic-1, topic-2
        objective-1 -> class-1  (peers: 2)
        objective-2 -> class-2  (peers: 3)
        objective-3 -> class-2  (peers: 1)
        lecture-n -> objective-n
        assessment-1, assessment-2 -> lecture-1
        assessment-3 -> lecture-3
    """
    return CurriculumGraph.from_tiers(
        topics=[topic(1), topic(2)],
        classes=[klass(1, 1), klass(2, 1, 2)],
        course_objectives=[objective(1, 1, 2), objective(2, 2, 3), objective(3, 2, 1)],
        lecture_objectives=[lecture(1, 1), lecture(2, 2), lecture(3, 3)],
        assessments=[assessment(1, 1), assessment(2, 1), assessment(3, 3)],
    )


@pytest.fixture
def small_graph():
    """Small graph laid out for the default 800x600 viewport."""
    return build_small_graph().with_layout(800, 600)


@pytest.fixture
def upper_graph():
    """Only Topics and Classes populated."""
    return CurriculumGraph.from_tiers(
        topics=[topic(1), topic(2)],
        classes=[klass(1, 1), klass(2, 2)],
    ).with_layout(800, 600)


@pytest.fixture
def generated_graph():
    """Default-size generated graph with a fixed seed, laid out at 1200x900."""
    return generate(seed=42).with_layout(1200, 900)
