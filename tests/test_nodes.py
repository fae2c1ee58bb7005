"""Tests for CurriculumNode."""

from curriculum_graph.coordinates import ORIGIN, Point
from curriculum_graph.nodes import CurriculumNode
from curriculum_graph.tiers import NodeId, Tier


class TestCurriculumNode:
    def test_default_name(self):
        node = CurriculumNode(NodeId(Tier.COURSE_OBJECTIVE, 4))
        assert node.name == "CO 4"

    def test_explicit_name_kept(self):
        node = CurriculumNode(NodeId(Tier.TOPIC, 1), name="Algebra")
        assert node.name == "Algebra"

    def test_lists_become_tuples(self):
        node = CurriculumNode(NodeId(Tier.CLASS, 1), parents=[1, 2])
        assert node.parents == (1, 2)

    def test_parent_ids_point_one_tier_up(self):
        node = CurriculumNode(NodeId(Tier.CLASS, 1), parents=(2, 3))
        assert node.parent_ids == (NodeId(Tier.TOPIC, 2), NodeId(Tier.TOPIC, 3))

    def test_topic_has_no_parent_ids(self):
        assert CurriculumNode(NodeId(Tier.TOPIC, 1)).parent_ids == ()

    def test_peer_ids_stay_in_tier(self):
        node = CurriculumNode(NodeId(Tier.COURSE_OBJECTIVE, 1), parents=(1,), peers=(5,))
        assert node.peer_ids == (NodeId(Tier.COURSE_OBJECTIVE, 5),)

    def test_default_position_is_origin(self):
        assert CurriculumNode(NodeId(Tier.TOPIC, 1)).position == ORIGIN

    def test_at_returns_moved_copy(self):
        node = CurriculumNode(NodeId(Tier.TOPIC, 1))
        moved = node.at(Point(10, 20))
        assert moved.position == Point(10, 20)
        assert node.position == ORIGIN

    def test_equality_ignores_position(self):
        node = CurriculumNode(NodeId(Tier.TOPIC, 1))
        assert node.at(Point(1, 1)) == node
