"""Tests for tiers and tagged node identifiers."""

import pytest

from curriculum_graph.exceptions import InvalidNodeIdError
from curriculum_graph.tiers import DEFAULT_TIER_SIZES, TIER_ORDER, NodeId, Tier, display_name


class TestTier:
    def test_order_is_top_to_bottom(self):
        assert [t.prefix for t in TIER_ORDER] == ["topic", "class", "objective", "lecture", "assessment"]

    def test_levels_follow_order(self):
        assert [t.level for t in TIER_ORDER] == [0, 1, 2, 3, 4]

    def test_parent_and_child(self):
        assert Tier.TOPIC.parent is None
        assert Tier.CLASS.parent is Tier.TOPIC
        assert Tier.LECTURE_OBJECTIVE.child is Tier.ASSESSMENT
        assert Tier.ASSESSMENT.child is None

    def test_parent_ranges(self):
        assert Tier.TOPIC.parent_range == (0, 0)
        assert Tier.CLASS.parent_range == (1, 2)
        assert Tier.COURSE_OBJECTIVE.parent_range == (1, 1)
        assert Tier.ASSESSMENT.parent_range == (1, 1)

    def test_only_course_objectives_have_peers(self):
        assert [t for t in TIER_ORDER if t.has_peers] == [Tier.COURSE_OBJECTIVE]

    def test_default_sizes(self):
        assert [DEFAULT_TIER_SIZES[t] for t in TIER_ORDER] == [5, 5, 15, 30, 45]
        assert Tier.LECTURE_OBJECTIVE.default_size == 30

    def test_from_prefix(self):
        assert Tier.from_prefix("objective") is Tier.COURSE_OBJECTIVE

    def test_from_unknown_prefix_raises(self):
        with pytest.raises(ValueError):
            Tier.from_prefix("module")


class TestNodeId:
    def test_str_form(self):
        assert str(NodeId(Tier.ASSESSMENT, 12)) == "assessment-12"

    def test_parse_round_trips_each_tier(self):
        for tier in TIER_ORDER:
            nid = NodeId(tier, 3)
            assert NodeId.parse(str(nid)) == nid

    def test_parse_passes_node_id_through(self):
        nid = NodeId(Tier.CLASS, 1)
        assert NodeId.parse(nid) is nid

    def test_parse_strips_whitespace(self):
        assert NodeId.parse(" class-2 ") == NodeId(Tier.CLASS, 2)

    @pytest.mark.parametrize("raw", ["", "class", "class-", "class-x", "Class-1", "module-1", "class-1-2"])
    def test_parse_malformed_raises(self, raw):
        with pytest.raises(InvalidNodeIdError) as exc_info:
            NodeId.parse(raw)
        assert exc_info.value.raw.strip() == raw.strip()

    def test_parse_zero_ordinal_raises(self):
        with pytest.raises(InvalidNodeIdError):
            NodeId.parse("topic-0")

    def test_parse_non_string_raises(self):
        with pytest.raises(InvalidNodeIdError):
            NodeId.parse(5)

    def test_error_message_lists_prefixes(self):
        with pytest.raises(InvalidNodeIdError) as exc_info:
            NodeId.parse("bogus")
        message = str(exc_info.value)
        assert "bogus" in message
        assert "objective" in message
        assert "lecture-3" in message

    def test_invalid_id_is_value_error(self):
        with pytest.raises(ValueError):
            NodeId.parse("nope")

    def test_hashable_and_equal(self):
        assert {NodeId(Tier.TOPIC, 1), NodeId(Tier.TOPIC, 1)} == {NodeId(Tier.TOPIC, 1)}
        assert NodeId(Tier.TOPIC, 1) != NodeId(Tier.CLASS, 1)

    def test_sort_key_orders_by_tier_then_ordinal(self):
        ids = [NodeId(Tier.CLASS, 2), NodeId(Tier.TOPIC, 5), NodeId(Tier.CLASS, 1)]
        assert [str(n) for n in sorted(ids, key=lambda n: n.sort_key)] == ["topic-5", "class-1", "class-2"]

    def test_index_is_zero_based(self):
        assert NodeId(Tier.LECTURE_OBJECTIVE, 1).index == 0


class TestDisplayName:
    def test_short_names(self):
        assert display_name(NodeId(Tier.TOPIC, 1)) == "Topic 1"
        assert display_name(NodeId(Tier.CLASS, 2)) == "Class 2"
        assert display_name(NodeId(Tier.COURSE_OBJECTIVE, 4)) == "CO 4"
        assert display_name(NodeId(Tier.LECTURE_OBJECTIVE, 7)) == "LO 7"
        assert display_name(NodeId(Tier.ASSESSMENT, 9)) == "A 9"
