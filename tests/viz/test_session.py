"""Tests for the interactive VizSession controller."""

import logging

import pytest

from curriculum_graph import NodeId, NodeNotFoundError, Tier
from curriculum_graph.coordinates import Point, Viewport
from curriculum_graph.events import EventProcessor
from curriculum_graph.events.types import (
    EdgeHoverEvent,
    LayoutComputedEvent,
    SelectionChangedEvent,
    ViewportResizedEvent,
)
from curriculum_graph.viz.session import VizSession
from curriculum_graph.viz.view_state import ViewState


class ListProcessor(EventProcessor):
    """Collects all events for assertion."""

    def __init__(self):
        self.events: list = []
        self.shutdown_called = False

    def on_event(self, event):
        self.events.append(event)

    def shutdown(self):
        self.shutdown_called = True

    def of_type(self, cls):
        return [e for e in self.events if isinstance(e, cls)]

    def event_types(self):
        return [type(e).__name__ for e in self.events]


@pytest.fixture
def recorder():
    return ListProcessor()


@pytest.fixture
def session(small_graph, recorder):
    return VizSession(small_graph, processors=[recorder], session_id="test-session")


class TestConstruction:
    def test_lays_out_for_viewport(self, small_graph):
        session = VizSession(small_graph, view=ViewState().with_viewport(1300, 900))
        # (1300 - 100) / 3 between the two topics
        assert session.graph.position_of(NodeId(Tier.TOPIC, 1)) == Point(450.0, 50.0)

    def test_clamps_initial_viewport(self, small_graph):
        session = VizSession(small_graph, view=ViewState(viewport=Viewport(10, 10)))
        assert session.view.viewport == Viewport(800.0, 600.0)

    def test_rejects_unknown_preselection(self, small_graph):
        with pytest.raises(NodeNotFoundError):
            VizSession(small_graph, view=ViewState(selected="lecture-8"))

    def test_generated_session_id(self, small_graph):
        assert len(VizSession(small_graph).session_id) == 16


class TestClickNode:
    def test_select_emits_event(self, session, recorder):
        view = session.click_node("lecture-1")
        assert view.selected == NodeId(Tier.LECTURE_OBJECTIVE, 1)
        (event,) = recorder.of_type(SelectionChangedEvent)
        assert event.previous is None
        assert event.selected == NodeId(Tier.LECTURE_OBJECTIVE, 1)
        assert event.edge_count == 5
        assert event.session_id == "test-session"

    def test_second_click_clears(self, session, recorder):
        session.click_node("lecture-1")
        view = session.click_node("lecture-1")
        assert view.selected is None
        assert session.connections() == []
        events = recorder.of_type(SelectionChangedEvent)
        assert len(events) == 2
        assert events[1].cleared
        assert events[1].edge_count == 0

    def test_switch_selection(self, session, recorder):
        session.click_node("topic-1")
        session.click_node("topic-2")
        last = recorder.of_type(SelectionChangedEvent)[-1]
        assert last.previous == NodeId(Tier.TOPIC, 1)
        assert last.selected == NodeId(Tier.TOPIC, 2)

    def test_unknown_node_leaves_state(self, session, recorder):
        session.click_node("class-1")
        with pytest.raises(NodeNotFoundError):
            session.click_node("class-5")
        assert session.view.selected == NodeId(Tier.CLASS, 1)
        assert len(recorder.events) == 1

    def test_connections_follow_selection(self, session):
        session.click_node("class-1")
        assert [e.id for e in session.connections()] == ["class-1-topic-1", "class-1-objective-1"]


class TestClickBackground:
    def test_clears_selection(self, session, recorder):
        session.click_node("topic-1")
        session.click_background()
        assert session.view.selected is None
        assert recorder.of_type(SelectionChangedEvent)[-1].cleared

    def test_no_event_when_nothing_selected(self, session, recorder):
        session.click_background()
        assert recorder.events == []


class TestHover:
    def test_hover_emits_once(self, session, recorder):
        session.click_node("class-1")
        session.hover_edge("class-1-topic-1")
        session.hover_edge("class-1-topic-1")
        events = recorder.of_type(EdgeHoverEvent)
        assert [e.edge_id for e in events] == ["class-1-topic-1"]
        assert session.scene().edges[0].hovered

    def test_unhover(self, session, recorder):
        session.hover_edge("class-1-topic-1")
        session.hover_edge(None)
        assert session.view.hovered_edge is None
        assert [e.edge_id for e in recorder.of_type(EdgeHoverEvent)] == ["class-1-topic-1", None]


class TestResize:
    def test_resize_relayouts_and_emits(self, session, recorder):
        session.resize(1300, 900)
        assert session.view.viewport == Viewport(1300, 900)
        assert session.graph.position_of(NodeId(Tier.TOPIC, 1)) == Point(450.0, 50.0)
        assert recorder.event_types() == ["ViewportResizedEvent", "LayoutComputedEvent"]
        layout = recorder.of_type(LayoutComputedEvent)[0]
        assert layout.node_count == 13

    def test_resize_is_clamped(self, session, recorder):
        session.resize(200, 100)
        assert session.view.viewport == Viewport(800.0, 600.0)
        event = recorder.of_type(ViewportResizedEvent)[0]
        assert (event.width, event.height) == (800.0, 600.0)

    def test_last_request_wins(self, session, recorder):
        first = session.request_resize(1000, 700)
        second = session.request_resize(1600, 900)
        assert session.apply_resize(first) is False
        assert session.apply_resize(second) is True
        assert session.view.viewport == Viewport(1600, 900)
        assert [e.ticket for e in recorder.of_type(ViewportResizedEvent)] == [second]

    def test_ticket_applies_once(self, session):
        ticket = session.request_resize(1000, 700)
        assert session.apply_resize(ticket)
        assert not session.apply_resize(ticket)

    def test_stale_ticket_logged(self, session, caplog):
        stale = session.request_resize(1000, 700)
        session.request_resize(1100, 700)
        with caplog.at_level(logging.WARNING, logger="curriculum_graph.viz.session"):
            session.apply_resize(stale)
        assert "stale resize ticket" in caplog.text

    def test_selection_survives_resize(self, session):
        session.click_node("objective-2")
        session.resize(1400, 800)
        assert session.view.selected == NodeId(Tier.COURSE_OBJECTIVE, 2)
        edge = session.connections()[0]
        assert edge.source_position == session.graph.position_of(NodeId(Tier.COURSE_OBJECTIVE, 2))


class TestRendering:
    def test_render_svg(self, session):
        session.click_node("lecture-1")
        svg = session.render_svg()
        assert 'data-selected="lecture-1"' in svg

    def test_render_html(self, session):
        assert session.render_html(theme="dark").startswith("<!DOCTYPE html>")


class TestClose:
    def test_close_shuts_down_processors(self, session, recorder):
        session.close()
        assert recorder.shutdown_called
