"""Tests for the event dispatcher and processor base classes."""

from __future__ import annotations

import logging

import pytest

from curriculum_graph.events import EventDispatcher, EventProcessor, TypedEventProcessor
from curriculum_graph.events.types import (
    EdgeHoverEvent,
    LayoutComputedEvent,
    SelectionChangedEvent,
    ViewportResizedEvent,
)
from curriculum_graph.tiers import NodeId, Tier


class ListProcessor(EventProcessor):
    def __init__(self):
        self.events: list = []
        self.shutdown_called = False

    def on_event(self, event):
        self.events.append(event)

    def shutdown(self):
        self.shutdown_called = True


class FailingProcessor(EventProcessor):
    def on_event(self, event):
        raise RuntimeError("boom")

    def shutdown(self):
        raise RuntimeError("shutdown boom")


class RecordingTypedProcessor(TypedEventProcessor):
    def __init__(self):
        self.calls: list[str] = []

    def on_selection_changed(self, event):
        self.calls.append("selection")

    def on_viewport_resized(self, event):
        self.calls.append("resize")


def _selection():
    return SelectionChangedEvent(session_id="s", selected=NodeId(Tier.TOPIC, 1), edge_count=2)


class TestEventDispatcher:
    def test_inactive_without_processors(self):
        assert not EventDispatcher().active

    def test_add_activates(self):
        dispatcher = EventDispatcher()
        dispatcher.add(ListProcessor())
        assert dispatcher.active

    def test_remove(self):
        processor = ListProcessor()
        dispatcher = EventDispatcher([processor])
        dispatcher.remove(processor)
        dispatcher.remove(processor)
        dispatcher.emit(_selection())
        assert processor.events == []
        assert dispatcher.processors == ()

    def test_fan_out(self):
        a, b = ListProcessor(), ListProcessor()
        dispatcher = EventDispatcher([a, b])
        event = _selection()
        dispatcher.emit(event)
        assert a.events == [event]
        assert b.events == [event]

    def test_failing_processor_is_isolated(self, caplog):
        good = ListProcessor()
        dispatcher = EventDispatcher([FailingProcessor(), good])
        with caplog.at_level(logging.WARNING, logger="curriculum_graph.events.dispatcher"):
            dispatcher.emit(_selection())
        assert len(good.events) == 1
        assert "SelectionChangedEvent" in caplog.text

    def test_strict_propagates(self):
        dispatcher = EventDispatcher([FailingProcessor()], strict=True)
        with pytest.raises(RuntimeError, match="boom"):
            dispatcher.emit(_selection())

    def test_shutdown_best_effort(self):
        good = ListProcessor()
        EventDispatcher([FailingProcessor(), good]).shutdown()
        assert good.shutdown_called

    def test_shutdown_strict_raises_after_all(self):
        good = ListProcessor()
        dispatcher = EventDispatcher([FailingProcessor(), good], strict=True)
        with pytest.raises(RuntimeError, match="shutdown boom"):
            dispatcher.shutdown()
        assert good.shutdown_called


class TestTypedEventProcessor:
    def test_routes_by_type(self):
        processor = RecordingTypedProcessor()
        processor.on_event(_selection())
        processor.on_event(ViewportResizedEvent(session_id="s", width=800, height=600, ticket=1))
        processor.on_event(LayoutComputedEvent(session_id="s"))
        assert processor.calls == ["selection", "resize"]

    def test_unhandled_types_ignored(self):
        processor = TypedEventProcessor()
        processor.on_event(EdgeHoverEvent(session_id="s", edge_id="a-b"))


class TestEventTypes:
    def test_frozen(self):
        import dataclasses

        with pytest.raises(dataclasses.FrozenInstanceError):
            _selection().edge_count = 3

    def test_timestamp_default(self):
        assert _selection().timestamp > 0

    def test_cleared(self):
        assert SelectionChangedEvent(session_id="s", previous=NodeId(Tier.TOPIC, 1)).cleared
        assert not _selection().cleared
