"""Fan-out of session events to registered processors."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from curriculum_graph.events.processor import EventProcessor

if TYPE_CHECKING:
    from curriculum_graph.events.types import Event

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Delivers each event to every processor, in registration order.

    Delivery is best-effort: a processor that raises is logged and skipped
    so one bad observer cannot stall the visualization. Pass
    ``strict=True`` in tests to surface processor errors instead.

    Example:
        >>> dispatcher = EventDispatcher()
        >>> dispatcher.active
        False
    """

    def __init__(
        self,
        processors: Iterable[EventProcessor] | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self._processors: list[EventProcessor] = list(processors or ())
        self._strict = strict

    @property
    def active(self) -> bool:
        """True if any processor is registered."""
        return bool(self._processors)

    @property
    def processors(self) -> tuple[EventProcessor, ...]:
        return tuple(self._processors)

    def add(self, processor: EventProcessor) -> None:
        self._processors.append(processor)

    def remove(self, processor: EventProcessor) -> None:
        """Unregister *processor*; unknown processors are ignored."""
        if processor in self._processors:
            self._processors.remove(processor)

    def emit(self, event: Event) -> None:
        """Send *event* to every processor synchronously."""
        for processor in self._processors:
            self._call(processor, processor.on_event, event, f"on {type(event).__name__}")

    def shutdown(self) -> None:
        """Shut down every processor.

        In strict mode all processors are still shut down; the first error
        is re-raised afterwards.
        """
        first_error: Exception | None = None
        for processor in self._processors:
            try:
                self._call(processor, processor.shutdown, None, "during shutdown")
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    def _call(
        self,
        processor: EventProcessor,
        method: Callable[..., None],
        event: Event | None,
        context: str,
    ) -> None:
        try:
            if event is None:
                method()
            else:
                method(event)
        except Exception:
            if self._strict:
                raise
            logger.warning("EventProcessor %s failed %s", processor, context, exc_info=True)
