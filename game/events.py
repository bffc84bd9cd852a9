"""
Observer channel for table listeners.

The ledger and the round engine publish what happened; renderers, network
sessions and AI seats subscribe. Nothing in the game depends on a listener,
and whatever a handler raises is logged and dropped.

By default handlers run on the publishing thread, inside the ledger call that
produced the event, so they must return quickly. A bus created with
``background=True`` hands events to a single worker thread instead: publishing
returns at once and handlers see events in publication order.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from data.enums import EventType
from loggers.event_logger import EventLogger


@dataclass(frozen=True)
class GameEvent:
    """A single notification sent to listeners."""

    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """Fan-out of game events to subscribed handlers.

    Handlers subscribe either to one event type or, with ``event_type=None``,
    to every event. Publishing never fails because of a handler.

    Usage:
        bus = EventBus(background=True)
        bus.subscribe(renderer.on_event)
        ...
        bus.shutdown()  # waits for queued events to be delivered
    """

    def __init__(self, background: bool = False) -> None:
        self._handlers: Dict[Optional[EventType], List[EventHandler]] = {}
        self._executor: Optional[ThreadPoolExecutor] = None
        self._pending: Optional[Future] = None
        if background:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="poker-events"
            )

    @property
    def background(self) -> bool:
        return self._executor is not None

    def subscribe(
        self, handler: EventHandler, event_type: Optional[EventType] = None
    ) -> None:
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(
        self, handler: EventHandler, event_type: Optional[EventType] = None
    ) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: EventType, **data: Any) -> GameEvent:
        """Deliver an event to its subscribers.

        Args:
            event_type: Kind of event
            **data: Event payload

        Returns:
            GameEvent: The event that was delivered, or queued for delivery
        """
        event = GameEvent(event_type=event_type, data=data)
        handlers = self._handlers.get(event_type, []) + self._handlers.get(None, [])
        if not handlers:
            return event
        if self._executor is not None:
            self._pending = self._executor.submit(self._deliver, event, handlers)
        else:
            self._deliver(event, handlers)
        return event

    @staticmethod
    def _deliver(event: GameEvent, handlers: List[EventHandler]) -> None:
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                EventLogger.log_handler_error(event.event_type.value, e)

    def flush(self, timeout: Optional[float] = None) -> None:
        """Wait until every queued event has been delivered."""
        if self._pending is not None:
            self._pending.result(timeout)

    def shutdown(self) -> None:
        """Deliver what is queued and stop the worker thread."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self._pending = None

    def clear(self) -> None:
        self._handlers.clear()
