import threading
from unittest.mock import Mock

from data.enums import EventType
from game.events import EventBus, GameEvent
from loggers.event_logger import EventLogger


class TestEventBus:
    def test_subscribe_to_one_type(self, event_bus):
        handler = Mock()
        event_bus.subscribe(handler, EventType.PLAYER_ACTION)

        event_bus.publish(EventType.PLAYER_ACTION, player="Alice")
        event_bus.publish(EventType.HAND_COMPLETE)

        handler.assert_called_once()
        event = handler.call_args[0][0]
        assert isinstance(event, GameEvent)
        assert event.data == {"player": "Alice"}

    def test_subscribe_to_everything(self, event_bus, listener):
        event_bus.publish(EventType.STATE_CHANGED, new_state="dealing")
        event_bus.publish(EventType.CARDS_DEALT, street=1)

        assert [e.event_type for e in listener.events] == [
            EventType.STATE_CHANGED,
            EventType.CARDS_DEALT,
        ]

    def test_subscribing_twice_delivers_once(self, event_bus):
        handler = Mock()
        event_bus.subscribe(handler)
        event_bus.subscribe(handler)

        event_bus.publish(EventType.POT_TOTAL_CHANGED)

        assert handler.call_count == 1

    def test_unsubscribe(self, event_bus):
        handler = Mock()
        event_bus.subscribe(handler, EventType.PLAYER_ACTION)
        event_bus.unsubscribe(handler, EventType.PLAYER_ACTION)

        event_bus.publish(EventType.PLAYER_ACTION)

        handler.assert_not_called()

    def test_failing_handler_does_not_stop_delivery(self, event_bus, monkeypatch):
        """Test that a broken listener never breaks the game.

        Assumptions:
            - The first handler raises
            - The error is logged and the second handler still runs
        """
        log_error = Mock()
        monkeypatch.setattr(EventLogger, "log_handler_error", log_error)
        broken = Mock(side_effect=RuntimeError("renderer crashed"))
        healthy = Mock()
        event_bus.subscribe(broken)
        event_bus.subscribe(healthy)

        event = event_bus.publish(EventType.HAND_COMPLETE, hand=1)

        healthy.assert_called_once_with(event)
        log_error.assert_called_once()

    def test_clear(self):
        bus = EventBus()
        handler = Mock()
        bus.subscribe(handler)

        bus.clear()
        bus.publish(EventType.HAND_COMPLETE)

        handler.assert_not_called()

    def test_background_delivery_does_not_block_publisher(self):
        """Test that a slow listener on a background bus never holds up the game.

        Assumptions:
            - The first delivery waits until the test releases it
            - Publishing returns while that handler is still waiting
            - Events arrive in the order they were published
        """
        bus = EventBus(background=True)
        release = threading.Event()
        received = []

        def slow_handler(event):
            release.wait(5)
            received.append(event.data["n"])

        bus.subscribe(slow_handler)
        try:
            bus.publish(EventType.POT_TOTAL_CHANGED, n=1)
            bus.publish(EventType.POT_TOTAL_CHANGED, n=2)

            assert received == []

            release.set()
            bus.flush(timeout=5)
            assert received == [1, 2]
        finally:
            bus.shutdown()

        assert not bus.background

    def test_background_handler_errors_are_logged(self, monkeypatch):
        log_error = Mock()
        monkeypatch.setattr(EventLogger, "log_handler_error", log_error)
        bus = EventBus(background=True)
        bus.subscribe(Mock(side_effect=RuntimeError("renderer crashed")))

        bus.publish(EventType.HAND_COMPLETE)
        bus.shutdown()

        log_error.assert_called_once()
