"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Multiple handlers for same event, called in subscription order
- Handler failure doesn't break others (fail-open)
- No handlers registered (event dropped)
- Unsubscribe (idempotent, per registration)
- Handlers changing subscriptions during delivery
- close() teardown

Architecture:
- Unit tests with mocked logger
- Tests fail-open behavior (critical requirement)
"""

from unittest.mock import MagicMock

import pytest

from src.domain.events import Announced, ApplicationSubmitted
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from tests.conftest import create_application


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    def test_subscribe_and_publish_single_handler(self):
        """Test subscribing single handler and publishing event."""
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []
        event = ApplicationSubmitted(application=create_application(id="A-1"))

        # Act
        event_bus.subscribe(ApplicationSubmitted, received.append)
        event_bus.publish(event)

        # Assert
        assert received == [event]
        assert received[0].application.id == "A-1"

    def test_handlers_called_in_subscription_order(self):
        """Test multiple handlers for same event type all execute in order."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        call_order = []

        event_bus.subscribe(Announced, lambda e: call_order.append("handler_1"))
        event_bus.subscribe(Announced, lambda e: call_order.append("handler_2"))
        event_bus.subscribe(Announced, lambda e: call_order.append("handler_3"))

        event_bus.publish(Announced(message="hi"))

        assert call_order == ["handler_1", "handler_2", "handler_3"]

    def test_only_exact_event_type_receives(self):
        """Test the event class is the topic."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []
        event_bus.subscribe(ApplicationSubmitted, received.append)

        event_bus.publish(Announced(message="hi"))

        assert received == []

    def test_publish_without_subscribers_is_dropped(self):
        """Test no handlers → debug log, no error."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        event_bus.publish(Announced(message="lost"))

        mock_logger.debug.assert_called_once()
        assert mock_logger.debug.call_args.args[0] == "event_dropped_no_subscribers"

    def test_delivery_is_synchronous(self):
        """Test handler has run when publish returns."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        state = {"done": False}

        def handler(event):
            state["done"] = True

        event_bus.subscribe(Announced, handler)
        event_bus.publish(Announced(message="x"))

        assert state["done"] is True


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test handler failures never propagate."""

    def test_failing_handler_does_not_stop_others(self):
        """Test fail-open delivery."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        received = []

        def failing_handler(event):
            raise RuntimeError("boom")

        event_bus.subscribe(Announced, failing_handler)
        event_bus.subscribe(Announced, received.append)

        event_bus.publish(Announced(message="x"))

        assert len(received) == 1

    def test_failure_logged_as_warning(self):
        """Test warning carries handler name and error details."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        def failing_handler(event):
            raise ValueError("bad payload")

        event_bus.subscribe(Announced, failing_handler)
        event_bus.publish(Announced(message="x"))

        mock_logger.warning.assert_called_once()
        call = mock_logger.warning.call_args
        assert call.args[0] == "event_handler_failed"
        assert call.kwargs["handler_name"] == "failing_handler"
        assert call.kwargs["error_type"] == "ValueError"
        assert call.kwargs["error_message"] == "bad payload"
        assert call.kwargs["event_type"] == "Announced"


@pytest.mark.unit
class TestInMemoryEventBusSubscriptions:
    """Test unsubscribe and close."""

    def test_unsubscribe_removes_handler(self):
        """Test unsubscribed handler is not called."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []
        unsubscribe = event_bus.subscribe(Announced, received.append)

        unsubscribe()
        event_bus.publish(Announced(message="x"))

        assert received == []
        assert event_bus.subscriber_count(Announced) == 0

    def test_unsubscribe_is_idempotent(self):
        """Test calling unsubscribe twice is harmless."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        unsubscribe = event_bus.subscribe(Announced, lambda e: None)

        unsubscribe()
        unsubscribe()

        assert event_bus.subscriber_count(Announced) == 0

    def test_duplicate_registrations_are_independent(self):
        """Test same handler twice gets two deliveries and two unsubscribes."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []
        first = event_bus.subscribe(Announced, received.append)
        event_bus.subscribe(Announced, received.append)

        first()
        event_bus.publish(Announced(message="x"))

        assert len(received) == 1

    def test_unsubscribe_during_delivery_affects_next_publish(self):
        """Test handler list is snapshotted at publish time."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []
        unsubscribers = []

        def self_removing(event):
            received.append("self_removing")
            unsubscribers[0]()

        unsubscribers.append(event_bus.subscribe(Announced, self_removing))
        event_bus.subscribe(Announced, lambda e: received.append("other"))

        event_bus.publish(Announced(message="1"))
        event_bus.publish(Announced(message="2"))

        assert received == ["self_removing", "other", "other"]

    def test_subscribe_during_delivery_not_called_for_current_event(self):
        """Test late subscribers only see later events."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        late = []

        def subscriber(event):
            event_bus.subscribe(Announced, late.append)

        event_bus.subscribe(Announced, subscriber)
        event_bus.publish(Announced(message="1"))

        assert late == []

    def test_close_drops_all_subscriptions(self):
        """Test teardown."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        event_bus.subscribe(Announced, lambda e: None)
        event_bus.subscribe(ApplicationSubmitted, lambda e: None)

        event_bus.close()

        assert event_bus.subscriber_count(Announced) == 0
        assert event_bus.subscriber_count(ApplicationSubmitted) == 0
        mock_logger.debug.assert_called_with("event_bus_closed", dropped_subscriptions=2)

    def test_unsubscribe_after_close_is_harmless(self):
        """Test stale unsubscribe callables."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        unsubscribe = event_bus.subscribe(Announced, lambda e: None)
        event_bus.close()

        unsubscribe()

        assert event_bus.subscriber_count(Announced) == 0
