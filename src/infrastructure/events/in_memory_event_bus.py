"""In-memory event bus implementation.

This module implements the EventBusProtocol using an in-memory dictionary-based
registry. It is the notification channel between the intake side and the
review side of one process.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type → list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Synchronous, in-order handler execution
    - Explicit teardown via close()

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> unsubscribe = bus.subscribe(ApplicationSubmitted, store_handler)
    >>> bus.publish(ApplicationSubmitted(application=app))
    >>> unsubscribe()
    >>> bus.close()
"""

from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler, Unsubscribe
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        - NOT thread-safe (single-threaded, cooperative design)

    Delivery:
        - At-most-once: events published with no subscriber are dropped
        - In-order: handlers run in subscription order, each to completion
        - Snapshot of handlers taken at publish time, so a handler that
          unsubscribes (or subscribes) during delivery affects only later
          publishes

    Attributes:
        _handlers: Dictionary mapping event types to list of handlers.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning level) and event
                publishing (debug level).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> Unsubscribe:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches
                (no inheritance matching).
            handler: Callable invoked with the event.

        Returns:
            Callable removing this subscription. Idempotent.

        Notes:
            - No duplicate detection (same handler can be registered twice;
              each registration gets its own unsubscribe)
        """
        entry = _Subscription(handler)
        self._handlers[event_type].append(entry)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event_type)
            if handlers is not None and entry in handlers:
                handlers.remove(entry)

        return unsubscribe

    def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Flow:
            1. Look up handlers for type(event)
            2. If no handlers, return immediately (event dropped)
            3. Call each handler in subscription order
            4. Log any handler exception (warning level) and continue

        Args:
            event: Domain event to publish.

        Notes:
            - NEVER raises handler exceptions (fail-open guarantee)
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            self._logger.debug(
                "event_dropped_no_subscribers",
                event_type=event_type.__name__,
                event_id=str(event.event_id),
            )
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=handler.name,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )

    def close(self) -> None:
        """Drop every subscription. The bus stays usable afterwards."""
        count = sum(len(handlers) for handlers in self._handlers.values())
        self._handlers.clear()
        self._logger.debug("event_bus_closed", dropped_subscriptions=count)

    def subscriber_count(self, event_type: type[DomainEvent]) -> int:
        """Number of live subscriptions for an event type."""
        return len(self._handlers.get(event_type, []))


class _Subscription:
    """One registration; identity-compared so duplicate handlers stay distinct."""

    __slots__ = ("_handler",)

    def __init__(self, handler: EventHandler) -> None:
        self._handler = handler

    def __call__(self, event: DomainEvent) -> None:
        self._handler(event)

    @property
    def name(self) -> str:
        return getattr(self._handler, "__name__", type(self._handler).__name__)
