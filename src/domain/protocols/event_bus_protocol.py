"""Event bus protocol (port) for the notification channel.

The notification channel propagates newly created applications from the
intake side to any live review side in the same process. Delivery is
synchronous, best-effort and at-most-once: events published while no handler
is subscribed are dropped, which is why every review instance also loads the
persisted snapshot when it starts.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure provides the adapter (InMemoryEventBus)
    - Container (src/core/container) provides the factory function

Usage:
    >>> def on_submitted(event: ApplicationSubmitted) -> None:
    ...     store.reconcile_incoming(event.application)
    >>>
    >>> unsubscribe = event_bus.subscribe(ApplicationSubmitted, on_submitted)
    >>> event_bus.publish(ApplicationSubmitted(application=app))
    >>> unsubscribe()
"""

from collections.abc import Callable
from typing import Any, Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[Any], None]
"""Type alias for event handler callables.

Event handlers must:
    - Accept a single DomainEvent (or specific subclass) parameter
    - Return None (side-effects only)
    - Be synchronous; they run to completion inside publish()
"""

Unsubscribe = Callable[[], None]
"""Callable returned by subscribe(); removes that one subscription."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing. Log errors but continue processing.
        2. **Synchronous delivery**: publish() returns after every handler ran.
        3. **In-order**: handlers run in subscription order; events from one
           publisher are delivered in publish order.
        4. **Type-based routing**: the event class is the topic; only exact
           type matches are delivered.
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> Unsubscribe:
        """Register a handler for one event type.

        Args:
            event_type: Event class to receive (exact type match).
            handler: Callable invoked with the event.

        Returns:
            Callable that removes this subscription. Calling it twice is a
            no-op.
        """
        ...

    def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every handler currently subscribed to its type.

        No handlers = no-op (the event is lost). Handler exceptions are logged
        and never propagated to the publisher.

        Args:
            event: Event to deliver.
        """
        ...

    def close(self) -> None:
        """Tear down the bus: drop every subscription."""
        ...
