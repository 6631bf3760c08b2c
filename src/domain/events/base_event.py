"""Base domain event class.

Domain events represent "things that happened" in the review domain and are
named in past tense (ApplicationSubmitted, Announced). They are the payloads
carried by the notification channel; the event class doubles as the topic.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID v7, time-ordered) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class ApplicationSubmitted(DomainEvent):
    ...     application: Application
    >>>
    >>> event = ApplicationSubmitted(application=app)
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v7 if not provided. Used to correlate publish/handler logs.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
