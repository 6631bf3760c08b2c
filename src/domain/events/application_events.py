"""Application review domain events.

Events:
    - ApplicationSubmitted: intake side finished the append-and-notify hand-off
    - Announced: a short status message for the live announcement region

ApplicationSubmitted is published only after the snapshot containing the
application has been written, so a handler that reads the store always
observes the new record.
"""

from dataclasses import dataclass

from src.domain.entities import Application
from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class ApplicationSubmitted(DomainEvent):
    """A new application was persisted by the intake side.

    Attributes:
        application: The newly created record (status NEW, one history entry).
    """

    application: Application


@dataclass(frozen=True, kw_only=True, slots=True)
class Announced(DomainEvent):
    """Polite status message for screen-reader announcement.

    Attributes:
        message: Text to announce.
    """

    message: str
