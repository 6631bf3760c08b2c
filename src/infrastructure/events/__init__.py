"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: synchronous notification channel with fail-open behavior

Event Handlers:
    - LoggingEventHandler: Structured logging for review domain events

Usage:
    >>> from src.infrastructure.events import InMemoryEventBus
    >>> event_bus = InMemoryEventBus(logger=logger)
"""

from src.infrastructure.events.handlers import LoggingEventHandler
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
    "LoggingEventHandler",
]
