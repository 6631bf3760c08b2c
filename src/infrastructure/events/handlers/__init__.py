"""Infrastructure event handlers.

Event Handlers:
    - LoggingEventHandler: Structured logging for review domain events
"""

from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
