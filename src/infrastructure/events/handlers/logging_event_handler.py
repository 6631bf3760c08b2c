"""Logging event handler for domain events.

Writes one structured log line per notification crossing the channel, so the
intake → review hand-off can be traced from logs alone.

Log Levels:
    - INFO: ApplicationSubmitted
    - DEBUG: Announced

Structured Fields:
    - event_type: Event class name
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - application_id / program: for ApplicationSubmitted

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> logging_handler.register(event_bus)
"""

from src.domain.events import Announced, ApplicationSubmitted
from src.domain.protocols.event_bus_protocol import EventBusProtocol, Unsubscribe
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation.
        """
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> list[Unsubscribe]:
        """Subscribe every handler method to the bus.

        Returns:
            Unsubscribe callables, one per subscription.
        """
        return [
            event_bus.subscribe(ApplicationSubmitted, self.handle_application_submitted),
            event_bus.subscribe(Announced, self.handle_announced),
        ]

    def handle_application_submitted(self, event: ApplicationSubmitted) -> None:
        """Log ApplicationSubmitted event (INFO level)."""
        self._logger.info(
            "application_submitted",
            event_type=type(event).__name__,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            application_id=event.application.id,
            program=event.application.program,
        )

    def handle_announced(self, event: Announced) -> None:
        """Log Announced event (DEBUG level)."""
        self._logger.debug(
            "announced",
            event_type=type(event).__name__,
            event_id=str(event.event_id),
            announcement=event.message,
        )
