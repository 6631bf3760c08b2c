"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the review engine while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(key-value context).

Log Levels:
    - DEBUG: Publish/persist detail
    - INFO: Lifecycle changes (initialized, status changed, submitted)
    - WARNING: Degraded paths (seed fallback, unknown id, failed write)
    - ERROR: Operation failed, system continues
    - CRITICAL: Unrecoverable failure

Context Binding:
    Use bind() to create instance-scoped loggers (instance="review") whose
    context is automatically included in all logs.

Usage:
    from src.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("application_status_changed", application_id="A-1001", status="accepted")

    review_logger = logger.bind(instance="review")
    review_logger.info("review_session_opened")  # instance auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (snake_case; avoid f-strings, use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for unrecoverable failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
