"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development/production: human-readable console renderer with colors
- Testing/CI: JSON renderer for machine parsing

The minimum level comes from settings (LOG_LEVEL) and is enforced by
structlog's filtering bound logger, so filtered calls cost one comparison.
Context passed at construction (for example ``service="admissions-review"``)
is bound once and appears on every line.

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping). Any object with the same call signatures is compatible
with LoggerProtocol.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _level_number(level: str) -> int:
    """Map a level name to its numeric value; unknown names mean INFO."""
    number = logging.getLevelName(level.strip().upper())
    return number if isinstance(number, int) else logging.INFO


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    """Flatten an exception into error_type/error_message fields."""
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Console logger for every environment of the review engine.

    Args:
        use_json (bool): JSON output when True (CI/testing), human-readable when False.
        level (str): Minimum level name ("DEBUG", "INFO", ...).
        **default_context: Fields bound to every line.
    """

    def __init__(
        self, *, use_json: bool = False, level: str = "INFO", **default_context: Any
    ) -> None:
        """Configure structlog and create the root logger.

        Args:
            use_json (bool): Select JSONRenderer instead of ConsoleRenderer.
            level (str): Minimum level name. Unknown names fall back to INFO.
            **default_context: Fields bound to every line (e.g. service name).
        """
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]
        processors.append(
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        logger = structlog.get_logger()
        self._logger = logger.bind(**default_context) if default_context else logger

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message (persist and publish traces).

        Args:
            message (str): snake_case event name.
            **context: Structured key-value context.
        """
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message (lifecycle and state changes).

        Args:
            message (str): snake_case event name.
            **context: Structured key-value context.
        """
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning (degraded paths: seed fallback, unknown id, failed write).

        Args:
            message (str): snake_case event name.
            **context: Structured key-value context.
        """
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error with optional exception details.

        Args:
            message (str): snake_case event name.
            error (Exception | None): Exception flattened into
                ``error_type`` and ``error_message``.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical message with optional exception details.

        Args:
            message (str): snake_case event name.
            error (Exception | None): Exception flattened into
                ``error_type`` and ``error_message``.
            **context: Structured key-value context.
        """
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter carrying extra context (e.g. ``component``).

        Args:
            **context: Fields added to every subsequent line.

        Returns:
            ConsoleAdapter: New adapter; this one is unchanged.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
