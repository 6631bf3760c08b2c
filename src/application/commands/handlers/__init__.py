"""Command handlers - execute write operations and return Result types."""

from src.application.commands.handlers.submit_application_handler import (
    SubmitApplicationHandler,
)

__all__ = [
    "SubmitApplicationHandler",
]
