"""Domain events package.

Usage:
    from src.domain.events import ApplicationSubmitted, DomainEvent
"""

from src.domain.events.application_events import Announced, ApplicationSubmitted
from src.domain.events.base_event import DomainEvent

__all__ = [
    "Announced",
    "ApplicationSubmitted",
    "DomainEvent",
]
