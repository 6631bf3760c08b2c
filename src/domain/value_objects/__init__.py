"""Domain value objects.

Immutable objects compared by value:
- AuditEvent: one entry of an application's review timeline
- ReviewFilter: review list filter criteria
"""

from src.domain.value_objects.audit_event import AuditEvent
from src.domain.value_objects.review_filter import ALL, ReviewFilter

__all__ = [
    "ALL",
    "AuditEvent",
    "ReviewFilter",
]
