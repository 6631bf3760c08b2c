"""AuditEvent value object.

One immutable entry of an application's review timeline. Events are created
by the Application entity and never edited afterwards.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditEvent:
    """Immutable record of one lifecycle change.

    Attributes:
        at: When the change happened (UTC).
        action: Human-readable description ("Submitted", "Status → accepted").
        by: Actor identifier ("Student", "Faculty Reviewer", "System").
        comment: Optional free-text comment supplied with the change.
    """

    at: datetime
    action: str
    by: str
    comment: str | None = None
