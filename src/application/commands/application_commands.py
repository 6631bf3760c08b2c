"""Application intake commands (CQRS write operations).

Commands represent intent to change the application collection.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class SubmitApplication:
    """Hand a completed intake form to the review side.

    Field content is trusted: intake validation happens before this point.

    Attributes:
        name: Applicant name (trimmed on creation).
        email: Applicant email (trimmed on creation).
        program: Program applied to; blank becomes "Unknown".
        doc_url: Optional reference to the uploaded document.
        submitted_at: Submission time. Defaults to now (UTC).

    Example:
        >>> command = SubmitApplication(
        ...     name="Linus Torvalds",
        ...     email="linus@example.com",
        ...     program="B.Sc. Computer Science",
        ... )
        >>> result = handler.handle(command)
    """

    name: str
    email: str
    program: str
    doc_url: str | None = None
    submitted_at: datetime | None = None
