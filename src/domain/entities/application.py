"""Application domain entity.

Pure business logic, no framework dependencies.

An Application is one intake record under faculty review. It carries the
applicant's display fields, the current review status and an append-only
timeline of AuditEvents stored newest first.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.domain.enums import ReviewStatus
from src.domain.value_objects import AuditEvent

SUBMITTED_ACTION = "Submitted"
STATUS_ACTION_PREFIX = "Status → "
DEFAULT_PROGRAM = "Unknown"


def status_action(status: ReviewStatus) -> str:
    """Timeline description for a status change ("Status → accepted")."""
    return f"{STATUS_ACTION_PREFIX}{status.value}"


def application_id_for(at: datetime, taken: Iterable[str] = ()) -> str:
    """Derive an application id from a submission time.

    Ids have the form ``A-<epoch milliseconds>``. When the id is already in
    ``taken`` the millisecond suffix is bumped until it is free.

    Args:
        at: Submission time.
        taken: Ids already present in the collection.

    Returns:
        An id not contained in ``taken``.
    """
    used = set(taken)
    millis = int(at.timestamp() * 1000)
    while f"A-{millis}" in used:
        millis += 1
    return f"A-{millis}"


@dataclass(slots=True, kw_only=True)
class Application:
    """Application under review.

    Business Rules:
        - id and submitted_at never change after creation
        - every status change prepends exactly one AuditEvent to history
        - notes edits never touch history
        - history is newest first and never reordered or truncated
        - any status may follow any other status

    Attributes:
        id: Unique identifier within the collection ("A-1001").
        name: Applicant display name.
        email: Applicant email (not validated here).
        program: Program applied to.
        submitted_at: Submission time (UTC).
        status: Current review status.
        score: Optional score; None means not scored yet.
        doc_url: Optional opaque reference to the attached document.
        notes: Optional reviewer notes.
        history: Timeline, newest first.

    Example:
        >>> app = Application.submit(
        ...     id="A-1", name="Ada", email="ada@example.com",
        ...     program="MBA", submitted_by="Student",
        ... )
        >>> _ = app.record_status_change(ReviewStatus.ACCEPTED, by="Faculty Reviewer")
        >>> app.history[0].action
        'Status → accepted'
    """

    # Identity
    id: str

    # Applicant
    name: str
    email: str
    program: str
    submitted_at: datetime

    # Review state
    status: ReviewStatus = ReviewStatus.NEW
    score: float | None = None
    doc_url: str | None = None
    notes: str | None = None
    history: list[AuditEvent] = field(default_factory=list)

    @classmethod
    def submit(
        cls,
        *,
        id: str,
        name: str,
        email: str,
        program: str,
        submitted_by: str,
        submitted_at: datetime | None = None,
        doc_url: str | None = None,
    ) -> "Application":
        """Create a freshly submitted application.

        Name and email are trimmed, a blank program becomes "Unknown", notes
        start empty and the timeline holds a single "Submitted" event
        attributed to ``submitted_by``.

        Args:
            id: Identifier (see application_id_for).
            name: Applicant name.
            email: Applicant email.
            program: Program applied to.
            submitted_by: Submitting party recorded on the seed event.
            submitted_at: Submission time. Defaults to now (UTC).
            doc_url: Optional document reference.

        Returns:
            Application with status NEW.
        """
        at = submitted_at or datetime.now(UTC)
        return cls(
            id=id,
            name=name.strip(),
            email=email.strip(),
            program=program.strip() or DEFAULT_PROGRAM,
            submitted_at=at,
            status=ReviewStatus.NEW,
            score=None,
            doc_url=doc_url,
            notes="",
            history=[AuditEvent(at=at, action=SUBMITTED_ACTION, by=submitted_by)],
        )

    def record_status_change(
        self,
        status: ReviewStatus,
        *,
        by: str,
        comment: str | None = None,
        at: datetime | None = None,
    ) -> AuditEvent:
        """Move to a new status and prepend the matching AuditEvent.

        No transition is forbidden; setting the current status again still
        records an event.

        Args:
            status: New status.
            by: Actor identifier.
            comment: Optional comment stored on the event.
            at: Event time. Defaults to now (UTC).

        Returns:
            The AuditEvent that was prepended.
        """
        event = AuditEvent(
            at=at or datetime.now(UTC),
            action=status_action(status),
            by=by,
            comment=comment,
        )
        self.status = status
        self.history.insert(0, event)
        return event

    def replace_notes(self, text: str) -> None:
        """Replace reviewer notes. History is left untouched."""
        self.notes = text

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring test over name, email, program and id.

        Args:
            needle: Lower-cased search text.

        Returns:
            True if any of the four fields contains the needle.
        """
        return any(
            needle in value.lower()
            for value in (self.name, self.email, self.program, self.id)
        )
