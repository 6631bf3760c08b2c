"""Default seed collection.

Three example applications used when the store holds no snapshot or the
stored snapshot cannot be read. Submission times are relative to the load
time so the "recent" ordering always looks plausible.
"""

from datetime import datetime, timedelta

from src.domain.entities import Application
from src.domain.entities.application import SUBMITTED_ACTION
from src.domain.enums import ReviewStatus
from src.domain.value_objects import AuditEvent

SAMPLE_DOCUMENT_URL = "https://www.orimi.com/pdf-test.pdf"


def default_applications(now: datetime, *, actor: str = "System") -> list[Application]:
    """Build the seed collection.

    Args:
        now: Load time; submissions are placed 3 days, 2 days and 18 hours
            before it. Seed events are stamped with ``now``.
        actor: Actor recorded on each seed "Submitted" event.

    Returns:
        Fresh list of three applications (A-1001, A-1002, A-1003).
    """
    seeds = [
        ("A-1001", "Ananya Rao", "ananya.rao@example.com", "B.Sc. Computer Science",
         timedelta(days=3), 86, ReviewStatus.NEW, SAMPLE_DOCUMENT_URL),
        ("A-1002", "Vishal Mehta", "vishal.mehta@example.com", "MBA",
         timedelta(days=2), 91, ReviewStatus.IN_REVIEW, None),
        ("A-1003", "Sara Khan", "sara.khan@example.com", "B.A.",
         timedelta(hours=18), 78, ReviewStatus.WAITLISTED, None),
    ]
    return [
        Application(
            id=app_id,
            name=name,
            email=email,
            program=program,
            submitted_at=now - age,
            score=score,
            status=status,
            doc_url=doc_url,
            history=[AuditEvent(at=now, action=SUBMITTED_ACTION, by=actor)],
        )
        for app_id, name, email, program, age, score, status, doc_url in seeds
    ]
