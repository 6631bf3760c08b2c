"""Review engine factories.

Instance-scoped: every call builds a new object. Two sessions created here
share only the key-value store and the event bus singletons, exactly like
two independently rendered views.
"""

from src.application.commands.handlers.submit_application_handler import (
    SubmitApplicationHandler,
)
from src.application.services.announcer import Announcer
from src.application.services.application_store import ApplicationStore
from src.application.services.review_session import ReviewSession
from src.core.config import get_settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import get_application_repository


def create_review_session(*, open_session: bool = True) -> ReviewSession:
    """Build a review session with its own ApplicationStore.

    Args:
        open_session: Open (subscribe + initialize) before returning.

    Returns:
        ReviewSession; call close() (or use it as a context manager) when done.
    """
    settings = get_settings()
    logger = get_logger().bind(component="review_session")
    store = ApplicationStore(
        repository=get_application_repository(),
        logger=logger,
        seed_actor=settings.seed_actor,
    )
    session = ReviewSession(
        store=store,
        event_bus=get_event_bus(),
        logger=logger,
        reviewer_name=settings.reviewer_name,
    )
    if open_session:
        session.open()
    return session


def create_submit_application_handler() -> SubmitApplicationHandler:
    """Build the intake-side append-and-notify handler."""
    return SubmitApplicationHandler(
        repository=get_application_repository(),
        event_bus=get_event_bus(),
        logger=get_logger().bind(component="intake"),
        submitter_name=get_settings().submitter_name,
    )


def create_announcer() -> Announcer:
    """Build an announcer on the shared event bus. Call close() when done."""
    return Announcer(event_bus=get_event_bus())
