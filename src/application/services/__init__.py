"""Application services - stateful orchestration of one review instance."""

from src.application.services.announcer import Announcer
from src.application.services.application_store import ApplicationStore
from src.application.services.review_session import ReviewSession

__all__ = [
    "Announcer",
    "ApplicationStore",
    "ReviewSession",
]
