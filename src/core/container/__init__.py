"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, create_review_session, ...

The container is organized into modules:
- infrastructure: Core services (logging, key-value store)
- events: Event bus with logging subscription
- repositories: Application repository over the snapshot key
- review: Review session, submit handler and announcer factories
"""

# Infrastructure services
from src.core.container.infrastructure import get_key_value_store, get_logger

# Event bus
from src.core.container.events import get_event_bus

# Repositories
from src.core.container.repositories import get_application_repository

# Review engine
from src.core.container.review import (
    create_announcer,
    create_review_session,
    create_submit_application_handler,
)

__all__ = [
    # Infrastructure
    "get_key_value_store",
    "get_logger",
    # Events
    "get_event_bus",
    # Repositories
    "get_application_repository",
    # Review engine
    "create_announcer",
    "create_review_session",
    "create_submit_application_handler",
]
