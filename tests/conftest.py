"""Pytest configuration and shared fixtures.

This configuration provides:
1. Marker registration (unit, integration)
2. Builders for domain entities
3. Isolated stores, repositories and event buses per test
4. Settings/container cache reset between tests
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import Mock

import pytest

from src.domain.entities import Application
from src.domain.entities.application import SUBMITTED_ACTION
from src.domain.enums import ReviewStatus
from src.domain.value_objects import AuditEvent

FIXED_NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests wiring real in-process adapters"
    )


# =============================================================================
# Builders
# =============================================================================


def create_application(
    id: str = "A-1",
    name: str = "Test User",
    email: str = "t@e.com",
    program: str = "B.Sc. CS",
    submitted_at: datetime | None = None,
    status: ReviewStatus = ReviewStatus.NEW,
    score: float | None = None,
    notes: str | None = None,
    doc_url: str | None = None,
    history: list[AuditEvent] | None = None,
) -> Application:
    """Helper to create an Application for testing.

    Args:
        id: Application id.
        name: Applicant name.
        email: Applicant email.
        program: Program.
        submitted_at: Submission time (default: FIXED_NOW).
        status: Current status.
        score: Optional score.
        notes: Optional notes.
        doc_url: Optional document reference.
        history: Timeline (default: one "Submitted" event by "Student").

    Returns:
        Application instance for testing.

    Usage:
        app = create_application(id="A-2", score=91)
    """
    at = submitted_at or FIXED_NOW
    return Application(
        id=id,
        name=name,
        email=email,
        program=program,
        submitted_at=at,
        status=status,
        score=score,
        notes=notes,
        doc_url=doc_url,
        history=(
            list(history)
            if history is not None
            else [AuditEvent(at=at, action=SUBMITTED_ACTION, by="Student")]
        ),
    )


def hours_ago(hours: float) -> datetime:
    """FIXED_NOW minus the given number of hours."""
    return FIXED_NOW - timedelta(hours=hours)


# =============================================================================
# Reusable Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Returns a Mock object with standard logging methods. bind() returns the
    same mock so bound loggers can be asserted on too.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            service.do_something()
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    logger.bind = Mock(return_value=logger)
    return logger


@pytest.fixture
def fixed_clock():
    """Clock returning FIXED_NOW on every call."""
    return lambda: FIXED_NOW


@pytest.fixture
def memory_store():
    """Fresh in-memory key-value store."""
    from src.infrastructure.persistence.in_memory_store import InMemoryKeyValueStore

    return InMemoryKeyValueStore()


@pytest.fixture
def repository(memory_store):
    """Snapshot repository over the memory_store fixture."""
    from src.infrastructure.persistence.repositories import (
        SnapshotApplicationRepository,
    )

    return SnapshotApplicationRepository(
        store=memory_store, storage_key="faculty_review_apps_v1"
    )


@pytest.fixture
def event_bus(mock_logger):
    """Real in-memory event bus, closed after the test."""
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    bus = InMemoryEventBus(logger=mock_logger)
    yield bus
    bus.close()


@pytest.fixture
def reset_container():
    """Clear settings and container singletons before and after the test.

    Usage:
        def test_wiring(reset_container, monkeypatch):
            monkeypatch.setenv("STORAGE_BACKEND", "memory")
            session = create_review_session()
    """
    from src.core.config import get_settings
    from src.core.container import get_event_bus, get_key_value_store, get_logger

    caches = (get_settings, get_logger, get_key_value_store, get_event_bus)
    for factory in caches:
        factory.cache_clear()
    yield
    for factory in caches:
        factory.cache_clear()
