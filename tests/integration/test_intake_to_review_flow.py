"""Integration tests for the intake → review hand-off.

Tests cover:
- End-to-end: submit → write snapshot → publish → open session reconciles
- Write happens before publish (subscribers can read the new record)
- Missed notification recovered by a later initialize()
- Two sessions over one store and one bus
- Status changes written through and visible to a fresh session

Architecture:
- Real InMemoryKeyValueStore, SnapshotApplicationRepository and InMemoryEventBus
- Mock logger only
"""

import pytest

from src.application.commands import SubmitApplication
from src.application.commands.handlers import SubmitApplicationHandler
from src.application.services import ApplicationStore, ReviewSession
from src.core.result import Success
from src.domain.enums import ReviewStatus
from src.domain.events import ApplicationSubmitted
from tests.conftest import FIXED_NOW


def _session(repository, event_bus, logger, clock) -> ReviewSession:
    store = ApplicationStore(repository=repository, logger=logger, clock=clock)
    return ReviewSession(store=store, event_bus=event_bus, logger=logger)


@pytest.fixture
def handler(repository, event_bus, mock_logger):
    return SubmitApplicationHandler(
        repository=repository, event_bus=event_bus, logger=mock_logger
    )


@pytest.mark.integration
class TestSubmitReachesOpenSession:
    """Submissions show up in sessions that are already open."""

    def test_new_application_lands_first(
        self, handler, repository, event_bus, mock_logger, fixed_clock
    ):
        """Test the submitted record is at index 0 with one Submitted event."""
        # Arrange
        with _session(repository, event_bus, mock_logger, fixed_clock) as session:
            assert len(session.items) == 3

            # Act
            result = handler.handle(
                SubmitApplication(
                    name="Linus Torvalds",
                    email="linus@example.com",
                    program="B.Tech CSE",
                    submitted_at=FIXED_NOW,
                )
            )

            # Assert
            assert isinstance(result, Success)
            first = session.items[0]
            assert first.name == "Linus Torvalds"
            assert first.status == ReviewStatus.NEW
            assert len(first.history) == 1
            assert first.history[0].action == "Submitted"
            assert first.history[0].by == "Student"
            assert len(session.items) == 4
            assert "B.Tech CSE" in session.programs

    def test_reconciled_record_is_a_copy(
        self, handler, repository, event_bus, mock_logger, fixed_clock
    ):
        """Test the session does not share the published object."""
        # Arrange
        with _session(repository, event_bus, mock_logger, fixed_clock) as session:
            # Act
            result = handler.handle(
                SubmitApplication(name="Ada", email="ada@example.com", program="M.Sc. CS")
            )

            # Assert
            assert session.items[0] == result.value
            assert session.items[0] is not result.value

    def test_snapshot_written_before_publish(
        self, handler, repository, event_bus, mock_logger
    ):
        """Test a subscriber reading the store in its handler sees the record."""
        # Arrange
        seen: list[list[str]] = []

        def read_store(event: ApplicationSubmitted) -> None:
            loaded = repository.load()
            seen.append([app.id for app in loaded.value])

        event_bus.subscribe(ApplicationSubmitted, read_store)

        # Act
        result = handler.handle(
            SubmitApplication(name="Ada", email="ada@example.com", program="M.Sc. CS")
        )

        # Assert
        assert seen == [[result.value.id]]


@pytest.mark.integration
class TestMissedNotification:
    """Submissions made while no session is open are not lost."""

    def test_later_initialize_picks_up_record(
        self, handler, repository, event_bus, mock_logger, fixed_clock
    ):
        """Test the record published with no subscriber is loaded on open."""
        # Arrange
        with _session(repository, event_bus, mock_logger, fixed_clock):
            pass

        # Act
        result = handler.handle(
            SubmitApplication(name="Ada", email="ada@example.com", program="M.Sc. CS")
        )
        with _session(repository, event_bus, mock_logger, fixed_clock) as session:
            # Assert
            assert [a.id for a in session.items] == [
                result.value.id,
                "A-1001",
                "A-1002",
                "A-1003",
            ]

    def test_submit_into_empty_store_then_open(
        self, handler, repository, event_bus, mock_logger, fixed_clock
    ):
        """Test a stored collection is not replaced by the seed."""
        # Act
        result = handler.handle(
            SubmitApplication(name="Ada", email="ada@example.com", program="M.Sc. CS")
        )
        with _session(repository, event_bus, mock_logger, fixed_clock) as session:
            # Assert
            assert [a.id for a in session.items] == [result.value.id]


@pytest.mark.integration
class TestTwoSessions:
    """Two review instances over the same store and bus."""

    def test_both_sessions_reconcile(
        self, handler, repository, event_bus, mock_logger, fixed_clock
    ):
        """Test every open session receives the submission."""
        # Arrange
        first = _session(repository, event_bus, mock_logger, fixed_clock).open()
        second = _session(repository, event_bus, mock_logger, fixed_clock).open()
        try:
            # Act
            result = handler.handle(
                SubmitApplication(name="Ada", email="ada@example.com", program="M.Sc. CS")
            )

            # Assert
            assert first.items[0].id == result.value.id
            assert second.items[0].id == result.value.id
            assert first.items[0] is not second.items[0]
        finally:
            first.close()
            second.close()

    def test_status_change_visible_after_reload(
        self, repository, event_bus, mock_logger, fixed_clock
    ):
        """Test a status change is written through for the next session."""
        # Arrange
        with _session(repository, event_bus, mock_logger, fixed_clock) as session:
            # Act
            session.update_status("A-1002", ReviewStatus.ACCEPTED, comment="Strong")

        with _session(repository, event_bus, mock_logger, fixed_clock) as later:
            # Assert
            app = next(a for a in later.items if a.id == "A-1002")
            assert app.status == ReviewStatus.ACCEPTED
            assert app.history[0].action == "Status → accepted"
            assert app.history[0].by == "Faculty Reviewer"
            assert app.history[0].comment == "Strong"

    def test_closed_session_stops_receiving(
        self, handler, repository, event_bus, mock_logger, fixed_clock
    ):
        """Test close() unsubscribes."""
        # Arrange
        session = _session(repository, event_bus, mock_logger, fixed_clock).open()
        session.close()

        # Act
        handler.handle(
            SubmitApplication(name="Ada", email="ada@example.com", program="M.Sc. CS")
        )

        # Assert
        assert len(session.items) == 3
