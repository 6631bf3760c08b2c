"""Unit tests for the Application entity.

Tests cover:
- Creation via Application.submit (trimming, defaults, seed event)
- Status changes prepend exactly one audit event
- Notes edits never touch history
- Free-text matching across name, email, program and id
- Time-derived ids and collision bumping

Architecture:
- Pure domain tests, no mocks needed
"""

from datetime import UTC, datetime, timedelta

import pytest

from src.domain.entities import Application, application_id_for
from src.domain.entities.application import status_action
from src.domain.enums import ReviewStatus
from tests.conftest import FIXED_NOW, create_application


@pytest.mark.unit
class TestApplicationSubmit:
    """Test Application.submit creation rule."""

    def test_submit_creates_new_status_with_single_submitted_event(self):
        """Test a fresh submission has status NEW and one Submitted event."""
        app = Application.submit(
            id="A-1",
            name="Linus Torvalds",
            email="linus@example.com",
            program="B.Sc. Computer Science",
            submitted_by="Student",
            submitted_at=FIXED_NOW,
        )

        assert app.status == ReviewStatus.NEW
        assert len(app.history) == 1
        assert app.history[0].action == "Submitted"
        assert app.history[0].by == "Student"
        assert app.history[0].at == FIXED_NOW
        assert app.submitted_at == FIXED_NOW

    def test_submit_trims_name_and_email(self):
        """Test name and email are stripped of surrounding whitespace."""
        app = Application.submit(
            id="A-1",
            name="  Ada Lovelace ",
            email=" ada@example.com\n",
            program="MBA",
            submitted_by="Student",
        )

        assert app.name == "Ada Lovelace"
        assert app.email == "ada@example.com"

    def test_submit_blank_program_defaults_to_unknown(self):
        """Test a blank program becomes "Unknown"."""
        app = Application.submit(
            id="A-1", name="Ada", email="a@e.com", program="  ", submitted_by="Student"
        )

        assert app.program == "Unknown"

    def test_submit_defaults_notes_score_and_doc(self):
        """Test notes start empty and score/doc_url are unset."""
        app = Application.submit(
            id="A-1", name="Ada", email="a@e.com", program="MBA", submitted_by="Student"
        )

        assert app.notes == ""
        assert app.score is None
        assert app.doc_url is None

    def test_submit_without_time_uses_current_utc(self):
        """Test submitted_at defaults to an aware 'now'."""
        before = datetime.now(UTC)
        app = Application.submit(
            id="A-1", name="Ada", email="a@e.com", program="MBA", submitted_by="Student"
        )
        after = datetime.now(UTC)

        assert before <= app.submitted_at <= after
        assert app.submitted_at.tzinfo is not None


@pytest.mark.unit
class TestApplicationStatusChange:
    """Test record_status_change invariants."""

    @pytest.mark.parametrize("status", list(ReviewStatus))
    def test_status_change_sets_status_and_prepends_event(self, status):
        """Test every status can be set and is recorded at history[0]."""
        app = create_application(status=ReviewStatus.REJECTED)
        before = len(app.history)

        event = app.record_status_change(
            status, by="Faculty Reviewer", comment="note", at=FIXED_NOW
        )

        assert app.status == status
        assert len(app.history) == before + 1
        assert app.history[0] is event
        assert status.value in event.action
        assert event.by == "Faculty Reviewer"
        assert event.comment == "note"

    def test_status_action_text(self):
        """Test action text uses the arrow form."""
        assert status_action(ReviewStatus.CHANGES_REQUESTED) == "Status → changes-requested"

    def test_same_status_again_still_records_event(self):
        """Test re-setting the current status is not a no-op."""
        app = create_application(status=ReviewStatus.ACCEPTED)

        app.record_status_change(ReviewStatus.ACCEPTED, by="Faculty Reviewer")

        assert len(app.history) == 2
        assert app.history[0].comment is None

    def test_history_is_newest_first_and_never_reordered(self):
        """Test successive changes stack at the front."""
        app = create_application()
        original = list(app.history)

        app.record_status_change(ReviewStatus.IN_REVIEW, by="r1", at=FIXED_NOW)
        app.record_status_change(
            ReviewStatus.ACCEPTED, by="r2", at=FIXED_NOW + timedelta(minutes=1)
        )

        assert [e.by for e in app.history[:2]] == ["r2", "r1"]
        assert app.history[2:] == original


@pytest.mark.unit
class TestApplicationNotesAndMatching:
    """Test notes replacement and free-text matching."""

    def test_replace_notes_keeps_history_length(self):
        """Test notes edit does not append to history."""
        app = create_application()

        app.replace_notes("Looks good")

        assert app.notes == "Looks good"
        assert len(app.history) == 1

    @pytest.mark.parametrize(
        "needle",
        ["ananya", "example.com", "computer", "a-1001"],
    )
    def test_matches_any_searchable_field(self, needle):
        """Test needle is found in name, email, program or id."""
        app = create_application(
            id="A-1001",
            name="Ananya Rao",
            email="ananya.rao@example.com",
            program="B.Sc. Computer Science",
        )

        assert app.matches(needle) is True

    def test_matches_returns_false_when_absent(self):
        """Test non-matching needle."""
        app = create_application(name="Sara Khan")

        assert app.matches("vishal") is False


@pytest.mark.unit
class TestApplicationIdFor:
    """Test time-derived id generation."""

    def test_id_is_epoch_milliseconds(self):
        """Test id format A-<ms>."""
        at = datetime(2025, 1, 1, tzinfo=UTC)

        assert application_id_for(at) == f"A-{int(at.timestamp() * 1000)}"

    def test_collision_bumps_suffix(self):
        """Test taken ids are skipped."""
        at = datetime(2025, 1, 1, tzinfo=UTC)
        millis = int(at.timestamp() * 1000)

        result = application_id_for(at, [f"A-{millis}", f"A-{millis + 1}"])

        assert result == f"A-{millis + 2}"
