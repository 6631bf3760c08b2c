"""Application store service.

Owns the canonical in-memory collection of one review instance, keeps it in
step with the persisted snapshot and applies the two review mutations.

Flow:
    initialize()            load snapshot → seed defaults if absent/unreadable
    reconcile_incoming(app) prepend an application announced by another instance
    update_status(...)      status change + audit event, then write-through
    update_notes(...)       notes replace, then write-through

Every successful mutation writes the whole collection through the
repository. Write failures are logged and never raised: the in-memory
collection stays authoritative for this instance.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repository is injected via protocol)
"""

from collections.abc import Callable
import copy
from datetime import UTC, datetime

from src.application.services.default_seed import default_applications
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import Application
from src.domain.enums import ReviewStatus
from src.domain.protocols.application_repository import ApplicationRepository
from src.domain.protocols.logger_protocol import LoggerProtocol

Clock = Callable[[], datetime]

# Load failures after which the stored blob holds nothing worth keeping
_OVERWRITABLE_SNAPSHOT_ERRORS = frozenset(
    {ErrorCode.SNAPSHOT_INVALID_JSON, ErrorCode.SNAPSHOT_SHAPE_MISMATCH}
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _status_name(status: ReviewStatus | str) -> str:
    return status.value if isinstance(status, ReviewStatus) else str(status)


class ApplicationStore:
    """Canonical collection for one review instance.

    Not thread-safe. Each instance has its own collection; instances only
    meet through the repository and the event bus.

    Attributes:
        _repository: Whole-collection persistence port.
        _logger: Structured logger.
        _clock: Time source for seed data and audit events.
        _seed_actor: Actor recorded on seed "Submitted" events.
    """

    def __init__(
        self,
        repository: ApplicationRepository,
        logger: LoggerProtocol,
        *,
        clock: Clock = _utc_now,
        seed_actor: str = "System",
    ) -> None:
        """Initialize an empty store. Call initialize() to load.

        Args:
            repository: Persistence port for the snapshot.
            logger: Structured logger.
            clock: Time source, injectable for deterministic seeding.
            seed_actor: Actor recorded on default seed events.
        """
        self._repository = repository
        self._logger = logger
        self._clock = clock
        self._seed_actor = seed_actor
        self._items: list[Application] = []
        self._selected_id: str | None = None
        self._seed_template: list[Application] | None = None

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[Application, ...]:
        """Collection in insertion order (newest reconciled first)."""
        return tuple(self._items)

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected(self) -> Application | None:
        """Selected application, or None if nothing (or an unknown id) is selected."""
        if self._selected_id is None:
            return None
        return self.find(self._selected_id)

    @property
    def programs(self) -> list[str]:
        """Distinct programs, sorted, for the program filter picker."""
        return sorted({app.program for app in self._items})

    def find(self, application_id: str) -> Application | None:
        """First application with the given id, or None."""
        return next((app for app in self._items if app.id == application_id), None)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Load the latest snapshot, falling back to the default seed.

        An absent snapshot, an unreadable store and a snapshot that fails to
        decode all seed the three default applications. The seed is written
        back only when nothing usable is stored (absent, blank, invalid JSON
        or wrong shape) so later intake appends merge onto it. After a read
        failure or a snapshot from a newer version the stored blob is left
        untouched. A stored empty collection stays empty. Selection moves to
        the first item.

        The seed is built once per store, so repeated calls against an
        unchanged store produce the same collection.
        """
        write_back = False
        match self._repository.load():
            case Success(value=None):
                self._logger.info("application_store_seeded", reason="empty_store")
                items = self._seed()
                write_back = True
            case Success(value=loaded):
                items = loaded
            case Failure(error=err):
                write_back = err.code in _OVERWRITABLE_SNAPSHOT_ERRORS
                self._logger.warning(
                    "application_store_seeded",
                    reason="load_failed",
                    error_code=err.code.value,
                    error_message=err.message,
                    write_back=write_back,
                )
                items = self._seed()

        self._items = list(items)
        self._selected_id = self._items[0].id if self._items else None
        self._logger.info(
            "application_store_initialized",
            count=len(self._items),
            write_back=write_back,
        )
        if write_back:
            self._persist()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def reconcile_incoming(self, app: Application) -> None:
        """Prepend an application announced by another instance.

        The record is copied so the two instances share no mutable state.
        No id check is made and the selection is left unchanged.

        Args:
            app: Newly submitted application.
        """
        incoming = copy.deepcopy(app)
        self._items.insert(0, incoming)
        self._logger.info(
            "application_reconciled",
            application_id=incoming.id,
            count=len(self._items),
        )
        self._persist()

    def update_status(
        self,
        application_id: str,
        new_status: ReviewStatus,
        actor: str,
        comment: str | None = None,
    ) -> None:
        """Set the status and prepend a "Status → <status>" audit event.

        Unknown ids are a silent no-op (logged at warning level).

        Args:
            application_id: Target application.
            new_status: Any status; every transition is allowed.
            actor: Actor recorded on the audit event.
            comment: Optional comment recorded on the audit event.
        """
        app = self.find(application_id)
        if app is None:
            self._logger.warning(
                "application_not_found",
                command="update_status",
                application_id=application_id,
            )
            return

        previous = app.status
        app.record_status_change(new_status, by=actor, comment=comment, at=self._clock())
        self._logger.info(
            "application_status_changed",
            application_id=application_id,
            from_status=_status_name(previous),
            to_status=_status_name(new_status),
            actor=actor,
        )
        self._persist()

    def update_notes(self, application_id: str, text: str) -> None:
        """Replace reviewer notes. History is not touched.

        Unknown ids are a silent no-op (logged at warning level).
        """
        app = self.find(application_id)
        if app is None:
            self._logger.warning(
                "application_not_found",
                command="update_notes",
                application_id=application_id,
            )
            return

        app.replace_notes(text)
        self._logger.debug("application_notes_updated", application_id=application_id)
        self._persist()

    def select(self, application_id: str | None) -> None:
        """Set the selected id. Any value is accepted."""
        self._selected_id = application_id

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _seed(self) -> list[Application]:
        # Built on first use, then handed out as copies
        if self._seed_template is None:
            self._seed_template = default_applications(
                self._clock(), actor=self._seed_actor
            )
        return copy.deepcopy(self._seed_template)

    def _persist(self) -> None:
        match self._repository.save(list(self._items)):
            case Failure(error=err):
                self._logger.warning(
                    "application_store_write_failed",
                    error_code=err.code.value,
                    error_message=err.message,
                    count=len(self._items),
                )
            case _:
                self._logger.debug("application_store_persisted", count=len(self._items))
