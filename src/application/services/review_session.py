"""Review session: command layer of one review instance.

Synchronous dispatcher between the (out-of-scope) presentation layer and an
ApplicationStore. Each intent runs to completion before returning; each
mutating intent calls exactly one ApplicationStore operation.

Intents:
    - select(id | None)
    - set_filter(status=, program=, q=, sort=)   partial update, validated
    - update_status(id, status, comment=None)    actor = configured reviewer
    - update_notes(id, text)

State surface (read-only):
    items, filtered, selected, filter, sort, programs

Lifecycle:
    open() subscribes to ApplicationSubmitted and runs initialize();
    close() unsubscribes. Also usable as a context manager.

Usage:
    with ReviewSession(store=store, event_bus=bus, logger=logger) as session:
        session.set_filter(status="accepted")
        session.update_status("A-1001", ReviewStatus.ACCEPTED, comment="Strong profile")
"""

from types import TracebackType
from typing import Self

from src.application.queries.application_projection import project_applications
from src.application.services.application_store import ApplicationStore
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Application
from src.domain.enums import ReviewStatus, SortKey
from src.domain.events import ApplicationSubmitted
from src.domain.protocols.event_bus_protocol import EventBusProtocol, Unsubscribe
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import ALL, ReviewFilter


class ReviewSession:
    """Faculty-side view instance over one ApplicationStore.

    Not thread-safe. Two sessions built over the same repository and bus
    share state only through them.
    """

    def __init__(
        self,
        store: ApplicationStore,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        reviewer_name: str = "Faculty Reviewer",
    ) -> None:
        """Initialize a closed session.

        Args:
            store: Application store owned by this session.
            event_bus: Channel delivering ApplicationSubmitted.
            logger: Structured logger.
            reviewer_name: Actor recorded on status changes.
        """
        self._store = store
        self._event_bus = event_bus
        self._logger = logger
        self._reviewer_name = reviewer_name
        self._filter = ReviewFilter()
        self._sort = SortKey.RECENT
        self._unsubscribe: Unsubscribe | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._unsubscribe is not None

    def open(self) -> Self:
        """Subscribe to new submissions, then load the collection.

        Subscribing first means a submission published during or after the
        load is reconciled; one published before it is picked up by the load.
        Calling open() on an open session is a no-op.
        """
        if self._unsubscribe is not None:
            return self
        self._unsubscribe = self._event_bus.subscribe(
            ApplicationSubmitted, self._on_application_submitted
        )
        self._store.initialize()
        self._logger.info("review_session_opened", count=len(self._store.items))
        return self

    def close(self) -> None:
        """Stop receiving submissions. Safe to call more than once."""
        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None
        self._logger.info("review_session_closed")

    def __enter__(self) -> Self:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # State surface
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[Application, ...]:
        return self._store.items

    @property
    def filtered(self) -> list[Application]:
        """Items matching the current filter, in the current sort order."""
        return project_applications(self._store.items, self._filter, self._sort)

    @property
    def selected(self) -> Application | None:
        return self._store.selected

    @property
    def filter(self) -> ReviewFilter:
        return self._filter

    @property
    def sort(self) -> SortKey:
        return self._sort

    @property
    def programs(self) -> list[str]:
        return self._store.programs

    @property
    def reviewer_name(self) -> str:
        return self._reviewer_name

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def select(self, application_id: str | None) -> None:
        self._store.select(application_id)

    def set_filter(
        self,
        *,
        status: ReviewStatus | str | None = None,
        program: str | None = None,
        q: str | None = None,
        sort: SortKey | str | None = None,
    ) -> Result[ReviewFilter, ValidationError]:
        """Partially update filter and sort. Omitted keys keep their value.

        Args:
            status: A ReviewStatus value or "all".
            program: Exact program or "all".
            q: Free-text query.
            sort: A SortKey value.

        Returns:
            Success(new_filter), or Failure(ValidationError) for an unknown
            status or sort key, in which case nothing changes.
        """
        if status is not None and status != ALL:
            if status not in ReviewStatus.values():
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_STATUS,
                        message=f"Unknown status '{status}'",
                        field="status",
                        details={"allowed": [ALL, *ReviewStatus.values()]},
                    )
                )
            status = ReviewStatus(status)

        new_sort = self._sort
        if sort is not None:
            if sort not in [key.value for key in SortKey]:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_SORT_KEY,
                        message=f"Unknown sort key '{sort}'",
                        field="sort",
                        details={"allowed": [key.value for key in SortKey]},
                    )
                )
            new_sort = SortKey(sort)

        self._filter = self._filter.merge(status=status, program=program, q=q)
        self._sort = new_sort
        return Success(value=self._filter)

    def update_status(
        self,
        application_id: str,
        status: ReviewStatus | str,
        comment: str | None = None,
    ) -> Result[None, ValidationError]:
        """Change the status of an application as the configured reviewer.

        Unknown ids are a silent no-op in the store, so Success only means
        the intent was dispatched.

        Returns:
            Success(None), or Failure(ValidationError) for an unknown status
            value (the store is not called).
        """
        if status not in ReviewStatus.values():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_STATUS,
                    message=f"Unknown status '{status}'",
                    field="status",
                    details={"allowed": ReviewStatus.values()},
                )
            )
        self._store.update_status(
            application_id, ReviewStatus(status), self._reviewer_name, comment
        )
        return Success(value=None)

    def update_notes(self, application_id: str, text: str) -> None:
        self._store.update_notes(application_id, text)

    # ------------------------------------------------------------------
    # Notification handling
    # ------------------------------------------------------------------

    def _on_application_submitted(self, event: ApplicationSubmitted) -> None:
        self._store.reconcile_incoming(event.application)
