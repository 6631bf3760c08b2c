"""Submit application handler (append-and-notify hand-off).

Flow:
1. Read the current collection
2. On read/decode failure: return Failure, write and publish nothing
3. Build the Application (id unique against the stored ids)
4. Write [new, *current] through the repository
5. On write failure: return Failure, publish nothing
6. Publish ApplicationSubmitted
7. Return Success(application)

Step 4 completes before step 6 starts, so a subscriber that reads the store
from its handler always sees the new record.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repository is injected via protocol)
"""

from datetime import UTC, datetime

from src.application.commands.application_commands import SubmitApplication
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Application, application_id_for
from src.domain.events import ApplicationSubmitted
from src.domain.protocols.application_repository import ApplicationRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class SubmitApplicationHandler:
    """Handler for the SubmitApplication command.

    The only coupling point between the intake side and the review side.
    """

    def __init__(
        self,
        repository: ApplicationRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        submitter_name: str = "Student",
    ) -> None:
        """Initialize submit handler with dependencies.

        Args:
            repository: Whole-collection persistence port.
            event_bus: Notification channel to announce the new record on.
            logger: Structured logger.
            submitter_name: Actor recorded on the "Submitted" event.
        """
        self._repository = repository
        self._event_bus = event_bus
        self._logger = logger
        self._submitter_name = submitter_name

    def handle(self, cmd: SubmitApplication) -> Result[Application, DomainError]:
        """Handle submit application command.

        Args:
            cmd: SubmitApplication command with the intake fields.

        Returns:
            Success(application) once written and published.
            Failure(StorageError | SnapshotError) if the stored collection
            could not be read or the new one could not be written. Nothing
            is published in that case.

        Side Effects:
            - Replaces the stored snapshot.
            - Publishes ApplicationSubmitted.
        """
        match self._repository.load():
            case Failure(error=err):
                self._log_failure("load", err)
                return Failure(error=err)
            case Success(value=None):
                current: list[Application] = []
            case Success(value=loaded):
                current = loaded

        submitted_at = cmd.submitted_at or datetime.now(UTC)
        app = Application.submit(
            id=application_id_for(submitted_at, (a.id for a in current)),
            name=cmd.name,
            email=cmd.email,
            program=cmd.program,
            submitted_by=self._submitter_name,
            submitted_at=submitted_at,
            doc_url=cmd.doc_url,
        )

        save_result = self._repository.save([app, *current])
        if isinstance(save_result, Failure):
            self._log_failure("save", save_result.error, application_id=app.id)
            return Failure(error=save_result.error)

        self._event_bus.publish(ApplicationSubmitted(application=app))
        return Success(value=app)

    def _log_failure(self, stage: str, err: DomainError, **context: str) -> None:
        self._logger.error(
            "application_submit_failed",
            stage=stage,
            error_code=err.code.value,
            error_message=err.message,
            **context,
        )
