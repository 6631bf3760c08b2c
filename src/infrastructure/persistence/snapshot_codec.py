"""Versioned snapshot codec for the application collection.

Converts the in-memory collection to the JSON blob kept in the key-value
store and back. Contains all knowledge about the stored JSON structure.

Snapshot Structure (version 2, current):
    {
        "version": 2,
        "applications": [
            {
                "id": "A-1001",
                "name": "Ananya Rao",
                "email": "ananya.rao@example.com",
                "program": "B.Sc. Computer Science",
                "submittedAt": "2025-01-12T09:30:00Z",
                "score": 86,
                "status": "new",
                "docUrl": "https://www.orimi.com/pdf-test.pdf",
                "notes": "",
                "history": [
                    {"at": "...", "action": "Submitted", "by": "System", "comment": null}
                ]
            }
        ]
    }

Version 1 (legacy) is the bare JSON array of applications written by the
first portal release. It is upgraded to version 2 on load.

Decoding is fallible: it returns Failure(SnapshotError) for invalid JSON, a
shape that does not match the schema, or a version newer than this build.
Field content (score range, known programs, actor names) is not validated.
"""

from collections.abc import Callable
from datetime import UTC, datetime
import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities import Application
from src.domain.enums import ReviewStatus
from src.domain.value_objects import AuditEvent
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import SnapshotError

CURRENT_SNAPSHOT_VERSION = 2
LEGACY_SNAPSHOT_VERSION = 1


# =============================================================================
# Stored schema
# =============================================================================


class _SnapshotModel(BaseModel):
    """Shared config: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class AuditEventRecord(_SnapshotModel):
    """Stored form of one timeline entry."""

    at: datetime
    action: str
    by: str
    comment: str | None = None


class ApplicationRecord(_SnapshotModel):
    """Stored form of one application."""

    id: str
    name: str
    email: str
    program: str
    submitted_at: datetime
    score: int | float | None = None
    status: ReviewStatus
    doc_url: str | None = None
    notes: str | None = None
    history: list[AuditEventRecord] = Field(default_factory=list)


class SnapshotV2(_SnapshotModel):
    """Envelope of the current snapshot version."""

    version: Literal[2] = CURRENT_SNAPSHOT_VERSION
    applications: list[ApplicationRecord] = Field(default_factory=list)


# =============================================================================
# Migrations
# =============================================================================


def _upgrade_v1_to_v2(payload: dict[str, Any]) -> dict[str, Any]:
    """Wrap a legacy bare array into the versioned envelope.

    Legacy records sometimes lack ``history``; it defaults to an empty
    timeline.
    """
    applications = []
    for raw in payload["applications"]:
        if isinstance(raw, dict):
            raw = {"history": [], **raw}
        applications.append(raw)
    return {"version": 2, "applications": applications}


# version → upgrade step to version + 1
SNAPSHOT_MIGRATIONS: dict[int, Callable[[dict[str, Any]], dict[str, Any]]] = {
    1: _upgrade_v1_to_v2,
}


# =============================================================================
# Entity mapping
# =============================================================================


def _as_utc(value: datetime) -> datetime:
    """Treat zone-less stored timestamps as UTC so they compare with aware ones."""
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def to_record(app: Application) -> ApplicationRecord:
    """Map an Application entity to its stored form."""
    return ApplicationRecord(
        id=app.id,
        name=app.name,
        email=app.email,
        program=app.program,
        submitted_at=app.submitted_at,
        score=app.score,
        status=app.status,
        doc_url=app.doc_url,
        notes=app.notes,
        history=[
            AuditEventRecord(at=e.at, action=e.action, by=e.by, comment=e.comment)
            for e in app.history
        ],
    )


def to_entity(record: ApplicationRecord) -> Application:
    """Map a stored record back to an Application entity."""
    return Application(
        id=record.id,
        name=record.name,
        email=record.email,
        program=record.program,
        submitted_at=_as_utc(record.submitted_at),
        score=record.score,
        status=record.status,
        doc_url=record.doc_url,
        notes=record.notes,
        history=[
            AuditEvent(at=_as_utc(e.at), action=e.action, by=e.by, comment=e.comment)
            for e in record.history
        ],
    )


# =============================================================================
# Public API
# =============================================================================


def encode_snapshot(applications: list[Application]) -> str:
    """Serialize the collection as a current-version snapshot blob.

    Args:
        applications: Collection in display order.

    Returns:
        JSON string.
    """
    snapshot = SnapshotV2(applications=[to_record(app) for app in applications])
    return snapshot.model_dump_json(by_alias=True)


def decode_snapshot(blob: str) -> Result[list[Application], SnapshotError]:
    """Parse a stored blob into Application entities.

    Flow:
        1. Parse JSON
        2. Detect version (bare array = version 1)
        3. Run upgrade steps up to the current version
        4. Validate against the current schema
        5. Map records to entities

    Args:
        blob: Raw string read from the store.

    Returns:
        Success(applications) in stored order, or Failure(SnapshotError).
    """
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        return Failure(
            error=SnapshotError(
                code=ErrorCode.SNAPSHOT_INVALID_JSON,
                infrastructure_code=InfrastructureErrorCode.SNAPSHOT_DECODE_ERROR,
                message="Snapshot is not valid JSON",
                details={"error": str(e)},
            )
        )

    match data:
        case list():
            payload: dict[str, Any] = {
                "version": LEGACY_SNAPSHOT_VERSION,
                "applications": data,
            }
        case {"version": int() as version, "applications": list()} if (
            LEGACY_SNAPSHOT_VERSION <= version <= CURRENT_SNAPSHOT_VERSION
        ):
            payload = data
        case {"version": int() as version} if version > CURRENT_SNAPSHOT_VERSION:
            return Failure(
                error=SnapshotError(
                    code=ErrorCode.SNAPSHOT_VERSION_UNSUPPORTED,
                    infrastructure_code=InfrastructureErrorCode.SNAPSHOT_DECODE_ERROR,
                    message=f"Snapshot version {version} is newer than supported version {CURRENT_SNAPSHOT_VERSION}",
                    details={"version": version},
                )
            )
        case _:
            return Failure(
                error=SnapshotError(
                    code=ErrorCode.SNAPSHOT_SHAPE_MISMATCH,
                    infrastructure_code=InfrastructureErrorCode.SNAPSHOT_DECODE_ERROR,
                    message="Snapshot is neither an application array nor a versioned envelope",
                    details={"type": type(data).__name__},
                )
            )

    version = payload["version"]
    while version < CURRENT_SNAPSHOT_VERSION:
        payload = SNAPSHOT_MIGRATIONS[version](payload)
        version = payload["version"]

    try:
        snapshot = SnapshotV2.model_validate(payload)
    except ValidationError as e:
        return Failure(
            error=SnapshotError(
                code=ErrorCode.SNAPSHOT_SHAPE_MISMATCH,
                infrastructure_code=InfrastructureErrorCode.SNAPSHOT_DECODE_ERROR,
                message="Snapshot does not match the application schema",
                details={"error_count": e.error_count(), "errors": e.errors(include_url=False)},
            )
        )

    return Success(value=[to_entity(record) for record in snapshot.applications])
