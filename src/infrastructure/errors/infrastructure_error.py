"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (key-value
store, snapshot decoding).

Architecture:
- Infrastructure catches exceptions and maps to DomainError
- Infrastructure errors inherit from DomainError (not Exception)
- Uses InfrastructureErrorCode for internal error tracking
- Maps to domain ErrorCode when flowing to domain layer
- Used with Result types for error propagation
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Infrastructure errors still use domain ErrorCode enum (not InfrastructureErrorCode).
    The InfrastructureErrorCode is for internal infrastructure tracking only.

    Attributes:
        code: Domain ErrorCode (maps from InfrastructureErrorCode).
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageError(InfrastructureError):
    """Key-value store errors.

    Wraps Redis (or in-memory simulated) failures: store unavailable, quota
    exceeded, connection refused.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Store-specific error code.
        details: Additional context (key, original error).
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class SnapshotError(InfrastructureError):
    """Snapshot decode/encode errors.

    Raised (returned) when a stored blob is not JSON, does not match the
    snapshot schema, or carries a version this build cannot read.

    Attributes:
        code: Domain ErrorCode (SNAPSHOT_*).
        message: Human-readable message.
        infrastructure_code: Codec-specific error code.
        details: Additional context (version, validation errors).
    """

    pass
