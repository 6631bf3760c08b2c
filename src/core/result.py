"""Result types for railway-oriented programming.

Operations that can fail (store reads, snapshot decoding, command validation)
return a Result instead of raising, so the review engine never lets a storage
or parsing failure escape across the command boundary.

Usage:
    def decode(blob: str) -> Result[list[Application], SnapshotError]:
        if not blob:
            return Failure(error=SnapshotError(...))
        return Success(value=[...])

    match decode(raw):
        case Success(value=apps):
            load(apps)
        case Failure(error=err):
            logger.warning("snapshot_rejected", error_code=err.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
