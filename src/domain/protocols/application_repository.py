"""Application repository protocol for collection persistence.

This module defines the port (interface) for loading and saving the whole
application collection. The collection is always read and written as one
unit; there is no per-record access.

Infrastructure layer implements the adapter on top of KeyValueStoreProtocol
and the snapshot codec.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities import Application


class ApplicationRepository(Protocol):
    """Whole-collection persistence port.

    Implementations never raise for store or decode problems; they return
    Failure so callers can degrade (seed on load, skip on save).
    """

    def load(self) -> Result[list[Application] | None, DomainError]:
        """Read the latest collection.

        Returns:
            Success(list) in stored order, Success(None) when nothing has
            been stored yet, or Failure(StorageError | SnapshotError).
        """
        ...

    def save(self, applications: list[Application]) -> Result[None, DomainError]:
        """Replace the stored collection.

        Args:
            applications: Full collection in display order.

        Returns:
            Success(None) once written, or Failure(StorageError).
        """
        ...
