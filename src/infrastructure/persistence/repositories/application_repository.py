"""Snapshot-backed application repository.

Adapter for ApplicationRepository: one versioned snapshot blob per
collection, stored under a single key of a KeyValueStoreProtocol.

Architecture:
- Implements ApplicationRepository without inheritance (structural typing)
- Delegates bytes to the key-value store, structure to snapshot_codec
- Returns Result types for all operations; codec exceptions never escape
"""

from pydantic import ValidationError

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Application
from src.domain.protocols.key_value_store_protocol import KeyValueStoreProtocol
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import SnapshotError
from src.infrastructure.persistence.snapshot_codec import (
    decode_snapshot,
    encode_snapshot,
)


class SnapshotApplicationRepository:
    """ApplicationRepository over a key-value store.

    Attributes:
        _store: Key-value store holding the blob.
        _storage_key: Key of the snapshot blob.
    """

    def __init__(self, store: KeyValueStoreProtocol, storage_key: str) -> None:
        """Initialize repository.

        Args:
            store: Key-value store adapter.
            storage_key: Key of the snapshot blob.
        """
        self._store = store
        self._storage_key = storage_key

    @property
    def storage_key(self) -> str:
        return self._storage_key

    def load(self) -> Result[list[Application] | None, DomainError]:
        """Read and decode the stored snapshot.

        Returns:
            Success(list), Success(None) if the key is absent or holds a
            blank blob, or the store/codec Failure unchanged.
        """
        match self._store.get(self._storage_key):
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=None):
                return Success(value=None)
            case Success(value=str() as blob) if not blob.strip():
                return Success(value=None)
            case Success(value=blob):
                return decode_snapshot(blob)
            case _:
                # Unreachable but needed for type checker
                return Success(value=None)

    def save(self, applications: list[Application]) -> Result[None, DomainError]:
        """Encode and write the full collection.

        Returns:
            Success(None), Failure(SnapshotError) if a record cannot be
            encoded (nothing is written), or the store Failure.
        """
        try:
            blob = encode_snapshot(applications)
        except ValidationError as e:
            return Failure(
                error=SnapshotError(
                    code=ErrorCode.SNAPSHOT_ENCODE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.SNAPSHOT_ENCODE_ERROR,
                    message="Collection could not be encoded as a snapshot",
                    details={"key": self._storage_key, "error": str(e)},
                )
            )
        return self._store.set(self._storage_key, blob)
