"""In-memory key-value store.

Process-local implementation of KeyValueStoreProtocol. Used by the default
(``memory``) storage backend and by tests. Blobs live in a plain dict, so
two engine instances share state only when they share one store object.

Failure injection:
    ``fail_reads`` / ``fail_writes`` make the store behave like an
    unavailable backend (private browsing, quota exceeded) and return
    Failure(StorageError) instead of touching the dict.
"""

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import StorageError


class InMemoryKeyValueStore:
    """Dict-backed implementation of KeyValueStoreProtocol.

    Note: Does NOT inherit from KeyValueStoreProtocol (uses structural typing).

    Attributes:
        fail_reads: When True, get() returns Failure(StorageError).
        fail_writes: When True, set() returns Failure(StorageError).
    """

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        *,
        fail_reads: bool = False,
        fail_writes: bool = False,
    ) -> None:
        """Initialize the store.

        Args:
            initial: Optional pre-populated blobs (copied).
            fail_reads: Simulate an unreadable store.
            fail_writes: Simulate a store that rejects writes.
        """
        self._data: dict[str, str] = dict(initial or {})
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def get(self, key: str) -> Result[str | None, StorageError]:
        """Return the blob under ``key`` or None when absent."""
        if self.fail_reads:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_READ_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORE_GET_ERROR,
                    message=f"Failed to read key '{key}' from store",
                    details={"key": key, "error": "store unavailable"},
                )
            )
        return Success(value=self._data.get(key))

    def set(self, key: str, blob: str) -> Result[None, StorageError]:
        """Replace the blob under ``key``."""
        if self.fail_writes:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_WRITE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORE_SET_ERROR,
                    message=f"Failed to write key '{key}' to store",
                    details={"key": key, "error": "store unavailable"},
                )
            )
        self._data[key] = blob
        return Success(value=None)

    def keys(self) -> list[str]:
        """Keys currently held (test and diagnostics helper)."""
        return list(self._data)
