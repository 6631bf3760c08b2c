"""Key-value store protocol (port) for snapshot persistence.

The review engine persists its whole collection as one serialized blob under
a single key. The store is synchronous and local; it has no transactions and
no compare-and-set, so concurrent writers are last-writer-wins.

Architecture:
- Protocol-based - uses structural typing
- All operations return Result types (never raise)
- No framework dependencies in domain layer

Implementations:
    - InMemoryKeyValueStore: src/infrastructure/persistence/in_memory_store.py
    - RedisKeyValueStore: src/infrastructure/persistence/redis_store.py
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class KeyValueStoreProtocol(Protocol):
    """Durable key → blob storage.

    Fail-open strategy: callers treat a Failure as "store unavailable" and
    degrade (seed defaults on read, skip on write) instead of raising.
    """

    def get(self, key: str) -> Result[str | None, DomainError]:
        """Read the blob stored under ``key``.

        Args:
            key: Storage key.

        Returns:
            Success(blob), Success(None) when the key is absent, or
            Failure(StorageError) when the store cannot be read.

        Example:
            match store.get("faculty_review_apps_v1"):
                case Success(value=None):
                    seed_defaults()
                case Success(value=blob):
                    decode(blob)
                case Failure(error=err):
                    logger.warning("store_read_failed", error_code=err.code.value)
        """
        ...

    def set(self, key: str, blob: str) -> Result[None, DomainError]:
        """Replace the blob stored under ``key``.

        Args:
            key: Storage key.
            blob: Serialized snapshot.

        Returns:
            Success(None) once the write is durable, or Failure(StorageError).
        """
        ...
