"""Redis-backed key-value store.

Implements KeyValueStoreProtocol on top of a synchronous Redis client so
several processes (intake form and review dashboard) can share one
snapshot. Redis gives no compare-and-set here: concurrent writers remain
last-writer-wins, exactly like the in-memory store.

Architecture:
- Implements KeyValueStoreProtocol without inheritance (structural typing)
- Maps Redis exceptions to StorageError with proper ErrorCode
- Returns Result types for all operations
"""

from redis import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import StorageError


class RedisKeyValueStore:
    """Redis implementation of KeyValueStoreProtocol.

    Note: Does NOT inherit from KeyValueStoreProtocol (uses structural typing).

    Attributes:
        _redis: Synchronous Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis store.

        Args:
            redis_client: Synchronous Redis client instance.
        """
        self._redis = redis_client

    def get(self, key: str) -> Result[str | None, StorageError]:
        """Get blob from Redis.

        Args:
            key: Storage key.

        Returns:
            Result with blob if found, None if not found, or StorageError.
        """
        try:
            value = self._redis.get(key)
            # Redis returns bytes unless decode_responses=True
            if value is None:
                return Success(value=None)
            decoded = value.decode("utf-8") if isinstance(value, bytes) else value
            return Success(value=decoded)
        except RedisConnectionError as e:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_UNAVAILABLE,
                    infrastructure_code=InfrastructureErrorCode.STORE_CONNECTION_ERROR,
                    message="Redis is unreachable",
                    details={"key": key, "error": str(e)},
                )
            )
        except RedisError as e:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_READ_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORE_GET_ERROR,
                    message=f"Failed to get key '{key}' from store",
                    details={"key": key, "error": str(e)},
                )
            )
        except UnicodeDecodeError as e:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_READ_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORE_GET_ERROR,
                    message=f"Stored value for key '{key}' is not UTF-8",
                    details={"key": key, "error": str(e), "type": type(e).__name__},
                )
            )

    def set(self, key: str, blob: str) -> Result[None, StorageError]:
        """Set blob in Redis (no expiration).

        Args:
            key: Storage key.
            blob: Serialized snapshot.

        Returns:
            Result with None on success, or StorageError.
        """
        try:
            self._redis.set(key, blob)
            return Success(value=None)
        except RedisConnectionError as e:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_UNAVAILABLE,
                    infrastructure_code=InfrastructureErrorCode.STORE_CONNECTION_ERROR,
                    message="Redis is unreachable",
                    details={"key": key, "error": str(e)},
                )
            )
        except RedisError as e:
            return Failure(
                error=StorageError(
                    code=ErrorCode.STORAGE_WRITE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORE_SET_ERROR,
                    message=f"Failed to set key '{key}' in store",
                    details={"key": key, "error": str(e)},
                )
            )

    def ping(self) -> bool:
        """Check Redis connectivity.

        Returns:
            True if Redis answers, False otherwise.
        """
        try:
            return bool(self._redis.ping())
        except RedisError:
            return False
