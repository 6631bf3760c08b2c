"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, human-readable or JSON)
- Key-value store (in-memory or Redis) holding the application snapshot
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols.key_value_store_protocol import KeyValueStoreProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Key-Value Store (Application-Scoped)
# ============================================================================


@lru_cache()
def get_key_value_store() -> "KeyValueStoreProtocol":
    """Get key-value store singleton (app-scoped).

    Container owns factory logic - decides which adapter based on
    STORAGE_BACKEND:
        - 'memory': InMemoryKeyValueStore (single process, tests)
        - 'redis': RedisKeyValueStore (shared between processes)

    Every review session and submit handler built by this container shares
    the returned store, which is what lets the intake side and the review
    side see each other's writes.

    Returns:
        Store implementing KeyValueStoreProtocol.

    Usage:
        store = get_key_value_store()
        store.get("faculty_review_apps_v1")
    """
    settings = get_settings()

    if settings.storage_backend == "redis":
        from redis import ConnectionPool, Redis

        from src.infrastructure.persistence.redis_store import RedisKeyValueStore

        pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=10,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        return RedisKeyValueStore(redis_client=Redis(connection_pool=pool))

    from src.infrastructure.persistence.in_memory_store import InMemoryKeyValueStore

    return InMemoryKeyValueStore()


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = settings.environment.value
    use_json = env in {"testing", "ci"}
    return ConsoleAdapter(
        use_json=use_json, level=settings.log_level, service="admissions-review"
    )
