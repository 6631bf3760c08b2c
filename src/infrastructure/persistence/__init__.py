"""Snapshot persistence infrastructure.

This module provides:
- Key-value store adapters (in-memory, Redis)
- The versioned snapshot codec used to (de)serialize the collection
"""

from src.infrastructure.persistence.in_memory_store import InMemoryKeyValueStore
from src.infrastructure.persistence.redis_store import RedisKeyValueStore
from src.infrastructure.persistence.snapshot_codec import (
    CURRENT_SNAPSHOT_VERSION,
    decode_snapshot,
    encode_snapshot,
)

__all__ = [
    "CURRENT_SNAPSHOT_VERSION",
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    "decode_snapshot",
    "encode_snapshot",
]
