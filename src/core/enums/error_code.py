"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*)
- Storage errors (STORAGE_*)
- Snapshot errors (SNAPSHOT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_STATUS = "invalid_status"
    INVALID_SORT_KEY = "invalid_sort_key"

    # Storage errors
    STORAGE_UNAVAILABLE = "storage_unavailable"
    STORAGE_READ_FAILED = "storage_read_failed"
    STORAGE_WRITE_FAILED = "storage_write_failed"

    # Snapshot errors
    SNAPSHOT_INVALID_JSON = "snapshot_invalid_json"
    SNAPSHOT_SHAPE_MISMATCH = "snapshot_shape_mismatch"
    SNAPSHOT_VERSION_UNSUPPORTED = "snapshot_version_unsupported"
    SNAPSHOT_ENCODE_FAILED = "snapshot_encode_failed"
