"""Infrastructure-specific error codes.

These are internal codes for tracking infrastructure failures.
They are mapped to domain ErrorCode when flowing to domain layer.

Categories:
- Key-value store errors (STORE_*)
- Snapshot codec errors (SNAPSHOT_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes.

    These are internal codes for tracking infrastructure failures.
    They are mapped to domain ErrorCode when flowing to domain layer.
    """

    # Key-value store errors
    STORE_CONNECTION_ERROR = "store_connection_error"
    STORE_GET_ERROR = "store_get_error"
    STORE_SET_ERROR = "store_set_error"

    # Snapshot codec errors
    SNAPSHOT_DECODE_ERROR = "snapshot_decode_error"
    SNAPSHOT_ENCODE_ERROR = "snapshot_encode_error"
