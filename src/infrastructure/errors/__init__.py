"""Infrastructure errors package.

Exports infrastructure-level error classes for convenient importing.

Usage:
    from src.infrastructure.errors import StorageError, SnapshotError
"""

from src.infrastructure.errors.infrastructure_error import (
    InfrastructureError,
    SnapshotError,
    StorageError,
)

__all__ = [
    "InfrastructureError",
    "StorageError",
    "SnapshotError",
]
