"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.application_repository import (
    SnapshotApplicationRepository,
)

__all__ = [
    "SnapshotApplicationRepository",
]
