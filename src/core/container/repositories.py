"""Repository dependency factories.

Repositories are cheap wrappers over the shared key-value store, so each
call returns a fresh instance.
"""

from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import get_key_value_store

if TYPE_CHECKING:
    from src.domain.protocols.application_repository import ApplicationRepository


def get_application_repository() -> "ApplicationRepository":
    """Get application repository over the configured snapshot key.

    Returns:
        SnapshotApplicationRepository bound to STORAGE_KEY.
    """
    from src.infrastructure.persistence.repositories import (
        SnapshotApplicationRepository,
    )

    return SnapshotApplicationRepository(
        store=get_key_value_store(),
        storage_key=get_settings().storage_key,
    )
