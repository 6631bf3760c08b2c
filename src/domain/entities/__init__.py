"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.application import Application, application_id_for

__all__ = [
    "Application",
    "application_id_for",
]
