"""Queries - Read operations that fetch data.

Queries NEVER change state. The review list projection is a pure function
over the current collection.
"""

from src.application.queries.application_projection import (
    collation_key,
    project_applications,
)

__all__ = [
    "collation_key",
    "project_applications",
]
