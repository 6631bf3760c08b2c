"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.
Enums are centralized here for discoverability and maintainability.

Available Enums:
    - ReviewStatus: Application review lifecycle states
    - SortKey: Review list orderings
"""

from src.domain.enums.review_status import ReviewStatus
from src.domain.enums.sort_key import SortKey

__all__ = [
    "ReviewStatus",
    "SortKey",
]
