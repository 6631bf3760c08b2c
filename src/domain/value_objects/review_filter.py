"""ReviewFilter value object.

Filter criteria for the review list. The wildcard value ``"all"`` disables
the status or program constraint; a blank query disables free-text matching.

Usage:
    from src.domain.value_objects import ReviewFilter

    flt = ReviewFilter(status=ReviewStatus.ACCEPTED)
    wider = flt.merge(status=ALL)
"""

from dataclasses import dataclass, replace
from typing import Any, Self

from src.domain.enums import ReviewStatus

ALL = "all"
"""Wildcard accepted by the status and program criteria."""


@dataclass(frozen=True, slots=True, kw_only=True)
class ReviewFilter:
    """Immutable filter criteria.

    Attributes:
        status: Exact status to keep, or ALL.
        program: Exact program to keep, or ALL.
        q: Free-text needle, matched case-insensitively against name, email,
            program and id.
    """

    status: ReviewStatus | str = ALL
    program: str = ALL
    q: str = ""

    def merge(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced.

        Fields passed as None are left unchanged, so callers can forward a
        partial update without filtering it first.
        """
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def needle(self) -> str:
        """Lower-cased query, or empty when the query is blank."""
        return self.q.lower() if self.q.strip() else ""
