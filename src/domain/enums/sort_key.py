"""Sort orders for the review list."""

from enum import Enum


class SortKey(str, Enum):
    """Review list orderings.

    RECENT: newest submission first.
    SCORE: highest score first, unscored records compare as 0.
    NAME: applicant name ascending, accent- and case-insensitive.
    """

    RECENT = "recent"
    SCORE = "score"
    NAME = "name"
