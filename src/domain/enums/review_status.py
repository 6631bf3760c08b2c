"""Application review lifecycle states.

Defines the status set for applications under faculty review.

State Machine:
    Fully connected. Every status is reachable from every other status and
    no status is terminal:

    new ↔ in-review ↔ accepted ↔ waitlisted ↔ rejected ↔ changes-requested

    - NEW: Freshly submitted, not yet looked at
    - IN_REVIEW: A reviewer has picked it up
    - ACCEPTED: Offer extended
    - WAITLISTED: Held pending capacity
    - REJECTED: Declined
    - CHANGES_REQUESTED: Applicant asked to amend the submission

Usage:
    from src.domain.enums import ReviewStatus

    if application.status == ReviewStatus.ACCEPTED:
        ...
"""

from enum import Enum


class ReviewStatus(str, Enum):
    """Review lifecycle states.

    String Enum:
        Inherits from str for easy serialization. Values are the kebab-case
        identifiers stored in snapshots and shown in the review UI.
    """

    NEW = "new"
    IN_REVIEW = "in-review"
    ACCEPTED = "accepted"
    WAITLISTED = "waitlisted"
    REJECTED = "rejected"
    CHANGES_REQUESTED = "changes-requested"

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            List of status string values, in declaration order.
        """
        return [status.value for status in cls]

    @classmethod
    def decision_actions(cls) -> list["ReviewStatus"]:
        """Statuses offered as reviewer actions, in display order.

        NEW is the creation status and is not offered as an action, although
        update_status accepts it like any other value.
        """
        return [
            cls.ACCEPTED,
            cls.WAITLISTED,
            cls.REJECTED,
            cls.CHANGES_REQUESTED,
            cls.IN_REVIEW,
        ]
