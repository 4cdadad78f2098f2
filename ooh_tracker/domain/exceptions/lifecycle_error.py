"""
Lifecycle-related domain exceptions.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ooh_tracker.domain.entities.job import Job


class LifecycleError(Exception):
    """Base exception for rejected milestone transitions.

    The job attached to the error is the original, unmodified value.
    """

    def __init__(self, message: str, milestone: str, job: Optional["Job"] = None):
        self.milestone = milestone
        self.job = job
        super().__init__(message)


class OutOfOrderTransitionError(LifecycleError):
    """Raised when a milestone is recorded before its prerequisite."""

    def __init__(
        self,
        milestone: str,
        prerequisite: str,
        job: Optional["Job"] = None,
        detail: Optional[str] = None,
    ):
        self.prerequisite = prerequisite
        message = f"Cannot record '{milestone}' before '{prerequisite}'"
        if detail:
            message += f": {detail}"
        super().__init__(message, milestone, job)


class AlreadyRecordedError(LifecycleError):
    """Raised when a milestone timestamp is already set."""

    def __init__(
        self,
        milestone: str,
        recorded_at: datetime,
        job: Optional["Job"] = None,
    ):
        self.recorded_at = recorded_at
        super().__init__(
            f"Milestone '{milestone}' already recorded at {recorded_at.isoformat()}",
            milestone,
            job,
        )
