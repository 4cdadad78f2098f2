"""
Job status value object.
"""

from enum import Enum


class JobStatus(str, Enum):
    """RAG status shown against every job."""

    GREEN = "green"
    AMBER = "amber"
    RED = "red"

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return {
            JobStatus.GREEN: "Completed",
            JobStatus.AMBER: "In Progress",
            JobStatus.RED: "Overdue",
        }[self]

    def is_active(self) -> bool:
        """Check if status still needs attention from the helpdesk."""
        return self in [JobStatus.AMBER, JobStatus.RED]

    def requires_follow_up(self) -> bool:
        """Check if the job belongs on the end of shift follow-up list."""
        return self.is_active()
