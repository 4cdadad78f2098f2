"""
Milestone and alert type value objects.
"""

from enum import Enum
from typing import Optional


class AlertType(str, Enum):
    """Which SLA or milestone an alert concerns."""

    ACCEPTED = "ACCEPTED"
    ONSITE = "ONSITE"
    COMPLETED = "COMPLETED"
    OVERDUE = "OVERDUE"

    def default_message(self) -> str:
        """Message used when an alert is raised without one."""
        return f"Alert triggered for {self.value.lower()} SLA"


class Milestone(str, Enum):
    """Milestones a job passes through after being logged."""

    ACCEPTED = "accepted"
    ONSITE = "onsite"
    COMPLETED = "completed"

    @property
    def prerequisite(self) -> Optional["Milestone"]:
        """Milestone that must be recorded first (None for acceptance)."""
        return {
            Milestone.ACCEPTED: None,
            Milestone.ONSITE: Milestone.ACCEPTED,
            Milestone.COMPLETED: Milestone.ONSITE,
        }[self]

    @property
    def timestamp_field(self) -> str:
        """Name of the Job attribute holding this milestone's timestamp."""
        return {
            Milestone.ACCEPTED: "date_accepted",
            Milestone.ONSITE: "date_on_site",
            Milestone.COMPLETED: "date_completed",
        }[self]

    @property
    def sla_field(self) -> str:
        """Name of the SLAThresholds attribute bounding this milestone."""
        return {
            Milestone.ACCEPTED: "accept_sla",
            Milestone.ONSITE: "onsite_sla",
            Milestone.COMPLETED: "completed_sla",
        }[self]

    @property
    def alert_type(self) -> AlertType:
        return AlertType(self.name)

    @classmethod
    def ordered(cls) -> tuple:
        """Milestones in lifecycle order."""
        return (cls.ACCEPTED, cls.ONSITE, cls.COMPLETED)
