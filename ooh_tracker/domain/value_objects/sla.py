"""
SLA value objects.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ooh_tracker.domain.exceptions.validation_error import ValidationError
from ooh_tracker.domain.value_objects.milestone import Milestone


@dataclass(frozen=True)
class SLAThresholds:
    """Per-job SLA windows in minutes, all measured from date logged."""

    accept_sla: int
    onsite_sla: int
    completed_sla: int

    def __post_init__(self):
        """Validate thresholds."""
        for name in ("accept_sla", "onsite_sla", "completed_sla"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValidationError(f"{name} must be a positive number of minutes")

    def minutes_for(self, milestone: Milestone) -> int:
        return getattr(self, milestone.sla_field)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "accept_sla": self.accept_sla,
            "onsite_sla": self.onsite_sla,
            "completed_sla": self.completed_sla,
        }


@dataclass(frozen=True)
class SLAWindow:
    """Outcome of one SLA window at a point in time."""

    milestone: Milestone
    threshold_minutes: int
    deadline: datetime
    elapsed_minutes: float
    breached: bool
    met_at: Optional[datetime] = None

    @property
    def is_met(self) -> bool:
        return self.met_at is not None

    @property
    def is_unresolved(self) -> bool:
        """Breached and the milestone has still not happened."""
        return self.breached and self.met_at is None


@dataclass(frozen=True)
class SLAEvaluation:
    """Result of evaluating every SLA window of a job at ``evaluated_at``."""

    job_id: str
    evaluated_at: datetime
    windows: Tuple[SLAWindow, ...]

    def window(self, milestone: Milestone) -> SLAWindow:
        for window in self.windows:
            if window.milestone == milestone:
                return window
        raise KeyError(milestone)

    @property
    def breached_milestones(self) -> Tuple[Milestone, ...]:
        return tuple(w.milestone for w in self.windows if w.breached)

    @property
    def unresolved_breaches(self) -> Tuple[Milestone, ...]:
        return tuple(w.milestone for w in self.windows if w.is_unresolved)

    @property
    def any_breached(self) -> bool:
        return any(w.breached for w in self.windows)

    @property
    def accept_breached(self) -> bool:
        return self.window(Milestone.ACCEPTED).breached

    @property
    def onsite_breached(self) -> bool:
        return self.window(Milestone.ONSITE).breached

    @property
    def completed_breached(self) -> bool:
        return self.window(Milestone.COMPLETED).breached

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "job_id": self.job_id,
            "evaluated_at": self.evaluated_at.isoformat(),
            "windows": [
                {
                    "milestone": w.milestone.value,
                    "threshold_minutes": w.threshold_minutes,
                    "deadline": w.deadline.isoformat(),
                    "elapsed_minutes": w.elapsed_minutes,
                    "breached": w.breached,
                    "met_at": w.met_at.isoformat() if w.met_at else None,
                }
                for w in self.windows
            ],
            "any_breached": self.any_breached,
        }
