"""
Job lifecycle engine: milestone transitions and SLA evaluation.
"""

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.entities.job import Job
from ooh_tracker.domain.exceptions.lifecycle_error import (
    AlreadyRecordedError,
    OutOfOrderTransitionError,
)
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.milestone import Milestone
from ooh_tracker.domain.value_objects.sla import SLAEvaluation, SLAWindow

logger = get_logger(__name__)


class JobLifecycleEngine:
    """Pure rules governing how a job moves from logged to completed.

    Nothing here reads a clock: every timestamp is supplied by the caller,
    and every operation returns a new Job rather than changing its input.
    """

    def __init__(self):
        self.logger = logger

    def record_acceptance(self, job: Job, at: datetime) -> Job:
        """Record that the engineer accepted the job."""
        return self.record_milestone(job, Milestone.ACCEPTED, at)

    def record_on_site(self, job: Job, at: datetime) -> Job:
        """Record that the engineer arrived on site."""
        return self.record_milestone(job, Milestone.ONSITE, at)

    def record_completion(self, job: Job, at: datetime) -> Job:
        """Record that the work was completed."""
        return self.record_milestone(job, Milestone.COMPLETED, at)

    def record_milestone(self, job: Job, milestone: Milestone, at: datetime) -> Job:
        """
        Set a milestone timestamp exactly once.

        Raises:
            AlreadyRecordedError: the milestone already has a timestamp.
            OutOfOrderTransitionError: the prerequisite milestone is missing,
                or ``at`` is earlier than the previous milestone.

        Status is left untouched.
        """
        recorded_at = job.milestone_time(milestone)
        if recorded_at is not None:
            self.logger.debug(
                "Milestone already recorded",
                job_id=str(job.id),
                milestone=milestone.value,
            )
            raise AlreadyRecordedError(milestone.value, recorded_at, job)

        prerequisite = milestone.prerequisite
        if prerequisite is None:
            floor_name, floor_at = "logged", job.date_logged
        else:
            floor_name, floor_at = prerequisite.value, job.milestone_time(prerequisite)
            if floor_at is None:
                self.logger.debug(
                    "Milestone prerequisite missing",
                    job_id=str(job.id),
                    milestone=milestone.value,
                    prerequisite=prerequisite.value,
                )
                raise OutOfOrderTransitionError(milestone.value, prerequisite.value, job)

        if at < floor_at:
            raise OutOfOrderTransitionError(
                milestone.value,
                floor_name,
                job,
                detail=f"{at.isoformat()} is earlier than {floor_at.isoformat()}",
            )

        return replace(job, **{milestone.timestamp_field: at})

    def evaluate_sla(self, job: Job, now: datetime) -> SLAEvaluation:
        """
        Evaluate every SLA window of a job at ``now``.

        A window is breached when its milestone is still missing and at least
        the threshold has elapsed since the job was logged, or when the
        milestone was recorded more than the threshold after logging.
        """
        windows = []
        for milestone in Milestone.ordered():
            threshold = job.sla.minutes_for(milestone)
            limit = timedelta(minutes=threshold)
            met_at = job.milestone_time(milestone)

            if met_at is None:
                elapsed = now - job.date_logged
                breached = elapsed >= limit
            else:
                elapsed = met_at - job.date_logged
                breached = elapsed > limit

            windows.append(
                SLAWindow(
                    milestone=milestone,
                    threshold_minutes=threshold,
                    deadline=job.date_logged + limit,
                    elapsed_minutes=round(elapsed.total_seconds() / 60, 2),
                    breached=breached,
                    met_at=met_at,
                )
            )

        return SLAEvaluation(
            job_id=str(job.id),
            evaluated_at=now,
            windows=tuple(windows),
        )

    def is_overdue(self, job: Job, now: datetime) -> bool:
        """Check if an open job has run past its target completion time."""
        if job.is_completed:
            return False
        return now - job.date_logged > timedelta(minutes=job.target_completion_time)

    def derive_status(
        self,
        job: Job,
        now: datetime,
        evaluation: Optional[SLAEvaluation] = None,
    ) -> JobStatus:
        """
        Suggest a RAG status from the SLA evaluation.

        green: completed with no window breached along the way.
        red: at least one breached window whose milestone is still missing.
        amber: everything else.

        Advisory only; the stored ``job.status`` is never changed here.
        """
        evaluation = evaluation or self.evaluate_sla(job, now)

        if evaluation.unresolved_breaches:
            return JobStatus.RED
        if job.is_completed and not evaluation.any_breached:
            return JobStatus.GREEN
        return JobStatus.AMBER
