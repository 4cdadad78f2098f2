"""Update job use case."""

from ooh_tracker.application.interfaces.repositories import JobRepositoryInterface
from ooh_tracker.application.services.alert_ledger import AlertLedger
from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.entities.job import Job
from ooh_tracker.domain.exceptions.lifecycle_error import AlreadyRecordedError
from ooh_tracker.domain.exceptions.not_found_error import JobNotFoundError
from ooh_tracker.domain.exceptions.validation_error import ValidationError
from ooh_tracker.domain.value_objects.milestone import Milestone

logger = get_logger(__name__)


class UpdateJobUseCase:
    """Replace a stored job with an edited copy.

    Edits may change any descriptive field and the stored status, and may
    fill in milestones that are still missing. Recorded milestones, the
    logged time and existing alerts are audit facts and cannot be rewritten.
    """

    def __init__(self, job_repo: JobRepositoryInterface, alert_ledger: AlertLedger):
        self.job_repo = job_repo
        self.alert_ledger = alert_ledger

    async def execute(self, job: Job) -> Job:
        previous = await self.job_repo.get_by_id(job.id)
        if previous is None:
            raise JobNotFoundError(job.id)

        if job.date_logged != previous.date_logged:
            raise ValidationError("date_logged cannot be changed once a job is logged")

        for milestone in Milestone.ordered():
            recorded_at = previous.milestone_time(milestone)
            if recorded_at is not None and job.milestone_time(milestone) != recorded_at:
                raise AlreadyRecordedError(milestone.value, recorded_at, previous)

        self.alert_ledger.validate_history(previous, job)

        updated = await self.job_repo.update(job)
        if updated is None:
            raise JobNotFoundError(job.id)

        logger.info(
            "Job updated",
            job_id=str(job.id),
            status=job.status.value,
            alerts=len(job.alerts),
        )
        return updated
