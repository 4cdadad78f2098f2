"""Record milestone use case."""

from datetime import datetime
from uuid import UUID

from ooh_tracker.application.interfaces.repositories import JobRepositoryInterface
from ooh_tracker.application.services.lifecycle_engine import JobLifecycleEngine
from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.entities.job import Job
from ooh_tracker.domain.exceptions.lifecycle_error import LifecycleError
from ooh_tracker.domain.exceptions.not_found_error import JobNotFoundError
from ooh_tracker.domain.value_objects.milestone import Milestone
from ooh_tracker.infrastructure.monitoring.metrics import (
    record_lifecycle_rejection,
    record_milestone,
)

logger = get_logger(__name__)


class RecordMilestoneUseCase:
    """Use case for recording acceptance, arrival on site or completion."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        lifecycle_engine: JobLifecycleEngine,
    ):
        self.job_repo = job_repo
        self.lifecycle_engine = lifecycle_engine

    async def execute(self, job_id: UUID, milestone: Milestone, at: datetime) -> Job:
        """
        Record ``milestone`` at ``at`` and store the result.

        Raises:
            JobNotFoundError: no job with ``job_id``.
            LifecycleError: the transition was rejected; the stored job is
                left as it was.
        """
        job = await self.job_repo.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        try:
            updated = self.lifecycle_engine.record_milestone(job, milestone, at)
        except LifecycleError as e:
            record_lifecycle_rejection(milestone.value, type(e).__name__)
            logger.warning(
                "Milestone rejected",
                job_id=str(job_id),
                milestone=milestone.value,
                error=str(e),
            )
            raise

        await self.job_repo.update(updated)
        record_milestone(milestone.value)

        logger.info(
            "Milestone recorded",
            job_id=str(job_id),
            job_number=updated.job_number,
            milestone=milestone.value,
            at=at.isoformat(),
        )
        return updated
