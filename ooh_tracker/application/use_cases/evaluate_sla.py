"""Evaluate job SLA use case."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ooh_tracker.application.interfaces.repositories import JobRepositoryInterface
from ooh_tracker.application.services.lifecycle_engine import JobLifecycleEngine
from ooh_tracker.domain.entities.job import Job
from ooh_tracker.domain.exceptions.not_found_error import JobNotFoundError
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.sla import SLAEvaluation


@dataclass
class JobSLAReport:
    """SLA position of one job at a point in time."""

    job: Job
    evaluation: SLAEvaluation
    derived_status: JobStatus
    overdue: bool

    @property
    def status_diverges(self) -> bool:
        """Stored status differs from the derived one."""
        return self.job.status != self.derived_status


class EvaluateJobSLAUseCase:
    """Read-only SLA check for a single job."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        lifecycle_engine: JobLifecycleEngine,
    ):
        self.job_repo = job_repo
        self.lifecycle_engine = lifecycle_engine

    async def execute(self, job_id: UUID, now: datetime) -> JobSLAReport:
        job = await self.job_repo.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        evaluation = self.lifecycle_engine.evaluate_sla(job, now)
        return JobSLAReport(
            job=job,
            evaluation=evaluation,
            derived_status=self.lifecycle_engine.derive_status(job, now, evaluation),
            overdue=self.lifecycle_engine.is_overdue(job, now),
        )
