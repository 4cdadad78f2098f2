"""In-memory job repository."""

from typing import Dict, List, Optional
from uuid import UUID

from ooh_tracker.application.interfaces.repositories import JobRepositoryInterface
from ooh_tracker.config.logging import get_logger
from ooh_tracker.config.settings import settings
from ooh_tracker.domain.entities.job import Job

logger = get_logger(__name__)


class InMemoryJobRepository(JobRepositoryInterface):
    """The single owned job collection.

    Jobs are immutable, so handing them out never exposes the store; the
    only way to change a job is to ``update`` it with a new value.
    """

    def __init__(self, job_number_prefix: Optional[str] = None):
        self.jobs: Dict[UUID, Job] = {}
        self.job_number_prefix = job_number_prefix or settings.JOB_NUMBER_PREFIX
        self.job_counter = 0

    async def add(self, job: Job) -> Job:
        """Store a newly logged job."""
        if job.id in self.jobs:
            raise ValueError(f"Job {job.id} already exists")

        self.jobs[job.id] = job
        logger.info("Job stored", job_id=str(job.id), job_number=job.job_number)
        return job

    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID."""
        return self.jobs.get(job_id)

    async def get_by_job_number(self, job_number: str) -> Optional[Job]:
        """Get job by job number."""
        for job in self.jobs.values():
            if job.job_number == job_number:
                return job
        return None

    async def list_all(self) -> List[Job]:
        """List every job, most recently logged first."""
        # Reversed insertion order breaks ties between equal timestamps
        jobs = list(reversed(list(self.jobs.values())))
        return sorted(jobs, key=lambda job: job.date_logged, reverse=True)

    async def list_by_customer(self, customer: str) -> List[Job]:
        """List jobs for a customer name."""
        return [job for job in await self.list_all() if job.customer == customer]

    async def update(self, job: Job) -> Optional[Job]:
        """Replace the stored job with the same ID."""
        if job.id not in self.jobs:
            return None

        self.jobs[job.id] = job
        logger.debug("Job replaced", job_id=str(job.id))
        return job

    async def next_job_number(self) -> str:
        """Reserve the next job number, e.g. OOH-000042."""
        self.job_counter += 1
        return f"{self.job_number_prefix}-{self.job_counter:06d}"
