"""Create job use case."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ooh_tracker.application.interfaces.repositories import (
    CustomerRepositoryInterface,
    EngineerRepositoryInterface,
    JobRepositoryInterface,
)
from ooh_tracker.config.logging import get_logger
from ooh_tracker.config.settings import settings
from ooh_tracker.domain.entities.job import Job
from ooh_tracker.domain.exceptions.validation_error import RequiredFieldError
from ooh_tracker.domain.value_objects.contact import Contact
from ooh_tracker.domain.value_objects.job_classification import (
    JobCategory,
    JobType,
    Priority,
)
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.sla import SLAThresholds
from ooh_tracker.infrastructure.monitoring.metrics import record_job_created

logger = get_logger(__name__)


@dataclass
class CreateJobRequest:
    """Request for logging a new job, as captured by the job wizard."""

    customer: str
    site: str
    description: str
    engineer: str = ""
    contact: Contact = field(default_factory=Contact)
    reporter: Contact = field(default_factory=Contact)
    job_type: JobType = JobType.OUT_OF_HOURS
    category: JobCategory = JobCategory.GENERAL
    priority: Priority = Priority.MEDIUM
    target_completion_time: Optional[int] = None  # minutes
    custom_alerts: Optional[SLAThresholds] = None
    project: Optional[str] = None
    primary_job_trade: Optional[str] = None
    secondary_job_trades: List[str] = field(default_factory=list)
    customer_order_number: Optional[str] = None
    reference_number: Optional[str] = None
    job_owner: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    job_ref1: Optional[str] = None
    job_ref2: Optional[str] = None
    requires_approval: bool = False
    preferred_appointment_date: Optional[datetime] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    lock_visit_date_time: bool = False
    deploy_to_mobile: bool = False
    is_recurring_job: bool = False
    completion_time_from_engineer_onsite: bool = False


class CreateJobUseCase:
    """Use case for logging a new out-of-hours job."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        customer_repo: CustomerRepositoryInterface,
        engineer_repo: EngineerRepositoryInterface,
    ):
        self.job_repo = job_repo
        self.customer_repo = customer_repo
        self.engineer_repo = engineer_repo

    async def execute(self, request: CreateJobRequest, now: datetime) -> Job:
        """Create a job logged at ``now`` with no milestones recorded."""

        logger.info(
            "Creating job",
            customer=request.customer,
            site=request.site,
            engineer=request.engineer,
            priority=request.priority.value,
        )

        for field_name in ("customer", "site", "description"):
            value = getattr(request, field_name)
            if not value or not value.strip():
                raise RequiredFieldError(field_name)

        # Resolve directory ids; unknown names are kept as free text
        customer = await self.customer_repo.get_by_name(request.customer)
        engineer = (
            await self.engineer_repo.get_by_name(request.engineer)
            if request.engineer
            else None
        )
        if customer is None:
            logger.warning("Customer not in directory", customer=request.customer)
        if request.engineer and engineer is None:
            logger.warning("Engineer not in directory", engineer=request.engineer)

        job = Job(
            job_number=await self.job_repo.next_job_number(),
            customer=request.customer,
            site=request.site,
            description=request.description,
            date_logged=now,
            sla=request.custom_alerts or self._default_sla(),
            engineer=request.engineer,
            contact=request.contact,
            reporter=request.reporter,
            job_type=request.job_type,
            category=request.category,
            priority=request.priority,
            status=JobStatus.AMBER,
            target_completion_time=(
                request.target_completion_time
                or settings.DEFAULT_TARGET_COMPLETION_MINUTES
            ),
            customer_id=customer.id if customer else None,
            engineer_id=engineer.id if engineer else None,
            project=request.project,
            primary_job_trade=request.primary_job_trade,
            secondary_job_trades=tuple(request.secondary_job_trades),
            customer_order_number=request.customer_order_number,
            reference_number=request.reference_number,
            job_owner=request.job_owner,
            tags=tuple(request.tags),
            job_ref1=request.job_ref1,
            job_ref2=request.job_ref2,
            requires_approval=request.requires_approval,
            preferred_appointment_date=request.preferred_appointment_date,
            start_date=request.start_date,
            end_date=request.end_date,
            lock_visit_date_time=request.lock_visit_date_time,
            deploy_to_mobile=request.deploy_to_mobile,
            is_recurring_job=request.is_recurring_job,
            completion_time_from_engineer_onsite=request.completion_time_from_engineer_onsite,
        )

        created_job = await self.job_repo.add(job)
        record_job_created(job.category.value, job.priority.value)

        logger.info(
            "Job created",
            job_id=str(created_job.id),
            job_number=created_job.job_number,
        )
        return created_job

    def _default_sla(self) -> SLAThresholds:
        return SLAThresholds(
            accept_sla=settings.DEFAULT_ACCEPT_SLA_MINUTES,
            onsite_sla=settings.DEFAULT_ONSITE_SLA_MINUTES,
            completed_sla=settings.DEFAULT_COMPLETED_SLA_MINUTES,
        )
