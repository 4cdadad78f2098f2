"""Job endpoints: logging, editing and recording milestones."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Query, status
from pydantic import AwareDatetime

from ooh_tracker.api.dependencies import (
    AlertLedgerDep,
    CustomerRepositoryDep,
    EngineerRepositoryDep,
    JobRepositoryDep,
    LifecycleEngineDep,
    NowDep,
)
from ooh_tracker.api.schemas.common import ErrorResponse
from ooh_tracker.api.schemas.job import (
    JobCreateRequest,
    JobResponse,
    JobUpdateRequest,
    MilestoneRequest,
    SLAEvaluationResponse,
    SLAWindowResponse,
)
from ooh_tracker.application.use_cases.create_job import (
    CreateJobRequest,
    CreateJobUseCase,
)
from ooh_tracker.application.use_cases.evaluate_sla import EvaluateJobSLAUseCase
from ooh_tracker.application.use_cases.record_milestone import RecordMilestoneUseCase
from ooh_tracker.application.use_cases.update_job import UpdateJobUseCase
from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.exceptions.not_found_error import JobNotFoundError
from ooh_tracker.domain.value_objects.job_classification import Priority
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.milestone import Milestone
from ooh_tracker.domain.value_objects.sla import SLAEvaluation

logger = get_logger(__name__)
router = APIRouter(
    prefix="/jobs",
    tags=["jobs"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)


@router.get("/", response_model=List[JobResponse])
async def list_jobs(
    job_repository: JobRepositoryDep,
    status_filter: Optional[JobStatus] = Query(None, alias="status"),
    priority: Optional[Priority] = None,
    customer: Optional[str] = None,
    engineer: Optional[str] = None,
):
    """List jobs, newest first, with optional exact-match filters."""
    jobs = await job_repository.list_all()

    if status_filter is not None:
        jobs = [job for job in jobs if job.status == status_filter]
    if priority is not None:
        jobs = [job for job in jobs if job.priority == priority]
    if customer is not None:
        jobs = [job for job in jobs if job.customer == customer]
    if engineer is not None:
        jobs = [job for job in jobs if job.engineer == engineer]

    return [JobResponse.from_entity(job) for job in jobs]


@router.post("/", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreateRequest,
    job_repository: JobRepositoryDep,
    customer_repository: CustomerRepositoryDep,
    engineer_repository: EngineerRepositoryDep,
    now: NowDep,
):
    """Log a new job."""
    use_case = CreateJobUseCase(
        job_repo=job_repository,
        customer_repo=customer_repository,
        engineer_repo=engineer_repository,
    )

    request = CreateJobRequest(
        customer=job_data.customer,
        site=job_data.site,
        description=job_data.description,
        engineer=job_data.engineer,
        contact=job_data.contact.to_value(),
        reporter=job_data.reporter.to_value(),
        job_type=job_data.job_type,
        category=job_data.category,
        priority=job_data.priority,
        target_completion_time=job_data.target_completion_time,
        custom_alerts=job_data.custom_alerts.to_value() if job_data.custom_alerts else None,
        project=job_data.project,
        primary_job_trade=job_data.primary_job_trade,
        secondary_job_trades=job_data.secondary_job_trades,
        customer_order_number=job_data.customer_order_number,
        reference_number=job_data.reference_number,
        job_owner=job_data.job_owner,
        tags=job_data.tags,
        job_ref1=job_data.job_ref1,
        job_ref2=job_data.job_ref2,
        requires_approval=job_data.requires_approval,
        preferred_appointment_date=job_data.preferred_appointment_date,
        start_date=job_data.start_date,
        end_date=job_data.end_date,
        lock_visit_date_time=job_data.lock_visit_date_time,
        deploy_to_mobile=job_data.deploy_to_mobile,
        is_recurring_job=job_data.is_recurring_job,
        completion_time_from_engineer_onsite=job_data.completion_time_from_engineer_onsite,
    )

    job = await use_case.execute(request, now)
    return JobResponse.from_entity(job)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: UUID, job_repository: JobRepositoryDep):
    """Get a job by id."""
    job = await job_repository.get_by_id(job_id)
    if job is None:
        raise JobNotFoundError(job_id)
    return JobResponse.from_entity(job)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: UUID,
    job_data: JobUpdateRequest,
    job_repository: JobRepositoryDep,
    alert_ledger: AlertLedgerDep,
):
    """Replace a job with an edited copy."""
    use_case = UpdateJobUseCase(job_repo=job_repository, alert_ledger=alert_ledger)
    job = await use_case.execute(job_data.to_entity(job_id))
    return JobResponse.from_entity(job)


async def _record(
    job_id: UUID,
    milestone: Milestone,
    body: Optional[MilestoneRequest],
    job_repository,
    lifecycle_engine,
    now,
) -> JobResponse:
    use_case = RecordMilestoneUseCase(
        job_repo=job_repository, lifecycle_engine=lifecycle_engine
    )
    at = body.at if body and body.at else now
    job = await use_case.execute(job_id, milestone, at)
    return JobResponse.from_entity(job)


@router.post("/{job_id}/accept", response_model=JobResponse)
async def accept_job(
    job_id: UUID,
    job_repository: JobRepositoryDep,
    lifecycle_engine: LifecycleEngineDep,
    now: NowDep,
    body: Optional[MilestoneRequest] = Body(None),
):
    """Record that the engineer accepted the job."""
    return await _record(
        job_id, Milestone.ACCEPTED, body, job_repository, lifecycle_engine, now
    )


@router.post("/{job_id}/on-site", response_model=JobResponse)
async def record_on_site(
    job_id: UUID,
    job_repository: JobRepositoryDep,
    lifecycle_engine: LifecycleEngineDep,
    now: NowDep,
    body: Optional[MilestoneRequest] = Body(None),
):
    """Record that the engineer arrived on site."""
    return await _record(
        job_id, Milestone.ONSITE, body, job_repository, lifecycle_engine, now
    )


@router.post("/{job_id}/complete", response_model=JobResponse)
async def complete_job(
    job_id: UUID,
    job_repository: JobRepositoryDep,
    lifecycle_engine: LifecycleEngineDep,
    now: NowDep,
    body: Optional[MilestoneRequest] = Body(None),
):
    """Record that the work was completed."""
    return await _record(
        job_id, Milestone.COMPLETED, body, job_repository, lifecycle_engine, now
    )


def _evaluation_response(
    evaluation: SLAEvaluation,
    stored_status: JobStatus,
    derived_status: JobStatus,
    overdue: bool,
) -> SLAEvaluationResponse:
    return SLAEvaluationResponse(
        job_id=UUID(evaluation.job_id),
        evaluated_at=evaluation.evaluated_at,
        windows=[
            SLAWindowResponse(
                milestone=w.milestone.value,
                threshold_minutes=w.threshold_minutes,
                deadline=w.deadline,
                elapsed_minutes=w.elapsed_minutes,
                breached=w.breached,
                met_at=w.met_at,
            )
            for w in evaluation.windows
        ],
        breached_milestones=[m.value for m in evaluation.breached_milestones],
        any_breached=evaluation.any_breached,
        stored_status=stored_status,
        derived_status=derived_status,
        overdue=overdue,
    )


@router.get("/{job_id}/sla", response_model=SLAEvaluationResponse)
async def evaluate_job_sla(
    job_id: UUID,
    job_repository: JobRepositoryDep,
    lifecycle_engine: LifecycleEngineDep,
    now: NowDep,
    at: Optional[AwareDatetime] = Query(None, description="Evaluate as of this time"),
):
    """Evaluate the job's SLA windows. The stored status is not changed."""
    use_case = EvaluateJobSLAUseCase(
        job_repo=job_repository, lifecycle_engine=lifecycle_engine
    )
    report = await use_case.execute(job_id, at or now)
    return _evaluation_response(
        report.evaluation, report.job.status, report.derived_status, report.overdue
    )
