"""Alert endpoints: raising, acknowledging and sweeping for SLA breaches."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Query, status
from pydantic import AwareDatetime

from ooh_tracker.api.dependencies import (
    AlertLedgerDep,
    JobRepositoryDep,
    LifecycleEngineDep,
    NowDep,
)
from ooh_tracker.api.schemas.alert import (
    AlertCreateRequest,
    SweepResponse,
    SweptJobResponse,
)
from ooh_tracker.api.schemas.common import ErrorResponse
from ooh_tracker.api.schemas.job import AlertSchema, JobResponse
from ooh_tracker.application.use_cases.manage_alerts import (
    AcknowledgeAlertUseCase,
    RaiseAlertUseCase,
)
from ooh_tracker.application.use_cases.sweep_sla_alerts import SweepSLAAlertsUseCase
from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.exceptions.not_found_error import JobNotFoundError

logger = get_logger(__name__)
router = APIRouter(tags=["alerts"], responses={404: {"model": ErrorResponse}})


@router.get("/jobs/{job_id}/alerts", response_model=List[AlertSchema])
async def list_job_alerts(
    job_id: UUID,
    job_repository: JobRepositoryDep,
    alert_ledger: AlertLedgerDep,
    active_only: bool = False,
):
    """List a job's alerts in the order they were raised."""
    job = await job_repository.get_by_id(job_id)
    if job is None:
        raise JobNotFoundError(job_id)

    alerts = alert_ledger.active_alerts(job) if active_only else job.alerts
    return [AlertSchema.from_entity(alert) for alert in alerts]


@router.post(
    "/jobs/{job_id}/alerts",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
)
async def raise_alert(
    job_id: UUID,
    alert_data: AlertCreateRequest,
    job_repository: JobRepositoryDep,
    alert_ledger: AlertLedgerDep,
    now: NowDep,
):
    """Raise an alert manually. Each call adds a new alert."""
    use_case = RaiseAlertUseCase(job_repo=job_repository, alert_ledger=alert_ledger)
    job = await use_case.execute(job_id, alert_data.type, alert_data.message, now)
    return JobResponse.from_entity(job)


@router.post("/jobs/{job_id}/alerts/{alert_id}/acknowledge", response_model=JobResponse)
async def acknowledge_alert(
    job_id: UUID,
    alert_id: str,
    job_repository: JobRepositoryDep,
    alert_ledger: AlertLedgerDep,
):
    """Acknowledge an alert. Unknown or already acknowledged ids change nothing."""
    use_case = AcknowledgeAlertUseCase(
        job_repo=job_repository, alert_ledger=alert_ledger
    )
    job = await use_case.execute(job_id, alert_id)
    return JobResponse.from_entity(job)


@router.post("/alerts/sweep", response_model=SweepResponse)
async def sweep_sla_alerts(
    job_repository: JobRepositoryDep,
    lifecycle_engine: LifecycleEngineDep,
    alert_ledger: AlertLedgerDep,
    now: NowDep,
    at: Optional[AwareDatetime] = Query(None, description="Sweep as of this time"),
):
    """Raise alerts for every open job with a new SLA breach."""
    use_case = SweepSLAAlertsUseCase(
        job_repo=job_repository,
        lifecycle_engine=lifecycle_engine,
        alert_ledger=alert_ledger,
    )
    results = await use_case.execute(at or now)

    return SweepResponse(
        jobs_alerted=len(results),
        alerts_raised=sum(len(r.alerts) for r in results),
        results=[
            SweptJobResponse(
                job_id=r.job.id,
                job_number=r.job.job_number,
                alerts=[AlertSchema.from_entity(a) for a in r.alerts],
            )
            for r in results
        ],
    )
