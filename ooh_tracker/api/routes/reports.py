"""Reporting endpoints."""

from datetime import date
from typing import Annotated, Optional

from fastapi import APIRouter, Query

from ooh_tracker.api.dependencies import JobReporterDep, JobRepositoryDep
from ooh_tracker.api.schemas.report import DashboardStatsResponse, ShiftReportResponse
from ooh_tracker.application.use_cases.generate_shift_report import (
    GenerateShiftReportUseCase,
    GetDashboardStatsUseCase,
)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/shift", response_model=ShiftReportResponse)
async def shift_report(
    day: Annotated[date, Query(alias="date")],
    job_repository: JobRepositoryDep,
    reporter: JobReporterDep,
    engineer: Optional[str] = None,
):
    """End-of-shift report for one calendar day, optionally for one engineer."""
    use_case = GenerateShiftReportUseCase(job_repo=job_repository, reporter=reporter)
    report = await use_case.execute(day, engineer)
    return ShiftReportResponse.from_report(report)


@router.get("/dashboard", response_model=DashboardStatsResponse)
async def dashboard(job_repository: JobRepositoryDep, reporter: JobReporterDep):
    """Headline job counts for the master dashboard."""
    use_case = GetDashboardStatsUseCase(job_repo=job_repository, reporter=reporter)
    return DashboardStatsResponse.from_stats(await use_case.execute())
