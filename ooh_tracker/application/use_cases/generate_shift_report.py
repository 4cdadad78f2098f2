"""Shift report and dashboard use cases."""

from datetime import date
from typing import Optional

from ooh_tracker.application.interfaces.repositories import JobRepositoryInterface
from ooh_tracker.application.services.reporting import (
    DashboardStats,
    JobReporter,
    ShiftReport,
)
from ooh_tracker.config.logging import get_logger

logger = get_logger(__name__)


class GenerateShiftReportUseCase:
    """Build the end-of-shift report for a day."""

    def __init__(self, job_repo: JobRepositoryInterface, reporter: JobReporter):
        self.job_repo = job_repo
        self.reporter = reporter

    async def execute(self, day: date, engineer: Optional[str] = None) -> ShiftReport:
        jobs = await self.job_repo.list_all()
        report = self.reporter.shift_report(jobs, day, engineer)

        logger.info(
            "Shift report generated",
            date=day.isoformat(),
            engineer=engineer,
            total=report.summary.total,
            follow_up=len(report.follow_up_required),
        )
        return report


class GetDashboardStatsUseCase:
    """Headline numbers for the master dashboard."""

    def __init__(self, job_repo: JobRepositoryInterface, reporter: JobReporter):
        self.job_repo = job_repo
        self.reporter = reporter

    async def execute(self) -> DashboardStats:
        return self.reporter.dashboard_stats(await self.job_repo.list_all())
