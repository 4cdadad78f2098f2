"""
Report API schemas.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel

from ooh_tracker.application.services.reporting import (
    DashboardStats,
    JobSummary,
    ShiftReport,
)

from .job import JobResponse


class JobSummaryResponse(BaseModel):
    """Counts over a set of jobs."""

    total: int
    completed_count: int
    in_progress_count: int
    issue_count: int
    completion_rate: float
    distinct_customer_count: int
    distinct_site_count: int

    @classmethod
    def from_summary(cls, summary: JobSummary) -> "JobSummaryResponse":
        return cls(**summary.to_dict())


class DashboardStatsResponse(BaseModel):
    total: int
    active: int
    completed: int
    critical: int
    overdue: int

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> "DashboardStatsResponse":
        return cls(**stats.to_dict())


class ShiftReportResponse(BaseModel):
    """End-of-shift report."""

    date: date
    engineer: Optional[str] = None
    summary: JobSummaryResponse
    by_engineer: Dict[str, JobSummaryResponse]
    by_customer: Dict[str, JobSummaryResponse]
    emergency_count: int
    follow_up_required: List[JobResponse]
    narrative: str

    @classmethod
    def from_report(cls, report: ShiftReport) -> "ShiftReportResponse":
        return cls(
            date=report.date,
            engineer=report.engineer,
            summary=JobSummaryResponse.from_summary(report.summary),
            by_engineer={
                name: JobSummaryResponse.from_summary(s)
                for name, s in report.by_engineer.items()
            },
            by_customer={
                name: JobSummaryResponse.from_summary(s)
                for name, s in report.by_customer.items()
            },
            emergency_count=report.emergency_count,
            follow_up_required=[JobResponse.from_entity(j) for j in report.follow_up_required],
            narrative=report.narrative,
        )
