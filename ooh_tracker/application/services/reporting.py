"""
Read-only reporting over job collections.

Every function here is side-effect free: the same jobs always produce the
same numbers, and an empty collection produces zeros rather than errors.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo

from ooh_tracker.domain.entities.job import Job
from ooh_tracker.domain.value_objects.job_status import JobStatus

EMERGENCY_TAG = "Emergency"


@dataclass(frozen=True)
class JobSummary:
    """Counts by stored status plus distinct customers and sites."""

    total: int = 0
    completed_count: int = 0
    in_progress_count: int = 0
    issue_count: int = 0
    completion_rate: float = 0.0
    distinct_customer_count: int = 0
    distinct_site_count: int = 0

    @property
    def completion_percentage(self) -> float:
        return round(self.completion_rate * 100, 1)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "completed_count": self.completed_count,
            "in_progress_count": self.in_progress_count,
            "issue_count": self.issue_count,
            "completion_rate": self.completion_rate,
            "distinct_customer_count": self.distinct_customer_count,
            "distinct_site_count": self.distinct_site_count,
        }


@dataclass(frozen=True)
class DashboardStats:
    """Headline numbers for the master job list."""

    total: int = 0
    active: int = 0
    completed: int = 0
    critical: int = 0
    overdue: int = 0

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "active": self.active,
            "completed": self.completed,
            "critical": self.critical,
            "overdue": self.overdue,
        }


@dataclass(frozen=True)
class ShiftReport:
    """End-of-shift report for one calendar day."""

    date: date
    summary: JobSummary
    by_engineer: Dict[str, JobSummary] = field(default_factory=dict)
    by_customer: Dict[str, JobSummary] = field(default_factory=dict)
    emergency_count: int = 0
    follow_up_required: List[Job] = field(default_factory=list)
    engineer: Optional[str] = None

    @property
    def narrative(self) -> str:
        return (
            f"{self.summary.total} jobs logged today. "
            f"{self.summary.completed_count} completed, "
            f"{len(self.follow_up_required)} require follow-up."
        )


class JobReporter:
    """Summaries by status, engineer, customer and calendar day."""

    def __init__(self, tz: ZoneInfo):
        self.tz = tz

    def local_date(self, moment: datetime) -> date:
        """Calendar day of ``moment`` in the reporting zone.

        Naive datetimes are taken to be local already.
        """
        if moment.tzinfo is None:
            return moment.date()
        return moment.astimezone(self.tz).date()

    def jobs_on_date(self, jobs: Iterable[Job], day: date) -> List[Job]:
        return [job for job in jobs if self.local_date(job.date_logged) == day]

    def summarize(self, jobs: Iterable[Job]) -> JobSummary:
        jobs = list(jobs)
        total = len(jobs)
        if total == 0:
            return JobSummary()

        completed = sum(1 for job in jobs if job.status == JobStatus.GREEN)
        return JobSummary(
            total=total,
            completed_count=completed,
            in_progress_count=sum(1 for job in jobs if job.status == JobStatus.AMBER),
            issue_count=sum(1 for job in jobs if job.status == JobStatus.RED),
            completion_rate=completed / total,
            distinct_customer_count=len({job.customer for job in jobs}),
            distinct_site_count=len({job.site for job in jobs}),
        )

    def by_engineer(self, jobs: Iterable[Job]) -> Dict[str, JobSummary]:
        """Summary per engineer name; engineers without jobs are left out."""
        return OrderedDict(
            (name, self.summarize(group))
            for name, group in self.group_by_engineer(jobs).items()
        )

    def by_customer(self, jobs: Iterable[Job]) -> Dict[str, JobSummary]:
        """Summary per customer name; customers without jobs are left out."""
        groups: Dict[str, List[Job]] = OrderedDict()
        for job in jobs:
            if job.customer:
                groups.setdefault(job.customer, []).append(job)
        return OrderedDict((name, self.summarize(group)) for name, group in groups.items())

    def group_by_engineer(self, jobs: Iterable[Job]) -> Dict[str, List[Job]]:
        """Jobs keyed by assigned engineer, in first-seen order."""
        groups: Dict[str, List[Job]] = OrderedDict()
        for job in jobs:
            if job.engineer:
                groups.setdefault(job.engineer, []).append(job)
        return groups

    def dashboard_stats(self, jobs: Iterable[Job]) -> DashboardStats:
        jobs = list(jobs)
        return DashboardStats(
            total=len(jobs),
            active=sum(1 for job in jobs if job.status.is_active()),
            completed=sum(1 for job in jobs if job.status == JobStatus.GREEN),
            critical=sum(1 for job in jobs if job.priority.is_critical),
            overdue=sum(1 for job in jobs if job.status == JobStatus.RED),
        )

    def shift_report(
        self,
        jobs: Iterable[Job],
        day: date,
        engineer: Optional[str] = None,
    ) -> ShiftReport:
        """
        Build the end-of-shift report for ``day``.

        Args:
            jobs: All known jobs
            day: Calendar day in the reporting zone
            engineer: Restrict the report to one engineer (exact name)
        """
        shift_jobs = self.jobs_on_date(jobs, day)
        if engineer:
            shift_jobs = [job for job in shift_jobs if job.engineer == engineer]

        return ShiftReport(
            date=day,
            summary=self.summarize(shift_jobs),
            by_engineer=self.by_engineer(shift_jobs),
            by_customer=self.by_customer(shift_jobs),
            emergency_count=sum(1 for job in shift_jobs if job.has_tag(EMERGENCY_TAG)),
            follow_up_required=[
                job for job in shift_jobs if job.status.requires_follow_up()
            ],
            engineer=engineer,
        )
