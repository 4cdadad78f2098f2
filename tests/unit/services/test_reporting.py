"""
Unit tests for JobReporter.
"""

from datetime import date, datetime, timezone

from ooh_tracker.application.services.reporting import JobSummary
from ooh_tracker.domain.value_objects.job_classification import Priority
from ooh_tracker.domain.value_objects.job_status import JobStatus
from tests.conftest import T0, minutes


class TestSummarize:
    def test_empty_collection(self, reporter):
        summary = reporter.summarize([])

        assert summary == JobSummary()
        assert summary.total == 0
        assert summary.completed_count == 0
        assert summary.completion_rate == 0

    def test_counts_by_stored_status(self, reporter, make_job):
        jobs = [
            make_job(status=JobStatus.GREEN, site="A"),
            make_job(status=JobStatus.GREEN, site="B"),
            make_job(status=JobStatus.AMBER, site="A", customer="Northgate Housing"),
            make_job(status=JobStatus.RED, site="C"),
        ]

        summary = reporter.summarize(jobs)

        assert summary.total == 4
        assert summary.completed_count == 2
        assert summary.in_progress_count == 1
        assert summary.issue_count == 1
        assert summary.completion_rate == 0.5
        assert summary.completion_percentage == 50.0
        assert summary.distinct_customer_count == 2
        assert summary.distinct_site_count == 3

    def test_idempotent(self, reporter, make_job):
        jobs = [make_job(status=JobStatus.GREEN), make_job()]
        assert reporter.summarize(jobs) == reporter.summarize(jobs)


class TestSlices:
    def test_by_engineer_omits_engineers_without_jobs(self, reporter, make_job):
        jobs = [
            make_job(engineer="Sam Patel", status=JobStatus.GREEN),
            make_job(engineer="Sam Patel"),
            make_job(engineer="Chris Morgan"),
        ]

        result = reporter.by_engineer(jobs)

        assert list(result) == ["Sam Patel", "Chris Morgan"]
        assert result["Sam Patel"].total == 2
        assert result["Sam Patel"].completed_count == 1
        assert result["Chris Morgan"].total == 1
        assert "Alex Reid" not in result

    def test_by_engineer_skips_unassigned(self, reporter, make_job):
        result = reporter.by_engineer([make_job(engineer="")])
        assert result == {}

    def test_by_customer(self, reporter, make_job):
        jobs = [
            make_job(customer="Harbour Retail Group"),
            make_job(customer="Northgate Housing", site="Elm Court"),
            make_job(customer="Northgate Housing", site="Birch House"),
        ]

        result = reporter.by_customer(jobs)

        assert result["Northgate Housing"].total == 2
        assert result["Northgate Housing"].distinct_site_count == 2
        assert result["Harbour Retail Group"].total == 1

    def test_group_by_engineer(self, reporter, make_job):
        first = make_job(engineer="Sam Patel")
        second = make_job(engineer="Chris Morgan")

        assert reporter.group_by_engineer([first, second]) == {
            "Sam Patel": [first],
            "Chris Morgan": [second],
        }


class TestJobsOnDate:
    def test_uses_local_calendar_day(self, reporter, make_job):
        # 23:30 UTC in July is 00:30 the next day in London
        late = make_job(date_logged=datetime(2024, 7, 1, 23, 30, tzinfo=timezone.utc))
        early = make_job(date_logged=datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc))

        assert reporter.jobs_on_date([late, early], date(2024, 7, 2)) == [late]
        assert reporter.jobs_on_date([late, early], date(2024, 7, 1)) == [early]

    def test_naive_datetimes_are_taken_as_local(self, reporter, make_job):
        job = make_job(date_logged=datetime(2024, 7, 1, 23, 30))
        assert reporter.jobs_on_date([job], date(2024, 7, 1)) == [job]


class TestDashboardAndShiftReport:
    def test_dashboard_stats(self, reporter, make_job):
        jobs = [
            make_job(status=JobStatus.GREEN),
            make_job(status=JobStatus.AMBER, priority=Priority.CRITICAL),
            make_job(status=JobStatus.RED),
        ]

        stats = reporter.dashboard_stats(jobs)

        assert stats.total == 3
        assert stats.active == 2
        assert stats.completed == 1
        assert stats.critical == 1
        assert stats.overdue == 1

    def test_dashboard_stats_empty(self, reporter):
        assert reporter.dashboard_stats([]).to_dict() == {
            "total": 0,
            "active": 0,
            "completed": 0,
            "critical": 0,
            "overdue": 0,
        }

    def test_shift_report(self, reporter, make_job):
        jobs = [
            make_job(status=JobStatus.GREEN, tags=["Emergency"]),
            make_job(status=JobStatus.AMBER, engineer="Chris Morgan"),
            make_job(status=JobStatus.RED, date_logged=T0 - minutes(24 * 60)),
        ]

        report = reporter.shift_report(jobs, T0.date())

        assert report.summary.total == 2
        assert report.emergency_count == 1
        assert [j.engineer for j in report.follow_up_required] == ["Chris Morgan"]
        assert set(report.by_engineer) == {"Sam Patel", "Chris Morgan"}
        assert report.narrative == "2 jobs logged today. 1 completed, 1 require follow-up."

    def test_shift_report_for_one_engineer(self, reporter, make_job):
        jobs = [make_job(engineer="Sam Patel"), make_job(engineer="Chris Morgan")]

        report = reporter.shift_report(jobs, T0.date(), engineer="Chris Morgan")

        assert report.summary.total == 1
        assert list(report.by_engineer) == ["Chris Morgan"]
        assert report.engineer == "Chris Morgan"

    def test_empty_shift(self, reporter):
        report = reporter.shift_report([], T0.date())
        assert report.narrative == "0 jobs logged today. 0 completed, 0 require follow-up."
