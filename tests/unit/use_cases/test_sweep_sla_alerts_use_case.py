"""
Unit tests for SweepSLAAlertsUseCase and the report use cases.
"""

import pytest

from ooh_tracker.application.use_cases.generate_shift_report import (
    GenerateShiftReportUseCase,
    GetDashboardStatsUseCase,
)
from ooh_tracker.application.use_cases.sweep_sla_alerts import SweepSLAAlertsUseCase
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.milestone import AlertType
from tests.conftest import T0, minutes


class TestSweepSLAAlertsUseCase:
    @pytest.fixture
    def use_case(self, job_repository, lifecycle_engine, alert_ledger):
        return SweepSLAAlertsUseCase(
            job_repo=job_repository,
            lifecycle_engine=lifecycle_engine,
            alert_ledger=alert_ledger,
        )

    @pytest.mark.asyncio
    async def test_raises_alerts_for_breached_jobs(self, use_case, job_repository, make_job):
        breached = await job_repository.add(make_job())
        on_time = await job_repository.add(make_job(date_logged=T0 + minutes(20)))

        results = await use_case.execute(T0 + minutes(31))

        assert [r.job.id for r in results] == [breached.id]
        assert [a.type for a in results[0].alerts] == [AlertType.ACCEPTED]
        stored = await job_repository.get_by_id(breached.id)
        assert len(stored.alerts) == 1
        assert (await job_repository.get_by_id(on_time.id)).alerts == ()

    @pytest.mark.asyncio
    async def test_repeated_sweep_raises_nothing_new(self, use_case, job_repository, make_job):
        job = await job_repository.add(make_job())

        await use_case.execute(T0 + minutes(31))
        second = await use_case.execute(T0 + minutes(32))

        assert second == []
        assert len((await job_repository.get_by_id(job.id)).alerts) == 1

    @pytest.mark.asyncio
    async def test_completed_jobs_are_skipped(self, use_case, job_repository, make_job):
        await job_repository.add(
            make_job(
                date_accepted=T0 + minutes(60),
                date_on_site=T0 + minutes(120),
                date_completed=T0 + minutes(300),
            )
        )

        assert await use_case.execute(T0 + minutes(400)) == []

    @pytest.mark.asyncio
    async def test_does_not_change_stored_status(self, use_case, job_repository, make_job):
        job = await job_repository.add(make_job(status=JobStatus.AMBER))

        await use_case.execute(T0 + minutes(500))

        stored = await job_repository.get_by_id(job.id)
        assert stored.status is JobStatus.AMBER
        assert {a.type for a in stored.alerts} == {
            AlertType.ACCEPTED,
            AlertType.ONSITE,
            AlertType.COMPLETED,
            AlertType.OVERDUE,
        }


class TestReportUseCases:
    @pytest.mark.asyncio
    async def test_shift_report(self, job_repository, reporter, make_job):
        await job_repository.add(make_job(status=JobStatus.GREEN))
        await job_repository.add(make_job(status=JobStatus.RED))
        use_case = GenerateShiftReportUseCase(job_repo=job_repository, reporter=reporter)

        report = await use_case.execute(T0.date())

        assert report.summary.total == 2
        assert report.narrative == "2 jobs logged today. 1 completed, 1 require follow-up."

    @pytest.mark.asyncio
    async def test_dashboard_stats(self, job_repository, reporter, make_job):
        await job_repository.add(make_job(status=JobStatus.RED))
        use_case = GetDashboardStatsUseCase(job_repo=job_repository, reporter=reporter)

        stats = await use_case.execute()

        assert stats.total == 1
        assert stats.overdue == 1
