"""
Unit tests for milestone, alert and SLA use cases.
"""

from uuid import uuid4

import pytest

from ooh_tracker.application.use_cases.evaluate_sla import EvaluateJobSLAUseCase
from ooh_tracker.application.use_cases.manage_alerts import (
    AcknowledgeAlertUseCase,
    RaiseAlertUseCase,
)
from ooh_tracker.application.use_cases.record_milestone import RecordMilestoneUseCase
from ooh_tracker.domain.exceptions.lifecycle_error import OutOfOrderTransitionError
from ooh_tracker.domain.exceptions.not_found_error import JobNotFoundError
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.milestone import AlertType, Milestone
from tests.conftest import T0, minutes


class TestRecordMilestoneUseCase:
    @pytest.fixture
    def use_case(self, mock_job_repository, lifecycle_engine):
        return RecordMilestoneUseCase(
            job_repo=mock_job_repository, lifecycle_engine=lifecycle_engine
        )

    @pytest.mark.asyncio
    async def test_records_and_stores(self, use_case, mock_job_repository, make_job):
        job = make_job()
        mock_job_repository.get_by_id.return_value = job

        updated = await use_case.execute(job.id, Milestone.ACCEPTED, T0 + minutes(10))

        assert updated.date_accepted == T0 + minutes(10)
        mock_job_repository.update.assert_awaited_once_with(updated)

    @pytest.mark.asyncio
    async def test_rejected_transition_is_not_stored(
        self, use_case, mock_job_repository, make_job
    ):
        job = make_job()
        mock_job_repository.get_by_id.return_value = job

        with pytest.raises(OutOfOrderTransitionError) as exc_info:
            await use_case.execute(job.id, Milestone.COMPLETED, T0 + minutes(10))

        assert exc_info.value.job is job
        mock_job_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_job(self, use_case):
        with pytest.raises(JobNotFoundError):
            await use_case.execute(uuid4(), Milestone.ACCEPTED, T0)


class TestAlertUseCases:
    @pytest.mark.asyncio
    async def test_raise_then_acknowledge(self, job_repository, alert_ledger, make_job):
        job = await job_repository.add(make_job())
        raise_alert = RaiseAlertUseCase(job_repo=job_repository, alert_ledger=alert_ledger)
        acknowledge = AcknowledgeAlertUseCase(
            job_repo=job_repository, alert_ledger=alert_ledger
        )

        raised = await raise_alert.execute(job.id, AlertType.ACCEPTED, None, T0 + minutes(31))
        alert_id = raised.alerts[-1].id
        acknowledged = await acknowledge.execute(job.id, alert_id)

        stored = await job_repository.get_by_id(job.id)
        assert stored == acknowledged
        assert stored.alert(alert_id).acknowledged is True
        assert list(alert_ledger.active_alerts(stored)) == []

    @pytest.mark.asyncio
    async def test_acknowledge_unknown_alert_is_a_no_op(
        self, mock_job_repository, alert_ledger, make_job
    ):
        job = make_job()
        mock_job_repository.get_by_id.return_value = job
        use_case = AcknowledgeAlertUseCase(
            job_repo=mock_job_repository, alert_ledger=alert_ledger
        )

        result = await use_case.execute(job.id, "missing")

        assert result is job
        mock_job_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_raise_alert_missing_job(self, mock_job_repository, alert_ledger):
        use_case = RaiseAlertUseCase(job_repo=mock_job_repository, alert_ledger=alert_ledger)

        with pytest.raises(JobNotFoundError):
            await use_case.execute(uuid4(), AlertType.ONSITE, None, T0)


class TestEvaluateJobSLAUseCase:
    @pytest.mark.asyncio
    async def test_reports_breach_without_changing_status(
        self, mock_job_repository, lifecycle_engine, make_job
    ):
        job = make_job(status=JobStatus.AMBER)
        mock_job_repository.get_by_id.return_value = job
        use_case = EvaluateJobSLAUseCase(
            job_repo=mock_job_repository, lifecycle_engine=lifecycle_engine
        )

        report = await use_case.execute(job.id, T0 + minutes(31))

        assert report.evaluation.accept_breached is True
        assert report.derived_status is JobStatus.RED
        assert report.status_diverges is True
        assert report.overdue is False
        assert report.job.status is JobStatus.AMBER
        mock_job_repository.update.assert_not_awaited()
