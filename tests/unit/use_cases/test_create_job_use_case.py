"""
Unit tests for CreateJobUseCase.
"""

from uuid import UUID, uuid4

import pytest

from ooh_tracker.application.use_cases.create_job import (
    CreateJobRequest,
    CreateJobUseCase,
)
from ooh_tracker.domain.entities.customer import Customer
from ooh_tracker.domain.entities.engineer import Engineer
from ooh_tracker.domain.exceptions.validation_error import RequiredFieldError
from ooh_tracker.domain.value_objects.job_classification import Priority
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.sla import SLAThresholds
from tests.conftest import T0


class TestCreateJobUseCase:
    """Test cases for CreateJobUseCase."""

    @pytest.fixture
    def use_case(
        self, mock_job_repository, mock_customer_repository, mock_engineer_repository
    ):
        return CreateJobUseCase(
            job_repo=mock_job_repository,
            customer_repo=mock_customer_repository,
            engineer_repo=mock_engineer_repository,
        )

    @pytest.fixture
    def sample_request(self):
        return CreateJobRequest(
            customer="Harbour Retail Group",
            site="Quayside Store",
            description="Shutter stuck open",
            engineer="Sam Patel",
            priority=Priority.HIGH,
            custom_alerts=SLAThresholds(accept_sla=15, onsite_sla=60, completed_sla=120),
            tags=["Emergency"],
        )

    @pytest.mark.asyncio
    async def test_creates_logged_job(self, use_case, sample_request, mock_job_repository):
        job = await use_case.execute(sample_request, T0)

        assert isinstance(job.id, UUID)
        assert job.job_number == "OOH-000001"
        assert job.date_logged == T0
        assert job.status is JobStatus.AMBER
        assert job.date_accepted is None
        assert job.date_on_site is None
        assert job.date_completed is None
        assert job.alerts == ()
        assert job.sla.accept_sla == 15
        assert job.tags == ("Emergency",)
        mock_job_repository.add.assert_awaited_once_with(job)

    @pytest.mark.asyncio
    async def test_applies_default_sla(self, use_case, sample_request):
        sample_request.custom_alerts = None
        sample_request.target_completion_time = None

        job = await use_case.execute(sample_request, T0)

        assert job.sla == SLAThresholds(accept_sla=30, onsite_sla=90, completed_sla=180)
        assert job.target_completion_time == 240

    @pytest.mark.asyncio
    async def test_resolves_directory_ids(
        self,
        use_case,
        sample_request,
        mock_customer_repository,
        mock_engineer_repository,
    ):
        engineer = Engineer(name="Sam Patel", id=uuid4())
        mock_customer_repository.get_by_name.return_value = Customer(
            id=7, name="Harbour Retail Group"
        )
        mock_engineer_repository.get_by_name.return_value = engineer

        job = await use_case.execute(sample_request, T0)

        assert job.customer_id == 7
        assert job.engineer_id == engineer.id
        mock_customer_repository.get_by_name.assert_awaited_once_with("Harbour Retail Group")

    @pytest.mark.asyncio
    async def test_unknown_names_are_kept_as_text(self, use_case, sample_request):
        job = await use_case.execute(sample_request, T0)

        assert job.customer == "Harbour Retail Group"
        assert job.customer_id is None
        assert job.engineer_id is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field_name", ["customer", "site", "description"])
    async def test_rejects_blank_required_field(
        self, use_case, sample_request, mock_job_repository, field_name
    ):
        setattr(sample_request, field_name, "  ")

        with pytest.raises(RequiredFieldError):
            await use_case.execute(sample_request, T0)

        mock_job_repository.add.assert_not_awaited()
