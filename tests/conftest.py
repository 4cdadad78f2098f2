"""
Pytest configuration and fixtures.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from zoneinfo import ZoneInfo

import pytest

from ooh_tracker.application.interfaces.repositories import (
    CustomerRepositoryInterface,
    EngineerRepositoryInterface,
    JobRepositoryInterface,
)
from ooh_tracker.application.services.alert_ledger import AlertLedger
from ooh_tracker.application.services.lifecycle_engine import JobLifecycleEngine
from ooh_tracker.application.services.reporting import JobReporter
from ooh_tracker.config.settings import Settings
from ooh_tracker.domain.entities.job import Job
from ooh_tracker.domain.value_objects.sla import SLAThresholds
from ooh_tracker.infrastructure.repositories import (
    InMemoryCustomerRepository,
    InMemoryEngineerRepository,
    InMemoryJobRepository,
)

# 09:00 UTC on a winter day, so UTC and Europe/London agree
T0 = datetime(2024, 1, 15, 9, 0, tzinfo=timezone.utc)


def minutes(n: float) -> timedelta:
    return timedelta(minutes=n)


@pytest.fixture(scope="session")
def test_settings():
    """Test settings configuration."""
    return Settings(
        ENVIRONMENT="test",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def t0() -> datetime:
    return T0


@pytest.fixture
def default_sla() -> SLAThresholds:
    return SLAThresholds(accept_sla=30, onsite_sla=90, completed_sla=180)


@pytest.fixture
def make_job(default_sla):
    """Factory for jobs logged at T0 unless told otherwise."""

    def _make_job(**overrides) -> Job:
        fields = dict(
            job_number="OOH-000001",
            customer="Harbour Retail Group",
            site="Quayside Store",
            engineer="Sam Patel",
            description="Shutter stuck open",
            date_logged=T0,
            sla=default_sla,
        )
        fields.update(overrides)
        return Job(**fields)

    return _make_job


@pytest.fixture
def lifecycle_engine() -> JobLifecycleEngine:
    return JobLifecycleEngine()


@pytest.fixture
def alert_ledger(lifecycle_engine) -> AlertLedger:
    return AlertLedger(lifecycle_engine)


@pytest.fixture
def reporter() -> JobReporter:
    return JobReporter(ZoneInfo("Europe/London"))


@pytest.fixture
def mock_job_repository():
    """Mock job repository."""
    mock_repo = AsyncMock(spec=JobRepositoryInterface)

    # Mock methods
    mock_repo.get_by_id = AsyncMock(return_value=None)
    mock_repo.update = AsyncMock(side_effect=lambda job: job)
    mock_repo.add = AsyncMock(side_effect=lambda job: job)
    mock_repo.list_all = AsyncMock(return_value=[])
    mock_repo.next_job_number = AsyncMock(return_value="OOH-000001")

    return mock_repo


@pytest.fixture
def mock_customer_repository():
    """Mock customer repository."""
    mock_repo = AsyncMock(spec=CustomerRepositoryInterface)
    mock_repo.get_by_name = AsyncMock(return_value=None)
    return mock_repo


@pytest.fixture
def mock_engineer_repository():
    """Mock engineer repository."""
    mock_repo = AsyncMock(spec=EngineerRepositoryInterface)
    mock_repo.get_by_name = AsyncMock(return_value=None)
    return mock_repo


@pytest.fixture
def job_repository() -> InMemoryJobRepository:
    return InMemoryJobRepository(job_number_prefix="OOH")


@pytest.fixture
def customer_repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def engineer_repository() -> InMemoryEngineerRepository:
    return InMemoryEngineerRepository()


class FixedClock:
    """Clock the API reads through its ``get_now`` dependency."""

    def __init__(self, now: datetime):
        self.now = now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(T0)


@pytest.fixture
def app(job_repository, customer_repository, engineer_repository, clock):
    """FastAPI app wired to fresh repositories and a fixed clock."""
    from ooh_tracker.api.app import create_app
    from ooh_tracker.api.dependencies import (
        get_customer_repository,
        get_engineer_repository,
        get_job_repository,
        get_now,
    )

    app = create_app()
    app.dependency_overrides[get_job_repository] = lambda: job_repository
    app.dependency_overrides[get_customer_repository] = lambda: customer_repository
    app.dependency_overrides[get_engineer_repository] = lambda: engineer_repository
    app.dependency_overrides[get_now] = lambda: clock.now
    return app


@pytest.fixture
def client(app):
    """Create test FastAPI client."""
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def sample_job_data():
    """Sample job creation payload."""
    return {
        "customer": "Harbour Retail Group",
        "site": "Quayside Store",
        "description": "Shutter stuck open, store cannot be secured",
        "engineer": "Sam Patel",
        "contact": {"name": "Dana Hughes", "number": "07700 900201"},
        "priority": "High",
        "category": "Security Systems",
        "custom_alerts": {"accept_sla": 30, "onsite_sla": 90, "completed_sla": 180},
        "tags": ["Emergency"],
    }
