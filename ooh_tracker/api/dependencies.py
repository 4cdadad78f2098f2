"""
FastAPI dependency injection container.
"""

from datetime import datetime, timezone
from functools import lru_cache
from typing import Annotated
from zoneinfo import ZoneInfo

from fastapi import Depends

from ooh_tracker.application.services.alert_ledger import AlertLedger
from ooh_tracker.application.services.lifecycle_engine import JobLifecycleEngine
from ooh_tracker.application.services.reporting import JobReporter
from ooh_tracker.config.logging import get_logger
from ooh_tracker.config.settings import settings
from ooh_tracker.infrastructure.repositories.customer_repository import (
    InMemoryCustomerRepository,
)
from ooh_tracker.infrastructure.repositories.engineer_repository import (
    InMemoryEngineerRepository,
)
from ooh_tracker.infrastructure.repositories.job_repository import (
    InMemoryJobRepository,
)

logger = get_logger(__name__)


# Repository Dependencies
# One store per process: the in-memory repositories are the system of record.
@lru_cache
def get_job_repository() -> InMemoryJobRepository:
    """Get job repository instance."""
    return InMemoryJobRepository()


@lru_cache
def get_customer_repository() -> InMemoryCustomerRepository:
    """Get customer repository instance."""
    return InMemoryCustomerRepository()


@lru_cache
def get_engineer_repository() -> InMemoryEngineerRepository:
    """Get engineer repository instance."""
    return InMemoryEngineerRepository()


# Service Dependencies
async def get_lifecycle_engine() -> JobLifecycleEngine:
    """Get job lifecycle engine instance."""
    return JobLifecycleEngine()


async def get_alert_ledger(
    engine: JobLifecycleEngine = Depends(get_lifecycle_engine),
) -> AlertLedger:
    """Get alert ledger instance."""
    return AlertLedger(engine)


async def get_job_reporter() -> JobReporter:
    """Get reporter for the configured timezone."""
    return JobReporter(ZoneInfo(settings.TIMEZONE))


# Clock
def get_now() -> datetime:
    """Current time. The only place the service reads the clock."""
    return datetime.now(timezone.utc)


# Type aliases for cleaner dependency injection
JobRepositoryDep = Annotated[InMemoryJobRepository, Depends(get_job_repository)]
CustomerRepositoryDep = Annotated[
    InMemoryCustomerRepository, Depends(get_customer_repository)
]
EngineerRepositoryDep = Annotated[
    InMemoryEngineerRepository, Depends(get_engineer_repository)
]
LifecycleEngineDep = Annotated[JobLifecycleEngine, Depends(get_lifecycle_engine)]
AlertLedgerDep = Annotated[AlertLedger, Depends(get_alert_ledger)]
JobReporterDep = Annotated[JobReporter, Depends(get_job_reporter)]
NowDep = Annotated[datetime, Depends(get_now)]
