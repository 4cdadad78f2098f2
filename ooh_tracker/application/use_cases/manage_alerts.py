"""Raise and acknowledge alert use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from ooh_tracker.application.interfaces.repositories import JobRepositoryInterface
from ooh_tracker.application.services.alert_ledger import AlertLedger
from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.entities.job import Job
from ooh_tracker.domain.exceptions.not_found_error import JobNotFoundError
from ooh_tracker.domain.value_objects.milestone import AlertType
from ooh_tracker.infrastructure.monitoring.metrics import (
    record_alert_acknowledged,
    record_alert_raised,
)

logger = get_logger(__name__)


class RaiseAlertUseCase:
    """Manually raise an alert against a job."""

    def __init__(self, job_repo: JobRepositoryInterface, alert_ledger: AlertLedger):
        self.job_repo = job_repo
        self.alert_ledger = alert_ledger

    async def execute(
        self,
        job_id: UUID,
        alert_type: AlertType,
        message: Optional[str],
        now: datetime,
    ) -> Job:
        """Append an alert; the new alert is the last one on the returned job."""
        job = await self.job_repo.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        updated = self.alert_ledger.raise_alert(job, alert_type, message, now)
        await self.job_repo.update(updated)
        record_alert_raised(alert_type.value, source="manual")

        logger.info(
            "Alert raised",
            job_id=str(job_id),
            alert_id=updated.alerts[-1].id,
            alert_type=alert_type.value,
        )
        return updated


class AcknowledgeAlertUseCase:
    """Acknowledge an alert. Repeating the call changes nothing."""

    def __init__(self, job_repo: JobRepositoryInterface, alert_ledger: AlertLedger):
        self.job_repo = job_repo
        self.alert_ledger = alert_ledger

    async def execute(self, job_id: UUID, alert_id: str) -> Job:
        job = await self.job_repo.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        updated = self.alert_ledger.acknowledge(job, alert_id)
        if updated is job:
            logger.debug("Alert acknowledge was a no-op", job_id=str(job_id), alert_id=alert_id)
            return job

        await self.job_repo.update(updated)
        record_alert_acknowledged(updated.alert(alert_id).type.value)

        logger.info("Alert acknowledged", job_id=str(job_id), alert_id=alert_id)
        return updated
