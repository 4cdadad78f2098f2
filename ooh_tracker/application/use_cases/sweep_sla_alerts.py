"""SLA sweep use case."""

from dataclasses import dataclass
from datetime import datetime
from typing import List

from ooh_tracker.application.interfaces.repositories import JobRepositoryInterface
from ooh_tracker.application.services.alert_ledger import AlertLedger
from ooh_tracker.application.services.lifecycle_engine import JobLifecycleEngine
from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.entities.job import Job, JobAlert
from ooh_tracker.infrastructure.monitoring.metrics import record_alert_raised

logger = get_logger(__name__)


@dataclass
class SweepResult:
    """Alerts raised against one job by a sweep."""

    job: Job
    alerts: List[JobAlert]


class SweepSLAAlertsUseCase:
    """Check every open job at ``now`` and raise alerts for new breaches.

    Runs only when called; nothing schedules it.
    """

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        lifecycle_engine: JobLifecycleEngine,
        alert_ledger: AlertLedger,
    ):
        self.job_repo = job_repo
        self.lifecycle_engine = lifecycle_engine
        self.alert_ledger = alert_ledger

    async def execute(self, now: datetime) -> List[SweepResult]:
        results = []
        jobs = await self.job_repo.list_all()

        for job in jobs:
            if job.is_completed:
                continue

            evaluation = self.lifecycle_engine.evaluate_sla(job, now)
            pending = self.alert_ledger.breach_alerts(job, evaluation, now)
            if not pending:
                continue

            updated = job
            for alert in pending:
                updated = self.alert_ledger.raise_alert(
                    updated, alert.type, alert.message, alert.timestamp
                )
                record_alert_raised(alert.type.value, source="sweep")

            await self.job_repo.update(updated)
            raised = list(updated.alerts[len(job.alerts):])
            results.append(SweepResult(job=updated, alerts=raised))

            logger.info(
                "SLA breach alerts raised",
                job_id=str(job.id),
                job_number=job.job_number,
                alert_types=[a.type.value for a in raised],
            )

        logger.info(
            "SLA sweep finished",
            jobs_checked=len(jobs),
            jobs_alerted=len(results),
            now=now.isoformat(),
        )
        return results
