"""
Alert ledger: append-only alert history kept on each job.
"""

from dataclasses import replace
from datetime import datetime
from typing import Iterator, List, Optional

from ooh_tracker.application.services.lifecycle_engine import JobLifecycleEngine
from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.entities.job import Job, JobAlert
from ooh_tracker.domain.exceptions.validation_error import AlertHistoryError
from ooh_tracker.domain.value_objects.milestone import AlertType
from ooh_tracker.domain.value_objects.sla import SLAEvaluation

logger = get_logger(__name__)


class ActiveAlerts:
    """Unacknowledged alerts of a job, in the order they were raised.

    Iterating is lazy and can be repeated; the job it wraps never changes.
    """

    def __init__(self, job: Job):
        self._job = job

    def __iter__(self) -> Iterator[JobAlert]:
        return (alert for alert in self._job.alerts if not alert.acknowledged)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __repr__(self) -> str:
        return f"ActiveAlerts(job_id={self._job.id}, count={len(self)})"


class AlertLedger:
    """Raises and acknowledges job alerts without ever dropping history."""

    def __init__(self, lifecycle_engine: Optional[JobLifecycleEngine] = None):
        self.lifecycle_engine = lifecycle_engine or JobLifecycleEngine()
        self.logger = logger

    def raise_alert(
        self,
        job: Job,
        alert_type: AlertType,
        message: Optional[str],
        timestamp: datetime,
    ) -> Job:
        """
        Append a new unacknowledged alert.

        Repeated calls with the same type produce separate alerts.
        """
        alert = JobAlert(
            type=alert_type,
            message=message or alert_type.default_message(),
            timestamp=timestamp,
        )
        return replace(job, alerts=job.alerts + (alert,))

    def acknowledge(self, job: Job, alert_id: str) -> Job:
        """
        Mark one alert as acknowledged.

        An unknown id, or an alert that is already acknowledged, returns
        the same job untouched.
        """
        target = job.alert(alert_id)
        if target is None:
            self.logger.debug("Alert not found", job_id=str(job.id), alert_id=alert_id)
            return job
        if target.acknowledged:
            return job

        alerts = tuple(
            alert.acknowledge() if alert.id == alert_id else alert
            for alert in job.alerts
        )
        return replace(job, alerts=alerts)

    def active_alerts(self, job: Job) -> ActiveAlerts:
        return ActiveAlerts(job)

    def breach_alerts(
        self,
        job: Job,
        evaluation: SLAEvaluation,
        now: datetime,
    ) -> List[JobAlert]:
        """
        Build the alerts an SLA sweep should raise for a job.

        One alert per breached window whose milestone is still missing, plus
        OVERDUE when the job has run past its target completion time. Types
        already present on the job are skipped so a sweep can be repeated.
        """
        alerts = []
        for milestone in evaluation.unresolved_breaches:
            alert_type = milestone.alert_type
            if job.has_alert_of_type(alert_type):
                continue
            window = evaluation.window(milestone)
            alerts.append(
                JobAlert(
                    type=alert_type,
                    message=(
                        f"{milestone.value.capitalize()} SLA breached: "
                        f"{window.threshold_minutes} minute window elapsed at "
                        f"{window.deadline.isoformat()}"
                    ),
                    timestamp=now,
                )
            )

        if self.lifecycle_engine.is_overdue(job, now) and not job.has_alert_of_type(
            AlertType.OVERDUE
        ):
            alerts.append(
                JobAlert(
                    type=AlertType.OVERDUE,
                    message=(
                        f"Job {job.job_number or job.id} is past its "
                        f"{job.target_completion_time} minute target completion time"
                    ),
                    timestamp=now,
                )
            )

        return alerts

    def validate_history(self, previous: Job, updated: Job) -> None:
        """
        Check that ``updated`` keeps every alert of ``previous``.

        Existing alerts must appear first and in the same order, unchanged
        apart from ``acknowledged`` going from False to True. New alerts may
        follow.

        Raises:
            AlertHistoryError: history was dropped, reordered or rewritten.
        """
        job_id = str(previous.id)
        if len(updated.alerts) < len(previous.alerts):
            raise AlertHistoryError(job_id, "alerts cannot be removed")

        for before, after in zip(previous.alerts, updated.alerts):
            if not before.same_record(after):
                raise AlertHistoryError(job_id, f"alert {before.id} was modified")
            if before.acknowledged and not after.acknowledged:
                raise AlertHistoryError(
                    job_id, f"alert {before.id} cannot be un-acknowledged"
                )
