"""Job domain entity."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Tuple
from uuid import UUID, uuid4

from ooh_tracker.domain.exceptions.validation_error import (
    RequiredFieldError,
    ValidationError,
)
from ooh_tracker.domain.value_objects.contact import Contact
from ooh_tracker.domain.value_objects.job_classification import (
    JobCategory,
    JobType,
    Priority,
)
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.milestone import AlertType, Milestone
from ooh_tracker.domain.value_objects.sla import SLAThresholds


@dataclass(frozen=True)
class JobAlert:
    """Alert recorded against a job. Only ``acknowledged`` may ever change."""

    type: AlertType
    message: str
    timestamp: datetime
    id: str = field(default_factory=lambda: str(uuid4()))
    acknowledged: bool = False

    def acknowledge(self) -> "JobAlert":
        """Return the acknowledged form of this alert."""
        if self.acknowledged:
            return self
        return replace(self, acknowledged=True)

    def same_record(self, other: "JobAlert") -> bool:
        """Check if ``other`` is this alert, ignoring the acknowledged flag."""
        return (
            self.id == other.id
            and self.type == other.type
            and self.message == other.message
            and self.timestamp == other.timestamp
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "acknowledged": self.acknowledged,
        }


@dataclass(frozen=True)
class Job:
    """Job domain entity.

    Jobs are immutable values: lifecycle transitions and alert changes
    produce a new Job through ``dataclasses.replace``.
    """

    customer: str
    site: str
    description: str
    date_logged: datetime
    sla: SLAThresholds
    job_number: str = ""
    engineer: str = ""
    contact: Contact = field(default_factory=Contact)
    reporter: Contact = field(default_factory=Contact)
    job_type: JobType = JobType.OUT_OF_HOURS
    category: JobCategory = JobCategory.GENERAL
    priority: Priority = Priority.MEDIUM
    status: JobStatus = JobStatus.AMBER
    target_completion_time: int = 240  # minutes
    reason: Optional[str] = None
    id: UUID = field(default_factory=uuid4)

    # Milestones
    date_accepted: Optional[datetime] = None
    date_on_site: Optional[datetime] = None
    date_completed: Optional[datetime] = None

    alerts: Tuple[JobAlert, ...] = ()

    # Directory references resolved when the job was logged
    customer_id: Optional[int] = None
    engineer_id: Optional[UUID] = None

    # Job log metadata
    project: Optional[str] = None
    primary_job_trade: Optional[str] = None
    secondary_job_trades: Tuple[str, ...] = ()
    customer_order_number: Optional[str] = None
    reference_number: Optional[str] = None
    job_owner: Optional[str] = None
    tags: Tuple[str, ...] = ()
    job_ref1: Optional[str] = None
    job_ref2: Optional[str] = None
    requires_approval: bool = False
    preferred_appointment_date: Optional[datetime] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    lock_visit_date_time: bool = False
    deploy_to_mobile: bool = False
    is_recurring_job: bool = False
    completion_time_from_engineer_onsite: bool = False

    def __post_init__(self):
        """Validate job data."""
        if not self.customer or not self.customer.strip():
            raise RequiredFieldError("customer")
        if not self.site or not self.site.strip():
            raise RequiredFieldError("site")
        if not self.description or not self.description.strip():
            raise RequiredFieldError("description")
        if self.date_logged is None:
            raise RequiredFieldError("date_logged")

        # Accept any iterable from callers, store tuples
        object.__setattr__(self, "alerts", tuple(self.alerts))
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "secondary_job_trades", tuple(self.secondary_job_trades))

        self._validate_alert_ids()
        self._validate_milestone_order()

    def _validate_alert_ids(self) -> None:
        seen = set()
        for job_alert in self.alerts:
            if job_alert.id in seen:
                raise ValidationError(f"Duplicate alert id '{job_alert.id}'")
            seen.add(job_alert.id)

    def _validate_milestone_order(self) -> None:
        previous_name = "logged"
        previous_at = self.date_logged
        for milestone in Milestone.ordered():
            at = self.milestone_time(milestone)
            if at is None:
                previous_name, previous_at = milestone.value, None
                continue
            if previous_at is None:
                raise ValidationError(
                    f"Milestone '{milestone.value}' is set but '{previous_name}' is not"
                )
            if at < previous_at:
                raise ValidationError(
                    f"Milestone '{milestone.value}' ({at.isoformat()}) precedes "
                    f"'{previous_name}' ({previous_at.isoformat()})"
                )
            previous_name, previous_at = milestone.value, at

    def milestone_time(self, milestone: Milestone) -> Optional[datetime]:
        """Get the recorded timestamp for a milestone."""
        return getattr(self, milestone.timestamp_field)

    @property
    def is_completed(self) -> bool:
        return self.date_completed is not None

    @property
    def next_milestone(self) -> Optional[Milestone]:
        """First milestone not yet recorded."""
        for milestone in Milestone.ordered():
            if self.milestone_time(milestone) is None:
                return milestone
        return None

    def alert(self, alert_id: str) -> Optional[JobAlert]:
        """Find an alert by id."""
        for job_alert in self.alerts:
            if job_alert.id == alert_id:
                return job_alert
        return None

    def has_alert_of_type(self, alert_type: AlertType) -> bool:
        return any(a.type == alert_type for a in self.alerts)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def to_dict(self) -> dict:
        """Convert job to dictionary."""

        def iso(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value else None

        return {
            "id": str(self.id),
            "job_number": self.job_number,
            "customer": self.customer,
            "site": self.site,
            "engineer": self.engineer,
            "status": self.status.value,
            "priority": self.priority.value,
            "date_logged": iso(self.date_logged),
            "date_accepted": iso(self.date_accepted),
            "date_on_site": iso(self.date_on_site),
            "date_completed": iso(self.date_completed),
            "sla": self.sla.to_dict(),
            "alerts": [a.to_dict() for a in self.alerts],
        }
