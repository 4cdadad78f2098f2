"""
Job-related API schemas.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, Field

from ooh_tracker.domain.entities.job import Job, JobAlert
from ooh_tracker.domain.value_objects.contact import Contact
from ooh_tracker.domain.value_objects.job_classification import (
    JobCategory,
    JobType,
    Priority,
)
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.milestone import AlertType
from ooh_tracker.domain.value_objects.sla import SLAThresholds


class ContactSchema(BaseModel):
    """Contact or reporter details."""

    name: str = Field("", max_length=255)
    number: str = Field("", max_length=50)
    email: str = Field("", max_length=255)
    relationship: str = Field("", max_length=100)

    def to_value(self) -> Contact:
        return Contact(
            name=self.name,
            number=self.number,
            email=self.email,
            relationship=self.relationship,
        )

    @classmethod
    def from_value(cls, contact: Contact) -> "ContactSchema":
        return cls(**contact.to_dict())


class SLASchema(BaseModel):
    """SLA windows in minutes from the time the job was logged."""

    accept_sla: int = Field(..., gt=0)
    onsite_sla: int = Field(..., gt=0)
    completed_sla: int = Field(..., gt=0)

    def to_value(self) -> SLAThresholds:
        return SLAThresholds(
            accept_sla=self.accept_sla,
            onsite_sla=self.onsite_sla,
            completed_sla=self.completed_sla,
        )


class AlertSchema(BaseModel):
    """Alert as stored on a job."""

    id: str
    type: AlertType
    message: str
    timestamp: datetime
    acknowledged: bool = False

    @classmethod
    def from_entity(cls, alert: JobAlert) -> "AlertSchema":
        return cls(
            id=alert.id,
            type=alert.type,
            message=alert.message,
            timestamp=alert.timestamp,
            acknowledged=alert.acknowledged,
        )

    def to_entity(self) -> JobAlert:
        return JobAlert(
            id=self.id,
            type=self.type,
            message=self.message,
            timestamp=self.timestamp,
            acknowledged=self.acknowledged,
        )


class JobFieldsSchema(BaseModel):
    """Editable job fields shared by create and update requests."""

    customer: str = Field(..., max_length=255)
    site: str = Field(..., max_length=255)
    description: str = Field(..., max_length=2000)
    engineer: str = Field("", max_length=255)
    contact: ContactSchema = Field(default_factory=ContactSchema)
    reporter: ContactSchema = Field(default_factory=ContactSchema)
    job_type: JobType = JobType.OUT_OF_HOURS
    category: JobCategory = JobCategory.GENERAL
    priority: Priority = Priority.MEDIUM
    project: Optional[str] = None
    primary_job_trade: Optional[str] = None
    secondary_job_trades: List[str] = Field(default_factory=list)
    customer_order_number: Optional[str] = None
    reference_number: Optional[str] = None
    job_owner: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    job_ref1: Optional[str] = None
    job_ref2: Optional[str] = None
    requires_approval: bool = False
    preferred_appointment_date: Optional[AwareDatetime] = None
    start_date: Optional[AwareDatetime] = None
    end_date: Optional[AwareDatetime] = None
    lock_visit_date_time: bool = False
    deploy_to_mobile: bool = False
    is_recurring_job: bool = False
    completion_time_from_engineer_onsite: bool = False


class JobCreateRequest(JobFieldsSchema):
    """Job creation request schema (the job wizard form)."""

    target_completion_time: Optional[int] = Field(
        None, gt=0, description="Target completion time in minutes"
    )
    custom_alerts: Optional[SLASchema] = Field(
        None, description="SLA windows; configured defaults apply when omitted"
    )


class JobUpdateRequest(JobFieldsSchema):
    """Full job replacement. Unchanged fields must be sent as they were."""

    job_number: str = ""
    status: JobStatus
    date_logged: AwareDatetime
    date_accepted: Optional[AwareDatetime] = None
    date_on_site: Optional[AwareDatetime] = None
    date_completed: Optional[AwareDatetime] = None
    sla: SLASchema
    target_completion_time: int = Field(..., gt=0)
    reason: Optional[str] = None
    alerts: List[AlertSchema] = Field(default_factory=list)
    customer_id: Optional[int] = None
    engineer_id: Optional[UUID] = None

    def to_entity(self, job_id: UUID) -> Job:
        return Job(
            id=job_id,
            job_number=self.job_number,
            customer=self.customer,
            site=self.site,
            description=self.description,
            engineer=self.engineer,
            contact=self.contact.to_value(),
            reporter=self.reporter.to_value(),
            job_type=self.job_type,
            category=self.category,
            priority=self.priority,
            status=self.status,
            date_logged=self.date_logged,
            date_accepted=self.date_accepted,
            date_on_site=self.date_on_site,
            date_completed=self.date_completed,
            sla=self.sla.to_value(),
            target_completion_time=self.target_completion_time,
            reason=self.reason,
            alerts=tuple(a.to_entity() for a in self.alerts),
            customer_id=self.customer_id,
            engineer_id=self.engineer_id,
            project=self.project,
            primary_job_trade=self.primary_job_trade,
            secondary_job_trades=tuple(self.secondary_job_trades),
            customer_order_number=self.customer_order_number,
            reference_number=self.reference_number,
            job_owner=self.job_owner,
            tags=tuple(self.tags),
            job_ref1=self.job_ref1,
            job_ref2=self.job_ref2,
            requires_approval=self.requires_approval,
            preferred_appointment_date=self.preferred_appointment_date,
            start_date=self.start_date,
            end_date=self.end_date,
            lock_visit_date_time=self.lock_visit_date_time,
            deploy_to_mobile=self.deploy_to_mobile,
            is_recurring_job=self.is_recurring_job,
            completion_time_from_engineer_onsite=self.completion_time_from_engineer_onsite,
        )


class MilestoneRequest(BaseModel):
    """Optional body for milestone endpoints; defaults to the current time."""

    at: Optional[AwareDatetime] = None


class JobResponse(JobFieldsSchema):
    """Job response schema."""

    id: UUID
    job_number: str
    status: JobStatus
    status_label: str
    date_logged: datetime
    date_accepted: Optional[datetime] = None
    date_on_site: Optional[datetime] = None
    date_completed: Optional[datetime] = None
    preferred_appointment_date: Optional[datetime] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    sla: SLASchema
    target_completion_time: int
    reason: Optional[str] = None
    alerts: List[AlertSchema] = Field(default_factory=list)
    customer_id: Optional[int] = None
    engineer_id: Optional[UUID] = None

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponse":
        return cls(
            id=job.id,
            job_number=job.job_number,
            customer=job.customer,
            site=job.site,
            description=job.description,
            engineer=job.engineer,
            contact=ContactSchema.from_value(job.contact),
            reporter=ContactSchema.from_value(job.reporter),
            job_type=job.job_type,
            category=job.category,
            priority=job.priority,
            status=job.status,
            status_label=job.status.display_name,
            date_logged=job.date_logged,
            date_accepted=job.date_accepted,
            date_on_site=job.date_on_site,
            date_completed=job.date_completed,
            sla=SLASchema(**job.sla.to_dict()),
            target_completion_time=job.target_completion_time,
            reason=job.reason,
            alerts=[AlertSchema.from_entity(a) for a in job.alerts],
            customer_id=job.customer_id,
            engineer_id=job.engineer_id,
            project=job.project,
            primary_job_trade=job.primary_job_trade,
            secondary_job_trades=list(job.secondary_job_trades),
            customer_order_number=job.customer_order_number,
            reference_number=job.reference_number,
            job_owner=job.job_owner,
            tags=list(job.tags),
            job_ref1=job.job_ref1,
            job_ref2=job.job_ref2,
            requires_approval=job.requires_approval,
            preferred_appointment_date=job.preferred_appointment_date,
            start_date=job.start_date,
            end_date=job.end_date,
            lock_visit_date_time=job.lock_visit_date_time,
            deploy_to_mobile=job.deploy_to_mobile,
            is_recurring_job=job.is_recurring_job,
            completion_time_from_engineer_onsite=job.completion_time_from_engineer_onsite,
        )


class SLAWindowResponse(BaseModel):
    """One SLA window of an evaluation."""

    milestone: str
    threshold_minutes: int
    deadline: datetime
    elapsed_minutes: float
    breached: bool
    met_at: Optional[datetime] = None


class SLAEvaluationResponse(BaseModel):
    """SLA evaluation of a job at ``evaluated_at``."""

    job_id: UUID
    evaluated_at: datetime
    windows: List[SLAWindowResponse]
    breached_milestones: List[str]
    any_breached: bool
    stored_status: JobStatus
    derived_status: JobStatus
    overdue: bool
