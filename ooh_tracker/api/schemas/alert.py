"""
Alert API schemas.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ooh_tracker.domain.value_objects.milestone import AlertType

from .job import AlertSchema


class AlertCreateRequest(BaseModel):
    """Manually raise an alert against a job."""

    type: AlertType
    message: Optional[str] = Field(None, max_length=1000)


class SweptJobResponse(BaseModel):
    """Alerts a sweep raised against one job."""

    job_id: UUID
    job_number: str
    alerts: List[AlertSchema]


class SweepResponse(BaseModel):
    """Outcome of an SLA sweep."""

    jobs_alerted: int
    alerts_raised: int
    results: List[SweptJobResponse]
