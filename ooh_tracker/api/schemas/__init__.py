"""
API schemas for the out-of-hours job tracker.
"""

from .alert import AlertCreateRequest, SweepResponse, SweptJobResponse
from .common import ErrorResponse
from .directory import CustomerJobsResponse, CustomerResponse, EngineerResponse
from .job import (
    AlertSchema,
    ContactSchema,
    JobCreateRequest,
    JobResponse,
    JobUpdateRequest,
    MilestoneRequest,
    SLAEvaluationResponse,
    SLASchema,
)
from .report import DashboardStatsResponse, JobSummaryResponse, ShiftReportResponse

__all__ = [
    "AlertCreateRequest",
    "AlertSchema",
    "ContactSchema",
    "CustomerJobsResponse",
    "CustomerResponse",
    "DashboardStatsResponse",
    "EngineerResponse",
    "ErrorResponse",
    "JobCreateRequest",
    "JobResponse",
    "JobSummaryResponse",
    "JobUpdateRequest",
    "MilestoneRequest",
    "SLAEvaluationResponse",
    "SLASchema",
    "ShiftReportResponse",
    "SweepResponse",
    "SweptJobResponse",
]
