"""
Use cases package.

This package contains the business logic use cases that orchestrate
the application services and repositories.
"""

from .create_job import CreateJobRequest, CreateJobUseCase
from .evaluate_sla import EvaluateJobSLAUseCase, JobSLAReport
from .generate_shift_report import GenerateShiftReportUseCase, GetDashboardStatsUseCase
from .manage_alerts import AcknowledgeAlertUseCase, RaiseAlertUseCase
from .record_milestone import RecordMilestoneUseCase
from .sweep_sla_alerts import SweepResult, SweepSLAAlertsUseCase
from .update_job import UpdateJobUseCase

__all__ = [
    "AcknowledgeAlertUseCase",
    "CreateJobRequest",
    "CreateJobUseCase",
    "EvaluateJobSLAUseCase",
    "GenerateShiftReportUseCase",
    "GetDashboardStatsUseCase",
    "JobSLAReport",
    "RaiseAlertUseCase",
    "RecordMilestoneUseCase",
    "SweepResult",
    "SweepSLAAlertsUseCase",
    "UpdateJobUseCase",
]
