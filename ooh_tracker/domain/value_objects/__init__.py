"""
Domain value objects package.
"""

from .contact import Contact
from .engineer_status import EngineerStatus, EngineerSyncStatus
from .job_classification import JobCategory, JobType, Priority
from .job_status import JobStatus
from .milestone import AlertType, Milestone
from .sla import SLAEvaluation, SLAThresholds, SLAWindow

__all__ = [
    "AlertType",
    "Contact",
    "EngineerStatus",
    "EngineerSyncStatus",
    "JobCategory",
    "JobStatus",
    "JobType",
    "Milestone",
    "Priority",
    "SLAEvaluation",
    "SLAThresholds",
    "SLAWindow",
]
