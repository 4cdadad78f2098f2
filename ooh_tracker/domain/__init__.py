"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "Customer",
    "Engineer",
    "Job",
    "JobAlert",

    # Exceptions
    "AlertHistoryError",
    "AlreadyRecordedError",
    "JobNotFoundError",
    "LifecycleError",
    "NotFoundError",
    "OutOfOrderTransitionError",
    "RequiredFieldError",
    "ValidationError",

    # Value Objects
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
