"""
Domain exceptions package.
"""

from .lifecycle_error import (
    AlreadyRecordedError,
    LifecycleError,
    OutOfOrderTransitionError,
)
from .not_found_error import JobNotFoundError, NotFoundError
from .validation_error import (
    AlertHistoryError,
    RequiredFieldError,
    ValidationError,
)

__all__ = [
    "AlertHistoryError",
    "AlreadyRecordedError",
    "JobNotFoundError",
    "LifecycleError",
    "NotFoundError",
    "OutOfOrderTransitionError",
    "RequiredFieldError",
    "ValidationError",
]
