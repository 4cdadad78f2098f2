"""
Lookup-related domain exceptions.
"""

from typing import Any


class NotFoundError(Exception):
    """Base exception for lookups that must resolve to an entity."""

    def __init__(self, resource_type: str, key: Any):
        self.resource_type = resource_type
        self.key = key
        super().__init__(f"{resource_type} '{key}' not found")


class JobNotFoundError(NotFoundError):
    """Raised when a job id does not match any stored job."""

    def __init__(self, job_id: Any):
        super().__init__("Job", job_id)
