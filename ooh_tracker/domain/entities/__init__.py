"""
Domain entities package.
"""

from .customer import Customer
from .engineer import Engineer
from .job import Job, JobAlert

__all__ = [
    "Customer",
    "Engineer",
    "Job",
    "JobAlert",
]
