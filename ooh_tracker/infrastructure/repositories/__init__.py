"""
In-memory repositories package.
"""

from .customer_repository import InMemoryCustomerRepository
from .engineer_repository import InMemoryEngineerRepository
from .job_repository import InMemoryJobRepository

__all__ = [
    "InMemoryCustomerRepository",
    "InMemoryEngineerRepository",
    "InMemoryJobRepository",
]
