"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ooh_tracker.domain.entities.customer import Customer
from ooh_tracker.domain.entities.engineer import Engineer
from ooh_tracker.domain.entities.job import Job


class JobRepositoryInterface(ABC):
    """Job repository interface.

    The repository owns the job collection; it is the only place a stored
    job can be replaced.
    """

    @abstractmethod
    async def add(self, job: Job) -> Job:
        """Store a newly logged job."""
        pass

    @abstractmethod
    async def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID."""
        pass

    @abstractmethod
    async def get_by_job_number(self, job_number: str) -> Optional[Job]:
        """Get job by its human-readable job number."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Job]:
        """List every job, newest first."""
        pass

    @abstractmethod
    async def list_by_customer(self, customer: str) -> List[Job]:
        """List jobs for a customer name (exact match)."""
        pass

    @abstractmethod
    async def update(self, job: Job) -> Optional[Job]:
        """Replace the stored job with the same ID. Returns None if absent."""
        pass

    @abstractmethod
    async def next_job_number(self) -> str:
        """Reserve the next display job number."""
        pass


class CustomerRepositoryInterface(ABC):
    """Customer repository interface."""

    @abstractmethod
    async def add(self, customer: Customer) -> Customer:
        """Register a customer."""
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID."""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Customer]:
        """Get customer by exact, case-sensitive name."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Customer]:
        """List all customers."""
        pass


class EngineerRepositoryInterface(ABC):
    """Engineer repository interface."""

    @abstractmethod
    async def add(self, engineer: Engineer) -> Engineer:
        """Register an engineer."""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Engineer]:
        """Get engineer by exact, case-sensitive name."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Engineer]:
        """List all engineers."""
        pass
