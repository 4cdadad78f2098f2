"""
Application layer package.

This package contains use cases, services, and interfaces that implement
the business logic of the application.
"""

from .interfaces.repositories import (
    CustomerRepositoryInterface,
    EngineerRepositoryInterface,
    JobRepositoryInterface,
)
from .services.alert_ledger import ActiveAlerts, AlertLedger
from .services.lifecycle_engine import JobLifecycleEngine
from .services.reporting import DashboardStats, JobReporter, JobSummary, ShiftReport

__all__ = [
    # Interfaces
    "CustomerRepositoryInterface",
    "EngineerRepositoryInterface",
    "JobRepositoryInterface",
    # Services
    "ActiveAlerts",
    "AlertLedger",
    "DashboardStats",
    "JobLifecycleEngine",
    "JobReporter",
    "JobSummary",
    "ShiftReport",
]
