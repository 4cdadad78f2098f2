"""
Application services package.
"""

from .alert_ledger import ActiveAlerts, AlertLedger
from .lifecycle_engine import JobLifecycleEngine
from .reporting import DashboardStats, JobReporter, JobSummary, ShiftReport

__all__ = [
    "ActiveAlerts",
    "AlertLedger",
    "DashboardStats",
    "JobLifecycleEngine",
    "JobReporter",
    "JobSummary",
    "ShiftReport",
]
