"""
API package.
"""

from .app import create_app
from .dependencies import *
from .middleware import *
from .routes import *
from .schemas import *

__all__ = [
    "create_app",

    # Dependencies
    "AlertLedgerDep",
    "CustomerRepositoryDep",
    "EngineerRepositoryDep",
    "JobReporterDep",
    "JobRepositoryDep",
    "LifecycleEngineDep",
    "NowDep",

    # Middleware
    "ErrorHandlerMiddleware",
    "LoggingMiddleware",

    # Routes
    "alerts_router",
    "customers_router",
    "engineers_router",
    "health_router",
    "jobs_router",
    "reports_router",

    # Schemas
    "AlertCreateRequest",
    "ErrorResponse",
    "JobCreateRequest",
    "JobResponse",
    "JobUpdateRequest",
    "ShiftReportResponse",
]
