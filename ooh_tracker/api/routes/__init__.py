"""
API routes package.
"""

from .alerts import router as alerts_router
from .customers import router as customers_router
from .engineers import router as engineers_router
from .health import router as health_router
from .jobs import router as jobs_router
from .reports import router as reports_router

__all__ = [
    "alerts_router",
    "customers_router",
    "engineers_router",
    "health_router",
    "jobs_router",
    "reports_router",
]
