"""
FastAPI application factory.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ooh_tracker.api.dependencies import (
    get_customer_repository,
    get_engineer_repository,
    get_job_repository,
    get_now,
)
from ooh_tracker.api.middleware.error_handler import ErrorHandlerMiddleware
from ooh_tracker.api.middleware.logging import LoggingMiddleware
from ooh_tracker.api.routes import alerts, customers, engineers, health, jobs, reports
from ooh_tracker.config.logging import get_logger
from ooh_tracker.config.settings import settings
from ooh_tracker.infrastructure.seed_data import seed_repositories

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Out-of-hours job tracking: SLAs, alerts and shift reports",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if settings.DEBUG else None,
        docs_url=f"{settings.API_PREFIX}/docs" if settings.DEBUG else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if settings.DEBUG else None,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    ErrorHandlerMiddleware(app)
    LoggingMiddleware(app)

    # Add routes
    app.include_router(health.router, prefix=settings.API_PREFIX, tags=["health"])
    app.include_router(jobs.router, prefix=settings.API_PREFIX, tags=["jobs"])
    app.include_router(alerts.router, prefix=settings.API_PREFIX, tags=["alerts"])
    app.include_router(customers.router, prefix=settings.API_PREFIX, tags=["customers"])
    app.include_router(engineers.router, prefix=settings.API_PREFIX, tags=["engineers"])
    app.include_router(reports.router, prefix=settings.API_PREFIX, tags=["reports"])

    @app.on_event("startup")
    async def startup_event():
        logger.info("Application startup", environment=settings.ENVIRONMENT)

        if settings.SEED_DEMO_DATA:
            await seed_repositories(
                get_job_repository(),
                get_customer_repository(),
                get_engineer_repository(),
                now=get_now(),
            )

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Application shutdown")

    return app
