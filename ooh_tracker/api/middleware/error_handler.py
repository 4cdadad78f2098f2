"""
Error handling middleware.
"""

import traceback

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.exceptions.lifecycle_error import LifecycleError
from ooh_tracker.domain.exceptions.not_found_error import NotFoundError
from ooh_tracker.domain.exceptions.validation_error import ValidationError
from ooh_tracker.infrastructure.monitoring.metrics import record_error

logger = get_logger(__name__)


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=400,
            content={
                "error": "Validation Error",
                "message": str(exc),
                "type": "validation_error",
            },
        )

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        logger.info("Resource not found", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=404,
            content={
                "error": f"{exc.resource_type} Not Found",
                "message": str(exc),
                "type": "not_found",
            },
        )

    @app.exception_handler(LifecycleError)
    async def lifecycle_error_handler(request: Request, exc: LifecycleError):
        logger.warning(
            "Lifecycle error",
            error=str(exc),
            milestone=exc.milestone,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=409,
            content={
                "error": "Lifecycle Error",
                "message": str(exc),
                "type": "lifecycle_error",
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "HTTP Error",
                "message": exc.detail,
                "type": "http_error",
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        record_error(type(exc).__name__, "api")
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "message": "An unexpected error occurred",
                "type": "internal_error",
            },
        )
