"""Error Handlers: global exception handlers for the status demo API.

Invariants:
    - StatusDemoError → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Two-layer handler: domain (StatusDemoError), catch-all (Exception)
    - Registered from main.py via register_error_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from status_demo.core.errors import StatusDemoError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_status_demo_error_handler(app)
    _register_generic_error_handler(app)


def _register_status_demo_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(StatusDemoError)
    async def status_demo_error_handler(
        request: Request, exc: StatusDemoError,
    ):
        suffix = f" ({exc.detail})" if exc.detail else ""
        logger.error(
            f"StatusDemoError: {exc.message}{suffix}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "detail": exc.detail,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
