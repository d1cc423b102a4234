"""Error Handlers — global exception handlers for the TickTask API.

Invariants:
    - TickTaskError → structured JSON with status, code, message, severity
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - Every error body carries a top-level "message"

Design Decisions:
    - Three-layer handler: domain (TickTaskError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so tests can build an app with the same handlers
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from ticktask.core.errors import TickTaskError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_ticktask_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_ticktask_error_handler(app: FastAPI) -> None:
    """Register TickTask domain/infrastructure error handler."""

    @app.exception_handler(TickTaskError)
    async def ticktask_error_handler(request: Request, exc: TickTaskError):
        """Handle all TickTask domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "task_id": exc.context.task_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    details = [
        {
            "field": ".".join(
                str(loc) for loc in e["loc"] if loc not in ("body", "query", "path")
            ),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    summary = "; ".join(
        f"{d['field']}: {d['message']}" if d["field"] else d["message"]
        for d in details
    )
    return {
        "status": status.HTTP_400_BAD_REQUEST,
        "code": "VALIDATION_ERROR",
        "message": f"Invalid request data: {summary}" if summary else "Invalid request data",
        "category": ErrorCategory.VALIDATION.value,
        "severity": ErrorSeverity.WARNING.value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "details": details,
    }
