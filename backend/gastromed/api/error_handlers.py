"""Error Handlers: global exception handlers for the clinic API.

Invariants:
    - ClinicError -> its own status with {"message", "code"}
    - RequestValidationError -> 400 with {"message", "errors": [{field, message, type}]}
    - Exception (catch-all) -> 500 that never leaks internal details
    - Request bodies are never echoed into logs
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gastromed.core.errors import ClinicError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_clinic_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_clinic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ClinicError)
    async def clinic_error_handler(request: Request, exc: ClinicError):
        log = logger.error if exc.severity in (
            ErrorSeverity.ERROR, ErrorSeverity.CRITICAL,
        ) else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "entity": exc.context.entity,
                "entity_id": exc.context.entity_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        errors = _field_errors(exc)
        logger.warning(
            f"Validation error on {request.url.path}: "
            f"{[e['field'] for e in errors]}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request data", "errors": errors},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )


def _field_errors(exc: RequestValidationError) -> list[dict]:
    """One entry per offending field; the input value itself is left out."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
