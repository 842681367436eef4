"""Exception handlers mapping domain errors to HTTP responses.

Every error body has the same shape: ``title``, ``timestamp``, ``status``,
``exception`` and ``details``.
"""

from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from credit_system.exceptions import (
    BusinessError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from credit_system.logging import get_logger
from credit_system.validation import REQUEST_LOCATIONS, violations_from_errors

logger = get_logger(__name__)

BAD_REQUEST_TITLE = "Bad Request! Consult the documentation"
NOT_FOUND_TITLE = "Not Found! Consult the documentation"
CONFLICT_TITLE = "Conflict! Consult the documentation"


def error_body(title: str, status_code: int, exc: Exception, details: dict[str, str]) -> dict:
    return {
        "title": title,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "exception": type(exc).__name__,
        "details": details,
    }


def _client_error(
    request: Request, exc: Exception, title: str, status_code: int, details: dict[str, str]
) -> JSONResponse:
    logger.warning(
        "%s %s rejected: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        extra={"extra": {"path": request.url.path, "status": status_code, "details": details}},
    )
    return JSONResponse(
        status_code=status_code,
        content=error_body(title, status_code, exc, details),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Report every violated field of a request body."""
    return _client_error(
        request, exc, BAD_REQUEST_TITLE, status.HTTP_400_BAD_REQUEST, exc.as_details()
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable bodies, paths and query parameters as bad requests."""
    violations = violations_from_errors(exc.errors(), skip=REQUEST_LOCATIONS)
    details = {v.field: v.message for v in violations}
    return _client_error(request, exc, BAD_REQUEST_TITLE, status.HTTP_400_BAD_REQUEST, details)


async def business_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return _client_error(
        request, exc, BAD_REQUEST_TITLE, status.HTTP_400_BAD_REQUEST, {"cause": str(exc)}
    )


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return _client_error(
        request, exc, NOT_FOUND_TITLE, status.HTTP_404_NOT_FOUND, {"cause": str(exc)}
    )


async def conflict_handler(request: Request, exc: Exception) -> JSONResponse:
    return _client_error(
        request, exc, CONFLICT_TITLE, status.HTTP_409_CONFLICT, {"cause": str(exc)}
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
        extra={"extra": {"path": request.url.path, "status": 500}},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            "Internal server error",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            exc,
            {"cause": "Unexpected error"},
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(BusinessError, business_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(Exception, global_exception_handler)
