"""
Exception handlers.

Translates module exceptions into the standard error envelope:
    {"error": "<CODE>", "message": "...", "details": {...}}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    PlatewiseError,
    ConfigurationError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    ExternalServiceError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; first matching base class wins
_STATUS_BY_ERROR: list[tuple[type[PlatewiseError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ExternalServiceError, status.HTTP_502_BAD_GATEWAY),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]

# Session failures share one body so clients cannot tell missing from invalid
_UNAUTHORIZED_BODY = ErrorResponse(error="UNAUTHORIZED", message="Invalid or expired token")

# Login failures are already uniform; keep their message
_LOGIN_ERROR_CODE = "INVALID_LOGIN"


def status_for(error: PlatewiseError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def platewise_error_handler(request: Request, exc: PlatewiseError) -> JSONResponse:
    status_code = status_for(exc)

    if isinstance(exc, AuthenticationError):
        body = _UNAUTHORIZED_BODY
        if exc.code == _LOGIN_ERROR_CODE:
            body = ErrorResponse(error="UNAUTHORIZED", message=exc.message)
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(exclude_none=True),
            headers={"WWW-Authenticate": "Bearer"},
        )

    if isinstance(exc, ConfigurationError):
        logger.error(f"Configuration error on {request.url.path}: {exc.message}")
        body = ErrorResponse(error=exc.code, message="Server is not configured")
    elif status_code >= 500 and not isinstance(exc, ExternalServiceError):
        logger.exception(f"Unhandled error on {request.url.path}", exc_info=exc)
        body = ErrorResponse(error=exc.code, message=exc.message)
    else:
        body = ErrorResponse(error=exc.code, message=exc.message, details=exc.details or None)

    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Store and library failures still answer with the envelope."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    body = ErrorResponse(error="INTERNAL_ERROR", message="Internal server error")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(exclude_none=True),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed payloads are rejected before any store or model call."""
    errors = exc.errors()
    fields = [".".join(str(p) for p in e.get("loc", ()) if p != "body") for e in errors]
    body = ErrorResponse(
        error="VALIDATION_ERROR",
        message=f"Invalid request: {', '.join(f for f in fields if f) or 'body'}",
        details={"errors": [{"field": f, "message": e.get("msg", "")} for f, e in zip(fields, errors)]},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to an app."""
    app.add_exception_handler(PlatewiseError, platewise_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
