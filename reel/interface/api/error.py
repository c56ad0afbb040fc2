"""Error responses for the HTTP API.

Every failure leaves the API as ``{"kind": ..., "error": ...}`` so clients
can branch on a stable machine-readable kind and show the message.
"""

from enum import Enum

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from reel.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


class ErrorKind(str, Enum):
    """Machine-readable error categories."""

    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    UNAUTHENTICATED = "unauthenticated"
    VALIDATION_ERROR = "validation_error"
    STORAGE_ERROR = "storage_error"
    INTERNAL_ERROR = "internal_error"


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    kind: ErrorKind
    error: str


_STATUS_KINDS = {
    status.HTTP_400_BAD_REQUEST: ErrorKind.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorKind.UNAUTHENTICATED,
    status.HTTP_403_FORBIDDEN: ErrorKind.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorKind.NOT_FOUND,
    422: ErrorKind.VALIDATION_ERROR,
}


def error_response(status_code: int, kind: ErrorKind, message: str) -> JSONResponse:
    """Build a JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(kind=kind, error=message).model_dump(mode="json"),
    )


def kind_for_status(status_code: int) -> ErrorKind:
    """Pick the error kind for an HTTP status raised by a route."""
    if status_code in _STATUS_KINDS:
        return _STATUS_KINDS[status_code]
    if status_code >= 500:
        return ErrorKind.INTERNAL_ERROR
    return ErrorKind.VALIDATION_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain errors raised by use cases."""
    if isinstance(exc, NotFoundError):
        logfire.warn(
            "Resource not found",
            resource=exc.resource,
            identifier=exc.identifier,
            path=request.url.path,
        )
        return error_response(status.HTTP_404_NOT_FOUND, ErrorKind.NOT_FOUND, str(exc))

    if isinstance(exc, NotAuthorizedError):
        logfire.warn(
            "Unauthorized modification attempt",
            resource=exc.resource,
            resource_id=exc.resource_id,
            user_id=exc.user_id,
            action=exc.action,
        )
        return error_response(
            status.HTTP_403_FORBIDDEN,
            ErrorKind.FORBIDDEN,
            f"Not authorized to {exc.action} this {exc.resource}",
        )

    if isinstance(exc, (ValidationError, BusinessRuleViolationError)):
        logfire.warn("Request rejected", error=str(exc), path=request.url.path)
        return error_response(
            status.HTTP_400_BAD_REQUEST, ErrorKind.VALIDATION_ERROR, str(exc)
        )

    logfire.error("Unhandled domain error", error=str(exc), path=request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorKind.INTERNAL_ERROR, str(exc)
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Reshape HTTPExceptions raised by routes or routing itself."""
    logfire.warn(
        "HTTP error",
        status_code=exc.status_code,
        detail=str(exc.detail),
        path=request.url.path,
    )
    response = error_response(
        exc.status_code, kind_for_status(exc.status_code), str(exc.detail)
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies, paths and queries."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in errors
    )
    logfire.warn("Malformed request", error=message, path=request.url.path)
    return error_response(
        422,
        ErrorKind.VALIDATION_ERROR,
        message or "Invalid request",
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Report malformed identifiers and values rejected by use cases."""
    logfire.warn("Invalid value", error=str(exc), path=request.url.path)
    return error_response(
        status.HTTP_400_BAD_REQUEST, ErrorKind.VALIDATION_ERROR, str(exc)
    )


async def handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Report database failures without leaking SQL."""
    logfire.error(
        "Storage error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorKind.STORAGE_ERROR,
        "Storage operation failed",
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything not handled above."""
    logfire.error(
        "Unexpected error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorKind.INTERNAL_ERROR,
        "Internal server error",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on the application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
