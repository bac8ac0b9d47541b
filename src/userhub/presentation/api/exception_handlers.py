"""Centralized exception handlers for the FastAPI application.

Domain, auth, HTTP and request-validation exceptions are all rendered in
the response envelope used by successful responses.

Error Response Format:
    {
        "success": false,
        "message": "Human-readable error message",
        "errors": {"field": ["message", ...]}    # optional
    }

Usage:
    from userhub.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app, debug=settings.api_debug)
"""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userhub.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConcurrencyError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from userhub.presentation.api.schemas.common import ErrorResponse
from userhub_auth import AuthError, InvalidTokenError, WeakPasswordError

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"
REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 422 Unprocessable Entity - malformed values
    ErrorCode.VALIDATION_ERROR: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_EMAIL: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_USER_NAME: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_USER_ID: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_PAGINATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    # 400 Bad Request - invalid argument
    ErrorCode.EMAIL_ALREADY_TAKEN: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.CONCURRENCY_CONFLICT: status.HTTP_409_CONFLICT,
    # 502 Bad Gateway - upstream provider failed
    ErrorCode.PAYMENT_GATEWAY_ERROR: status.HTTP_502_BAD_GATEWAY,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ConflictError, ConcurrencyError)):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, (ValidationError, BusinessRuleViolation)):
        return status.HTTP_422_UNPROCESSABLE_ENTITY

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    errors: dict[str, list[str]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    body = ErrorResponse(success=False, message=message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _field_of(loc: tuple[Any, ...]) -> str:
    """Turn a pydantic error location into a dotted field name."""
    parts = list(loc)
    if parts and parts[0] in REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(str(p) for p in parts) or str(loc[0] if loc else "request")


def _collect_validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_of(tuple(error.get("loc", ()))), []).append(
            error.get("msg", "Invalid value"),
        )
    return errors


def setup_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    debug
        Include exception type and traceback in 500 responses
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        field = exc.details.get("field")
        errors = {field: [exc.message]} if field else None
        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            errors=errors,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle token and password-strength errors from userhub_auth."""
        logger.warning(
            "Auth error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )

        if isinstance(exc, WeakPasswordError):
            return _create_error_response(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                message=exc.message,
                errors={"password": [exc.message]},
            )

        headers = (
            {"WWW-Authenticate": "Bearer"}
            if isinstance(exc, InvalidTokenError)
            else None
        )
        return _create_error_response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=exc.message,
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Render request validation failures as field-keyed messages."""
        errors = _collect_validation_errors(exc)
        logger.info(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            errors,
        )
        return _create_error_response(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            message=VALIDATION_FAILED_MESSAGE,
            errors=errors,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Wrap framework HTTP errors (401, 404 route misses, 405) in the envelope."""
        return _create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        Internals are only exposed when the API runs in debug mode.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )

        errors = None
        if debug:
            errors = {
                "exception": [f"{type(exc).__name__}: {exc}"],
                "trace": traceback.format_exception(type(exc), exc, exc.__traceback__),
            }
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            errors=errors,
        )
