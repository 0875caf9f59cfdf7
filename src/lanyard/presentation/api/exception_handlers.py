"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with one envelope, and
exception details are logged but never returned.

Error Response Format:
    {
        "success": false,
        "error": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from lanyard.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lanyard.domain.ratelimit import RateLimitExceededError
from lanyard.domain.shared.exceptions import (
    AuthenticationRequiredError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from lanyard.presentation.api.rate_limiting import rate_limit_headers

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_NAME: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ATTENDEE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_CLAIMED: status.HTTP_409_CONFLICT,
    # 429 Too Many Requests
    ErrorCode.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    # 502 Bad Gateway - external service errors
    ErrorCode.UPSTREAM_SEARCH_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.UPSTREAM_GENERATION_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.NO_CAPABLE_MODEL: status.HTTP_502_BAD_GATEWAY,
    # 500 Internal Server Error
    ErrorCode.UPSTREAM_NOT_CONFIGURED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    extra: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict[str, Any] = {"success": False, "error": message, "code": code}
    if extra:
        content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _format_validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    details = []
    for error in exc.errors():
        # drop the "body" prefix so fields read as the client sent them
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        details.append(
            {
                "field": ".".join(location) or "body",
                "message": str(error.get("msg", "Invalid value")),
            },
        )
    return details


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(RateLimitExceededError)
    async def rate_limit_exception_handler(
        request: Request,
        exc: RateLimitExceededError,
    ) -> JSONResponse:
        """429 with the retry hint in body and headers."""
        logger.info(
            "Rate limited on %s %s (policy=%s)",
            request.method,
            request.url.path,
            exc.decision.policy_name,
        )
        headers = rate_limit_headers(exc.decision)
        headers["Retry-After"] = str(exc.retry_after_seconds)
        return _create_error_response(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            message="Too many requests",
            code=exc.code.value,
            extra={"message": exc.message, "retry_after": exc.retry_after_seconds},
            headers=headers,
        )

    @app.exception_handler(AuthenticationRequiredError)
    async def authentication_exception_handler(
        request: Request,
        exc: AuthenticationRequiredError,
    ) -> JSONResponse:
        logger.info(
            "Unauthenticated request to %s %s",
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=exc.message,
            code=exc.code.value,
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details for debugging while returning
        a safe, user-friendly message to the client.
        """
        status_code = _get_status_for_exception(exc)

        log = logger.error if status_code >= 500 else logger.warning
        log(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed or unexpected input is a 400 with per-field messages."""
        details = _format_validation_errors(exc)
        logger.info(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            details,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Validation failed",
            code=ErrorCode.VALIDATION_ERROR.value,
            extra={"details": details},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
