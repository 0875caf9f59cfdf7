"""Shared domain building blocks."""

from lanyard.domain.shared.exceptions import (
    AuthenticationRequiredError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    UpstreamConfigurationError,
    UpstreamError,
    ValidationError,
)
from lanyard.domain.shared.time import Clock, ensure_tz_aware, utc_now

__all__ = [
    "AuthenticationRequiredError",
    "Clock",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "UpstreamConfigurationError",
    "UpstreamError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
