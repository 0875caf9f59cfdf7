"""Enrichment domain exceptions.

Provider errors (``SearchProviderError``, ``GenerationProviderError``) are
raised by outbound adapters and never reach API clients directly; the
application layer absorbs them or converts them into the ``Upstream*``
domain exceptions, which carry only a safe message.
"""

from typing import Optional

from lanyard.domain.shared.exceptions import (
    ErrorCode,
    UpstreamError,
    ValidationError,
)


class MissingNameError(ValidationError):
    """Raised when an enrichment or lookup request has no usable name."""

    def __init__(self) -> None:
        super().__init__("Name is required", code=ErrorCode.MISSING_NAME)


class UpstreamGenerationError(UpstreamError):
    """Raised when the generation call cannot be completed on any model."""

    def __init__(self, model: str, reason: str) -> None:
        super().__init__(
            message="Profile summary generation is temporarily unavailable",
            code=ErrorCode.UPSTREAM_GENERATION_FAILED,
            details={"model": model, "reason": reason},
        )


class UpstreamSearchError(UpstreamError):
    """Raised when a search-only operation cannot reach the search service."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message="Profile search is temporarily unavailable",
            code=ErrorCode.UPSTREAM_SEARCH_FAILED,
            details={"reason": reason},
        )


class NoCapableModelFoundError(UpstreamError):
    """Raised when the provider exposes no model supporting generation."""

    def __init__(self, available: list[str]) -> None:
        super().__init__(
            message="No text generation model is available",
            code=ErrorCode.NO_CAPABLE_MODEL,
            details={"models": available},
        )
        self.available = available


class SearchProviderError(Exception):
    """Raised by a web search adapter when a search cannot be completed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GenerationProviderError(Exception):
    """Raised by a text generation adapter for any failed call."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
