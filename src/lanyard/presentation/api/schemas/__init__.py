"""API request and response schemas."""

from lanyard.presentation.api.schemas.common import HealthResponse
from lanyard.presentation.api.schemas.enrichment import (
    EnrichmentData,
    EnrichProfileRequest,
    EnrichProfileResponse,
)
from lanyard.presentation.api.schemas.onboarding import (
    AttendeeResponse,
    ClaimRequest,
    ClaimResponse,
    LookupRequest,
    LookupResponse,
)
from lanyard.presentation.api.schemas.profiles import LookupLinkedinRequest

__all__ = [
    "AttendeeResponse",
    "ClaimRequest",
    "ClaimResponse",
    "EnrichProfileRequest",
    "EnrichProfileResponse",
    "EnrichmentData",
    "HealthResponse",
    "LookupLinkedinRequest",
    "LookupRequest",
    "LookupResponse",
]
