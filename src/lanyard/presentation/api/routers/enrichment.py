"""Profile enrichment router."""

import logging

from fastapi import APIRouter

from lanyard.presentation.api.dependencies import EnrichmentService
from lanyard.presentation.api.rate_limiting import rate_limit
from lanyard.presentation.api.schemas import (
    EnrichmentData,
    EnrichProfileRequest,
    EnrichProfileResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/enrich-profile",
    response_model=EnrichProfileResponse,
    response_model_exclude_none=True,
    dependencies=[rate_limit("expensive")],
    summary="Generate a networking summary and tags",
    responses={
        400: {"description": "Missing or invalid input"},
        429: {"description": "Rate limit exceeded"},
        502: {"description": "Text generation unavailable"},
    },
)
async def enrich_profile(
    request: EnrichProfileRequest,
    service: EnrichmentService,
) -> EnrichProfileResponse:
    """
    Search the web for the person and summarise them for networking.

    Web search is best effort: when it fails the summary is built from the
    submitted fields alone and ``search_error`` says why. The response always
    has exactly three summary bullets and one to three industry tags.
    """
    outcome = await service.enrich(request.to_domain())

    logger.info(
        "Enrichment done (model=%s, recovered_by=%s, search_degraded=%s)",
        outcome.model_used,
        outcome.recovered_by.value,
        outcome.search_degraded,
    )
    return EnrichProfileResponse(data=EnrichmentData.from_outcome(outcome))
