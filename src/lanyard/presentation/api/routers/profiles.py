"""External profile lookup router."""

from typing import Any

from fastapi import APIRouter

from lanyard.presentation.api.dependencies import (
    CurrentIdentity,
    ProfileLookupService,
)
from lanyard.presentation.api.rate_limiting import rate_limit
from lanyard.presentation.api.schemas import LookupLinkedinRequest

router = APIRouter()


@router.post(
    "/lookup-linkedin",
    dependencies=[rate_limit("lookup")],
    summary="Find the most likely LinkedIn profile for a person",
)
async def lookup_linkedin(
    request: LookupLinkedinRequest,
    identity: CurrentIdentity,
    service: ProfileLookupService,
) -> dict[str, Any]:
    """
    Score personal profile pages from a restricted search.

    When nothing qualifies ``linkedin_url`` is null and ``message`` explains.
    """
    result = await service.lookup(request.name, request.job_title, request.company)
    return {"success": True, "data": result.to_dict()}
