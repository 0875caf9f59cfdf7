"""Onboarding router: find and claim a pre-seeded directory entry."""

import logging

from fastapi import APIRouter

from lanyard.application.commands import ClaimAttendeeCommand
from lanyard.application.queries import LookupAttendeeQuery
from lanyard.presentation.api.dependencies import (
    AttendeeRepo,
    CurrentIdentity,
    DBSession,
)
from lanyard.presentation.api.rate_limiting import rate_limit
from lanyard.presentation.api.schemas import (
    AttendeeResponse,
    ClaimRequest,
    ClaimResponse,
    LookupRequest,
    LookupResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/lookup",
    response_model=LookupResponse,
    response_model_exclude_none=True,
    dependencies=[rate_limit("lookup")],
    summary="Find an unclaimed directory entry by name",
)
async def lookup_attendee(
    request: LookupRequest,
    attendee_repo: AttendeeRepo,
) -> LookupResponse:
    """
    Exact case-insensitive match first, then a loose first-name prefix match.

    Only unclaimed entries are considered; ``found: false`` is a normal
    response, not an error.
    """
    query = LookupAttendeeQuery(attendee_repo)
    result = await query.execute(request.name)
    return LookupResponse(found=result.found, attendee_id=result.attendee_id)


@router.post(
    "/claim",
    response_model=ClaimResponse,
    dependencies=[rate_limit("strict")],
    summary="Claim a directory entry for the signed-in user",
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Profile not available"},
        409: {"description": "Profile already claimed"},
    },
)
async def claim_attendee(
    request: ClaimRequest,
    identity: CurrentIdentity,
    attendee_repo: AttendeeRepo,
    session: DBSession,
) -> ClaimResponse:
    """
    Bind the entry to the caller if it is unclaimed and the name matches.

    Two concurrent claims for one entry never both succeed; the loser gets
    409.
    """
    command = ClaimAttendeeCommand(attendee_repo)
    attendee = await command.execute(
        attendee_id=request.attendee_id,
        user_id=identity.user_id,
        name=request.name,
        email=str(request.email),
    )
    await session.commit()

    return ClaimResponse(data=AttendeeResponse.from_domain(attendee))
