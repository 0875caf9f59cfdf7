"""Bind an unclaimed directory entry to an authenticated person."""

import logging
from uuid import UUID

from lanyard.domain.attendee import (
    Attendee,
    AttendeeAlreadyClaimedError,
    AttendeeNotFoundError,
    AttendeeRepository,
    claim_eligible,
)

logger = logging.getLogger(__name__)


class ClaimAttendeeCommand:
    """
    Claim an entry under the caller's identity.

    Eligibility is checked against the stored entry first, then the
    repository applies the claim as one conditional update. Of two
    concurrent claims that both pass the check exactly one update matches,
    and the loser gets a conflict, never a silently overwritten owner.
    """

    def __init__(self, attendee_repo: AttendeeRepository) -> None:
        self._attendee_repo = attendee_repo

    async def execute(
        self,
        attendee_id: UUID,
        user_id: UUID,
        name: str,
        email: str,
    ) -> Attendee:
        """
        Claim ``attendee_id`` for ``user_id``.

        Raises
        ------
        AttendeeAlreadyClaimedError
            If the entry is owned, or the caller already owns another entry
        AttendeeNotFoundError
            If the entry is missing or ``name`` does not match it
        """
        owned = await self._attendee_repo.find_by_user_id(user_id)
        if owned is not None and owned.id != attendee_id:
            raise AttendeeAlreadyClaimedError(attendee_id, user_id)

        current = await self._attendee_repo.find_by_id(attendee_id)
        if current is None:
            raise AttendeeNotFoundError(attendee_id)
        if current.is_claimed:
            raise AttendeeAlreadyClaimedError(attendee_id)
        if not claim_eligible(current, name):
            raise AttendeeNotFoundError(attendee_id)

        claimed = await self._attendee_repo.claim(
            attendee_id=attendee_id,
            user_id=user_id,
            name=name.strip(),
            email=email.strip().lower(),
        )
        if claimed is not None:
            logger.info("Attendee %s claimed by user %s", attendee_id, user_id)
            return claimed

        # claimed or removed since the eligibility check
        current = await self._attendee_repo.find_by_id(attendee_id)
        if current is not None and current.is_claimed:
            raise AttendeeAlreadyClaimedError(attendee_id)
        raise AttendeeNotFoundError(attendee_id)
