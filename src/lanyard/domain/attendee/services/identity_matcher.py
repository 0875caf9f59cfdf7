"""Resolves a newly authenticating person to an unclaimed directory entry."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from lanyard.domain.attendee.entities import Attendee
from lanyard.domain.attendee.repositories import AttendeeRepository

logger = logging.getLogger(__name__)

FUZZY_CANDIDATE_LIMIT = 10
FUZZY_PREFIX_LENGTH = 2
_LIKE_SPECIAL = ("\\", "%", "_")


@dataclass(frozen=True)
class LookupResult:
    found: bool
    attendee_id: Optional[UUID] = None

    @classmethod
    def not_found(cls) -> "LookupResult":
        return cls(found=False)


def escape_like_pattern(value: str) -> str:
    """Escape LIKE metacharacters so they match literally (escape char ``\\``)."""
    for char in _LIKE_SPECIAL:
        value = value.replace(char, f"\\{char}")
    return value


def split_name(name: str) -> list[str]:
    return name.strip().split()


def _fuzzy_query_parts(name: str) -> Optional[tuple[str, str]]:
    parts = split_name(name)
    if len(parts) < 2:
        return None
    first, last = parts[0].lower(), parts[-1].lower()
    if len(first) < FUZZY_PREFIX_LENGTH:
        return None
    return first, last


def is_fuzzy_match(query_name: str, candidate_name: str) -> bool:
    """
    Same last name and the same first two letters of the first name.

    "Rob Smith" matches "Robert Smith". So does "Alan Park" for "Alex Park";
    the rule is deliberately loose and the claim step re-checks the name.
    """
    query = _fuzzy_query_parts(query_name)
    if query is None:
        return False
    first, last = query

    candidate = split_name(candidate_name)
    if len(candidate) < 2:
        return False
    candidate_first = candidate[0].lower()
    if candidate[-1].lower() != last:
        return False
    return (
        len(candidate_first) >= FUZZY_PREFIX_LENGTH
        and candidate_first[:FUZZY_PREFIX_LENGTH] == first[:FUZZY_PREFIX_LENGTH]
    )


def select_fuzzy_match(
    query_name: str,
    candidates: Iterable[Attendee],
) -> Optional[Attendee]:
    """First candidate (in the given newest-first order) that fuzzy-matches."""
    return next(
        (c for c in candidates if is_fuzzy_match(query_name, c.name)),
        None,
    )


def claim_eligible(attendee: Attendee, candidate_name: str) -> bool:
    """An entry may be claimed while unowned and only under its own name."""
    if attendee.is_claimed:
        return False
    return attendee.name.strip().lower() == candidate_name.strip().lower()


class IdentityMatcher:
    """
    Exact then fuzzy name lookup over unclaimed entries.

    Only unclaimed entries are ever considered, so a lookup never reveals
    who already owns a profile.
    """

    def __init__(self, repository: AttendeeRepository):
        self._repository = repository

    async def lookup(self, name: str) -> LookupResult:
        name = name.strip()
        if not name:
            return LookupResult.not_found()

        exact = await self._repository.find_unclaimed_by_exact_name(name)
        if exact is not None:
            logger.debug("Exact attendee match for lookup")
            return LookupResult(found=True, attendee_id=exact.id)

        query = _fuzzy_query_parts(name)
        if query is None:
            return LookupResult.not_found()

        candidates = await self._repository.find_unclaimed_by_last_name(
            query[1],
            limit=FUZZY_CANDIDATE_LIMIT,
        )
        match = select_fuzzy_match(name, candidates)
        if match is None:
            return LookupResult.not_found()

        logger.info("Fuzzy attendee match: %s", match.id)
        return LookupResult(found=True, attendee_id=match.id)
