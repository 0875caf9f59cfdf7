"""Attendee directory domain: entries, lookup and claiming."""

from lanyard.domain.attendee.entities import Attendee
from lanyard.domain.attendee.exceptions import (
    AttendeeAlreadyClaimedError,
    AttendeeNotFoundError,
)
from lanyard.domain.attendee.repositories import AttendeeRepository
from lanyard.domain.attendee.services import (
    IdentityMatcher,
    LookupResult,
    claim_eligible,
)

__all__ = [
    "Attendee",
    "AttendeeAlreadyClaimedError",
    "AttendeeNotFoundError",
    "AttendeeRepository",
    "IdentityMatcher",
    "LookupResult",
    "claim_eligible",
]
