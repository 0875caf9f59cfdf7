"""Query to find an unclaimed directory entry for a name."""

from lanyard.domain.attendee import AttendeeRepository, IdentityMatcher, LookupResult


class LookupAttendeeQuery:
    """Exact then fuzzy lookup; never reveals claimed entries."""

    def __init__(self, attendee_repo: AttendeeRepository) -> None:
        self._matcher = IdentityMatcher(attendee_repo)

    async def execute(self, name: str) -> LookupResult:
        return await self._matcher.lookup(name)
