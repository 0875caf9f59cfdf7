from lanyard.domain.attendee.services.identity_matcher import (
    IdentityMatcher,
    LookupResult,
    claim_eligible,
    escape_like_pattern,
    is_fuzzy_match,
    select_fuzzy_match,
    split_name,
)

__all__ = [
    "IdentityMatcher",
    "LookupResult",
    "claim_eligible",
    "escape_like_pattern",
    "is_fuzzy_match",
    "select_fuzzy_match",
    "split_name",
]
