"""Admission control for inbound operations."""

from lanyard.domain.ratelimit.exceptions import (
    RateLimitExceededError,
    UnknownRateLimitPolicyError,
)
from lanyard.domain.ratelimit.ports import RateLimitCounter, RateLimitStore
from lanyard.domain.ratelimit.services import RateLimiter
from lanyard.domain.ratelimit.value_objects import (
    RateLimitDecision,
    RateLimitPolicy,
)

__all__ = [
    "RateLimitCounter",
    "RateLimitDecision",
    "RateLimitExceededError",
    "RateLimitPolicy",
    "RateLimitStore",
    "RateLimiter",
    "UnknownRateLimitPolicyError",
]
