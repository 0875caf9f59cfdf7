"""Rate limiting value objects."""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RateLimitPolicy:
    """A named limiter profile: at most ``limit`` requests per window."""

    name: str
    limit: int
    window_seconds: int
    authenticated_limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit < 1:
            msg = f"Rate limit for '{self.name}' must be at least 1"
            raise ValueError(msg)
        if self.window_seconds < 1:
            msg = f"Rate limit window for '{self.name}' must be at least 1 second"
            raise ValueError(msg)

    def effective_limit(self, authenticated: bool) -> int:
        if authenticated and self.authenticated_limit:
            return self.authenticated_limit
        return self.limit


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of one admission check."""

    policy_name: str
    allowed: bool
    limit: int
    remaining: int
    reset_at: datetime
    retry_after_seconds: int = 0

    @classmethod
    def evaluate(
        cls,
        policy_name: str,
        limit: int,
        count: int,
        reset_at: datetime,
        now: datetime,
    ) -> "RateLimitDecision":
        if count <= limit:
            return cls(
                policy_name=policy_name,
                allowed=True,
                limit=limit,
                remaining=max(0, limit - count),
                reset_at=reset_at,
            )

        wait = math.ceil((reset_at - now).total_seconds())
        return cls(
            policy_name=policy_name,
            allowed=False,
            limit=limit,
            remaining=0,
            reset_at=reset_at,
            retry_after_seconds=max(1, wait),
        )

    @property
    def reset_epoch_seconds(self) -> int:
        return math.ceil(self.reset_at.timestamp())
