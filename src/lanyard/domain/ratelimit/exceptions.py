"""Rate limiting exceptions."""

from lanyard.domain.ratelimit.value_objects import RateLimitDecision
from lanyard.domain.shared.exceptions import DomainException, ErrorCode


class RateLimitExceededError(DomainException):
    """Raised when an admission check denies the request."""

    def __init__(self, decision: RateLimitDecision) -> None:
        retry_after = decision.retry_after_seconds
        super().__init__(
            message=(
                f"Rate limit exceeded. Please try again in {retry_after} seconds."
            ),
            code=ErrorCode.RATE_LIMITED,
            details={"policy": decision.policy_name, "retry_after": retry_after},
        )
        self.decision = decision

    @property
    def retry_after_seconds(self) -> int:
        return self.decision.retry_after_seconds


class UnknownRateLimitPolicyError(LookupError):
    """Raised when a limiter profile name is not configured."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown rate limit policy: {name}")
        self.name = name
