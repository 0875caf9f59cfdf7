from lanyard.domain.ratelimit.ports.rate_limit_store import (
    RateLimitCounter,
    RateLimitStore,
)

__all__ = ["RateLimitCounter", "RateLimitStore"]
