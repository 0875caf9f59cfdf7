from lanyard.domain.ratelimit.services.rate_limiter import RateLimiter

__all__ = ["RateLimiter"]
