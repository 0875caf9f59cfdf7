"""Rate limit dependencies for routers.

Usage:
    @router.post("/lookup", dependencies=[rate_limit("lookup")])
    async def lookup(...): ...

Allowed requests get ``X-RateLimit-*`` headers; denied requests raise
``RateLimitExceededError``, which the exception handlers turn into a 429.
"""

from typing import Any

from fastapi import Depends, Request, Response

from lanyard.domain.ratelimit import RateLimitDecision, RateLimiter
from lanyard.presentation.api.dependencies import OptionalIdentity, get_rate_limiter
from lanyard_config.settings import Settings, get_settings

UNKNOWN_CLIENT = "unknown"
_PROXY_HEADERS = ("x-forwarded-for", "cf-connecting-ip", "x-real-ip")


def client_ip(request: Request, trust_proxy_headers: bool = False) -> str:
    """
    Best-effort caller address.

    Forwarding headers are client-controlled, so they are only honoured
    behind a proxy that sets them (``API_TRUST_PROXY_HEADERS``).
    """
    if trust_proxy_headers:
        for header in _PROXY_HEADERS:
            value = request.headers.get(header)
            if value:
                # X-Forwarded-For holds a chain; the first hop is the client
                first = value.split(",")[0].strip()
                if first:
                    return first

    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


def rate_limit_headers(decision: RateLimitDecision) -> dict[str, str]:
    return {
        "X-RateLimit-Limit": str(decision.limit),
        "X-RateLimit-Remaining": str(decision.remaining),
        "X-RateLimit-Reset": str(decision.reset_epoch_seconds),
    }


def rate_limit(policy_name: str) -> Any:
    """Build a route dependency enforcing the named limiter profile."""

    async def enforce_rate_limit(
        request: Request,
        response: Response,
        identity: OptionalIdentity,
        limiter: RateLimiter = Depends(get_rate_limiter),
        settings: Settings = Depends(get_settings),
    ) -> RateLimitDecision:
        key = RateLimiter.build_key(
            client_ip(request, settings.api_trust_proxy_headers),
            identity.user_id if identity else None,
        )
        decision = await limiter.enforce(
            policy_name,
            key,
            authenticated=identity is not None,
        )
        response.headers.update(rate_limit_headers(decision))
        return decision

    return Depends(enforce_rate_limit)
