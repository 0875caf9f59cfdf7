"""Fixed-window admission control over named limiter profiles."""

import logging
from collections.abc import Iterable
from typing import Optional
from uuid import UUID

from lanyard.domain.ratelimit.exceptions import (
    RateLimitExceededError,
    UnknownRateLimitPolicyError,
)
from lanyard.domain.ratelimit.ports import RateLimitStore
from lanyard.domain.ratelimit.value_objects import RateLimitDecision, RateLimitPolicy
from lanyard.domain.shared.time import Clock, utc_now

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Admission control shared by every inbound operation.

    Each policy is keyed independently: ``admit`` prefixes the caller key
    with the policy name, so the same caller has separate counters (and
    windows) for "lookup" and "strict". Authenticated callers get their own
    key namespace so their counts never mix with anonymous traffic from the
    same address.

    Examples
    --------
    >>> limiter = RateLimiter([RateLimitPolicy("lookup", 20, 60)], store)
    >>> decision = await limiter.admit("lookup", "203.0.113.7")
    >>> decision.allowed
    True
    """

    def __init__(
        self,
        policies: Iterable[RateLimitPolicy],
        store: RateLimitStore,
        clock: Clock = utc_now,
    ):
        self._policies = {policy.name: policy for policy in policies}
        self._store = store
        self._clock = clock

        if not store.is_shared:
            logger.info(
                "Rate limiter uses a per-process store; "
                "counts are not shared across instances",
            )

    def get_policy(self, name: str) -> RateLimitPolicy:
        policy = self._policies.get(name)
        if policy is None:
            raise UnknownRateLimitPolicyError(name)
        return policy

    @staticmethod
    def build_key(client_ip: str, user_id: Optional[UUID] = None) -> str:
        """Caller identity; the policy name is added per counter by ``admit``."""
        address = client_ip or "unknown"
        if user_id is not None:
            return f"user:{user_id}:{address}"
        return f"ip:{address}"

    @staticmethod
    def counter_key(policy_name: str, caller_key: str) -> str:
        return f"{policy_name}:{caller_key}"

    async def admit(
        self,
        limiter_name: str,
        caller_key: str,
        authenticated: bool = False,
    ) -> RateLimitDecision:
        policy = self.get_policy(limiter_name)
        limit = policy.effective_limit(authenticated)
        now = self._clock()

        counter = await self._store.hit(
            self.counter_key(policy.name, caller_key),
            policy.window_seconds,
            now,
        )
        decision = RateLimitDecision.evaluate(
            policy_name=policy.name,
            limit=limit,
            count=counter.count,
            reset_at=counter.reset_at,
            now=now,
        )

        if not decision.allowed:
            logger.warning(
                "Rate limit '%s' exceeded for %s (retry in %ss)",
                policy.name,
                caller_key,
                decision.retry_after_seconds,
            )
        return decision

    async def enforce(
        self,
        limiter_name: str,
        caller_key: str,
        authenticated: bool = False,
    ) -> RateLimitDecision:
        """Like ``admit`` but raises ``RateLimitExceededError`` on denial."""
        decision = await self.admit(limiter_name, caller_key, authenticated)
        if not decision.allowed:
            raise RateLimitExceededError(decision)
        return decision
