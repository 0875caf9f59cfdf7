"""Rate limit counter store port (interface)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RateLimitCounter:
    """Counter state right after a hit."""

    count: int
    reset_at: datetime


class RateLimitStore(ABC):
    """
    Abstract counter store for fixed-window rate limiting.

    Implementations must make ``hit`` atomic: concurrent callers hitting the
    same key must each observe a distinct count. A per-process store satisfies
    this only within one process; counters are then neither shared across
    instances nor kept across restarts.
    """

    @property
    @abstractmethod
    def is_shared(self) -> bool:
        """Whether counters are shared between process instances."""

    @abstractmethod
    async def hit(
        self,
        key: str,
        window_seconds: int,
        now: datetime,
    ) -> RateLimitCounter:
        """
        Count one request against ``key``.

        Starts a new window (count 1, reset at ``now + window``) when the key
        is unknown or its window has expired, otherwise increments the count.

        Returns
        -------
        The counter state including this request
        """

    @abstractmethod
    async def purge_expired(self, now: datetime) -> int:
        """
        Delete entries whose window ended before ``now``.

        Returns
        -------
        Number of entries removed
        """
