"""Per-process rate limit counters."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from lanyard.domain.ratelimit import RateLimitCounter, RateLimitStore

logger = logging.getLogger(__name__)

CLEANUP_INTERVAL = timedelta(minutes=5)


@dataclass
class _Window:
    count: int
    reset_at: datetime


class InMemoryRateLimitStore(RateLimitStore):
    """
    Dict of fixed windows guarded by an ``asyncio.Lock``.

    Counts are local to this process and lost on restart, so limits are
    only approximate when several instances serve traffic. Expired windows
    are reaped lazily, at most once per ``CLEANUP_INTERVAL``.
    """

    def __init__(self) -> None:
        self._windows: dict[str, _Window] = {}
        self._lock = asyncio.Lock()
        self._last_cleanup: Optional[datetime] = None

    @property
    def is_shared(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self._windows)

    async def hit(
        self,
        key: str,
        window_seconds: int,
        now: datetime,
    ) -> RateLimitCounter:
        async with self._lock:
            self._maybe_cleanup(now)

            window = self._windows.get(key)
            if window is None or window.reset_at <= now:
                window = _Window(
                    count=1,
                    reset_at=now + timedelta(seconds=window_seconds),
                )
                self._windows[key] = window
            else:
                window.count += 1

            return RateLimitCounter(count=window.count, reset_at=window.reset_at)

    async def purge_expired(self, now: datetime) -> int:
        async with self._lock:
            return self._purge(now)

    def _maybe_cleanup(self, now: datetime) -> None:
        if self._last_cleanup is None:
            self._last_cleanup = now
            return
        if now - self._last_cleanup < CLEANUP_INTERVAL:
            return
        self._last_cleanup = now
        removed = self._purge(now)
        if removed:
            logger.debug("Reaped %d expired rate limit windows", removed)

    def _purge(self, now: datetime) -> int:
        expired = [k for k, w in self._windows.items() if w.reset_at <= now]
        for key in expired:
            del self._windows[key]
        return len(expired)
