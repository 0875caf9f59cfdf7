"""Rate limit counters shared through the database."""

import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import case, delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lanyard.domain.ratelimit import RateLimitCounter, RateLimitStore
from lanyard.domain.shared.time import ensure_tz_aware
from lanyard.infrastructure.persistence.sqlalchemy.models import RateLimitCounterModel
from lanyard.infrastructure.ratelimit.in_memory_store import CLEANUP_INTERVAL

logger = logging.getLogger(__name__)


class SQLAlchemyRateLimitStore(RateLimitStore):
    """
    Fixed windows kept in ``rate_limit_counters``.

    Each hit is a single ``INSERT ... ON CONFLICT DO UPDATE ... RETURNING``
    that either opens a fresh window or increments the current one, so
    concurrent requests on any instance observe distinct counts.
    Expired rows are deleted from ``hit`` at most once per
    ``CLEANUP_INTERVAL``. Supports PostgreSQL and SQLite.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker
        self._last_cleanup: Optional[datetime] = None

    @property
    def is_shared(self) -> bool:
        return True

    async def hit(
        self,
        key: str,
        window_seconds: int,
        now: datetime,
    ) -> RateLimitCounter:
        await self._maybe_cleanup(now)

        new_reset = now + timedelta(seconds=window_seconds)
        table = RateLimitCounterModel

        async with self._session_maker() as session:
            insert = (
                postgresql.insert
                if session.get_bind().dialect.name == "postgresql"
                else sqlite.insert
            )
            expired = table.reset_at <= now
            stmt = (
                insert(table)
                .values(key=key, count=1, reset_at=new_reset)
                .on_conflict_do_update(
                    index_elements=[table.key],
                    set_={
                        "count": case((expired, 1), else_=table.count + 1),
                        "reset_at": case((expired, new_reset), else_=table.reset_at),
                    },
                )
                .returning(table.count, table.reset_at)
            )
            count, reset_at = (await session.execute(stmt)).one()
            await session.commit()

        return RateLimitCounter(count=count, reset_at=ensure_tz_aware(reset_at))

    async def _maybe_cleanup(self, now: datetime) -> None:
        if self._last_cleanup is None:
            self._last_cleanup = now
            return
        if now - self._last_cleanup < CLEANUP_INTERVAL:
            return
        self._last_cleanup = now
        await self.purge_expired(now)

    async def purge_expired(self, now: datetime) -> int:
        async with self._session_maker() as session:
            result = await session.execute(
                delete(RateLimitCounterModel).where(
                    RateLimitCounterModel.reset_at <= now,
                ),
            )
            await session.commit()

        removed = result.rowcount or 0
        if removed:
            logger.info("Purged %d expired rate limit windows", removed)
        return removed
