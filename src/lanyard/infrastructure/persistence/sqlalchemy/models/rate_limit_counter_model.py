"""SQLAlchemy model for shared rate limit windows."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from lanyard.infrastructure.persistence.sqlalchemy.models.base import Base


class RateLimitCounterModel(Base):
    """
    One fixed window per limiter key.

    Table: rate_limit_counters
    """

    __tablename__ = "rate_limit_counters"

    key: Mapped[str] = mapped_column(String(512), primary_key=True)
    count: Mapped[int] = mapped_column(Integer, nullable=False)
    reset_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
