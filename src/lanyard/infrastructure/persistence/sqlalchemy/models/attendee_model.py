"""SQLAlchemy model for attendee directory entries."""

from typing import Any, Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from lanyard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class AttendeeModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting attendees.

    ``user_id`` is NULL while the entry is unclaimed. It is unique, so one
    person can own at most one entry.

    Table: attendees
    """

    __tablename__ = "attendees"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    user_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        unique=True,
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(
        String(254),
        unique=True,
        nullable=True,
    )
    linkedin_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    job_title: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    company: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    about: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Enrichment output
    ai_summary: Mapped[Optional[list[Any]]] = mapped_column(JSON, nullable=True)
    industry_tags: Mapped[list[Any]] = mapped_column(JSON, default=list)

    # Directory ordering
    sort_order: Mapped[int] = mapped_column(Integer, default=0)
    is_pinned: Mapped[bool] = mapped_column(Boolean, default=False)
