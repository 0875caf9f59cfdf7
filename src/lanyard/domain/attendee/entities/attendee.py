"""Attendee directory entry."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from lanyard.domain.shared.time import utc_now


@dataclass
class Attendee:
    """
    One entry of the attendee directory.

    Entries are usually pre-seeded by organisers without an owner. The first
    authenticated person whose name matches claims the entry, after which
    ``user_id`` is set and never changes.
    """

    name: str
    id: UUID = field(default_factory=uuid4)
    user_id: Optional[UUID] = None
    email: Optional[str] = None
    job_title: Optional[str] = None
    company: Optional[str] = None
    linkedin_url: Optional[str] = None
    about: Optional[str] = None
    ai_summary: Optional[list[str]] = None
    industry_tags: list[str] = field(default_factory=list)
    sort_order: int = 0
    is_pinned: bool = False
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def is_claimed(self) -> bool:
        return self.user_id is not None

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "user_id": str(self.user_id) if self.user_id else None,
            "name": self.name,
            "email": self.email,
            "job_title": self.job_title,
            "company": self.company,
            "linkedin_url": self.linkedin_url,
            "about": self.about,
            "ai_summary": self.ai_summary,
            "industry_tags": list(self.industry_tags),
            "sort_order": self.sort_order,
            "is_pinned": self.is_pinned,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
