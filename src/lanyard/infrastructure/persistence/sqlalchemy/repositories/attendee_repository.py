"""SQLAlchemy implementation of AttendeeRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from lanyard.domain.attendee import (
    Attendee,
    AttendeeAlreadyClaimedError,
    AttendeeRepository,
)
from lanyard.domain.attendee.services import escape_like_pattern
from lanyard.domain.shared.time import ensure_tz_aware, utc_now
from lanyard.infrastructure.persistence.sqlalchemy.models import AttendeeModel

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


class AttendeeRepositorySQLAlchemy(AttendeeRepository):
    """SQLAlchemy implementation of the AttendeeRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, attendee_id: UUID) -> Optional[Attendee]:
        # refresh so a row changed by another transaction is not served stale
        stmt = (
            select(AttendeeModel)
            .where(AttendeeModel.id == attendee_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_user_id(self, user_id: UUID) -> Optional[Attendee]:
        stmt = select(AttendeeModel).where(AttendeeModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_unclaimed_by_exact_name(self, name: str) -> Optional[Attendee]:
        # Without wildcards a case-insensitive LIKE is an equality test
        stmt = (
            select(AttendeeModel)
            .where(
                AttendeeModel.name.ilike(
                    escape_like_pattern(name.strip()),
                    escape=LIKE_ESCAPE,
                ),
                AttendeeModel.user_id.is_(None),
            )
            .order_by(AttendeeModel.created_at.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._map_to_domain(model) if model else None

    async def find_unclaimed_by_last_name(
        self,
        last_name: str,
        limit: int = 10,
    ) -> list[Attendee]:
        pattern = f"% {escape_like_pattern(last_name.strip())}"
        stmt = (
            select(AttendeeModel)
            .where(
                AttendeeModel.name.ilike(pattern, escape=LIKE_ESCAPE),
                AttendeeModel.user_id.is_(None),
            )
            .order_by(AttendeeModel.created_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def claim(
        self,
        attendee_id: UUID,
        user_id: UUID,
        name: str,
        email: str,
    ) -> Optional[Attendee]:
        stmt = (
            update(AttendeeModel)
            .where(
                AttendeeModel.id == attendee_id,
                AttendeeModel.user_id.is_(None),
                func.lower(AttendeeModel.name) == name.lower(),
            )
            .values(user_id=user_id, email=email, name=name, updated_at=utc_now())
            .returning(AttendeeModel)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            await self._session.flush()
        except IntegrityError as e:
            # unique user_id or email already taken by another entry
            await self._session.rollback()
            logger.warning("Claim of %s violated a uniqueness constraint", attendee_id)
            raise AttendeeAlreadyClaimedError(attendee_id, user_id) from e

        return self._map_to_domain(model) if model else None

    async def save(self, attendee: Attendee) -> None:
        existing = await self._session.get(AttendeeModel, attendee.id)
        if existing is None:
            self._session.add(self._map_to_model(attendee))
            logger.debug("Created attendee: %s", attendee.id)
        else:
            self._update_model(existing, attendee)
            logger.debug("Updated attendee: %s", attendee.id)
        await self._session.flush()

    def _map_to_domain(self, model: AttendeeModel) -> Attendee:
        return Attendee(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            email=model.email,
            job_title=model.job_title,
            company=model.company,
            linkedin_url=model.linkedin_url,
            about=model.about,
            ai_summary=list(model.ai_summary) if model.ai_summary else None,
            industry_tags=list(model.industry_tags or []),
            sort_order=model.sort_order,
            is_pinned=model.is_pinned,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, attendee: Attendee) -> AttendeeModel:
        return AttendeeModel(
            id=attendee.id,
            user_id=attendee.user_id,
            name=attendee.name,
            email=attendee.email,
            job_title=attendee.job_title,
            company=attendee.company,
            linkedin_url=attendee.linkedin_url,
            about=attendee.about,
            ai_summary=attendee.ai_summary,
            industry_tags=list(attendee.industry_tags),
            sort_order=attendee.sort_order,
            is_pinned=attendee.is_pinned,
            created_at=attendee.created_at,
            updated_at=attendee.updated_at,
        )

    def _update_model(self, model: AttendeeModel, attendee: Attendee) -> None:
        model.user_id = attendee.user_id
        model.name = attendee.name
        model.email = attendee.email
        model.job_title = attendee.job_title
        model.company = attendee.company
        model.linkedin_url = attendee.linkedin_url
        model.about = attendee.about
        model.ai_summary = attendee.ai_summary
        model.industry_tags = list(attendee.industry_tags)
        model.sort_order = attendee.sort_order
        model.is_pinned = attendee.is_pinned
        model.updated_at = utc_now()
