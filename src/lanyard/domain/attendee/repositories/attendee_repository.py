"""Attendee repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from lanyard.domain.attendee.entities import Attendee


class AttendeeRepository(ABC):
    """Repository interface for attendee directory entries."""

    @abstractmethod
    async def find_by_id(self, attendee_id: UUID) -> Optional[Attendee]:
        """
        Find an attendee by ID, claimed or not.

        Parameters
        ----------
        attendee_id
            The attendee's unique identifier

        Returns
        -------
        Attendee if found, None otherwise
        """

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> Optional[Attendee]:
        """Return the entry already owned by ``user_id``, if any."""

    @abstractmethod
    async def find_unclaimed_by_exact_name(self, name: str) -> Optional[Attendee]:
        """
        Newest unclaimed entry whose name equals ``name`` ignoring case.

        LIKE metacharacters in ``name`` match literally.
        """

    @abstractmethod
    async def find_unclaimed_by_last_name(
        self,
        last_name: str,
        limit: int = 10,
    ) -> list[Attendee]:
        """
        Unclaimed entries whose name ends with a space and ``last_name``.

        Parameters
        ----------
        last_name
            Final token of the searched name, compared ignoring case
        limit
            Maximum number of candidates

        Returns
        -------
        Candidates ordered newest first
        """

    @abstractmethod
    async def claim(
        self,
        attendee_id: UUID,
        user_id: UUID,
        name: str,
        email: str,
    ) -> Optional[Attendee]:
        """
        Bind an unclaimed entry to ``user_id`` in one conditional update.

        The update only applies while the entry is unclaimed and its name
        equals ``name`` ignoring case. Of two concurrent claims at most one
        succeeds.

        Returns
        -------
        The claimed attendee, or None when no row matched the conditions
        """

    @abstractmethod
    async def save(self, attendee: Attendee) -> None:
        """Insert or update an entry (used for seeding)."""
