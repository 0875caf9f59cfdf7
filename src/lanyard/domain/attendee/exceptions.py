"""Attendee domain exceptions."""

from typing import Optional
from uuid import UUID

from lanyard.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class AttendeeNotFoundError(EntityNotFoundError):
    """
    Raised when a claim targets an entry the caller may not take.

    The message is the same whether the entry is missing or the name does
    not match, so callers cannot probe the directory.
    """

    def __init__(self, attendee_id: UUID) -> None:
        super().__init__(
            message="Profile not available",
            code=ErrorCode.ATTENDEE_NOT_FOUND,
            details={"attendee_id": str(attendee_id)},
        )
        self.attendee_id = attendee_id


class AttendeeAlreadyClaimedError(ConflictError):
    """Raised when the entry or the claimant is already bound."""

    def __init__(
        self,
        attendee_id: UUID,
        user_id: Optional[UUID] = None,
    ) -> None:
        super().__init__(
            message="Profile has already been claimed",
            code=ErrorCode.ALREADY_CLAIMED,
            details={
                "attendee_id": str(attendee_id),
                "user_id": str(user_id) if user_id else None,
            },
        )
        self.attendee_id = attendee_id
