from lanyard.domain.attendee.repositories.attendee_repository import (
    AttendeeRepository,
)

__all__ = ["AttendeeRepository"]
