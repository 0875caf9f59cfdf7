from lanyard.infrastructure.persistence.sqlalchemy.repositories.attendee_repository import (  # NOQA: E501
    AttendeeRepositorySQLAlchemy,
)

__all__ = ["AttendeeRepositorySQLAlchemy"]
