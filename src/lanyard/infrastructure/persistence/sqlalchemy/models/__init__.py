"""SQLAlchemy models; importing this package registers every table."""

from lanyard.infrastructure.persistence.sqlalchemy.models.attendee_model import (
    AttendeeModel,
)
from lanyard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from lanyard.infrastructure.persistence.sqlalchemy.models.rate_limit_counter_model import (  # NOQA: E501
    RateLimitCounterModel,
)

__all__ = ["AttendeeModel", "Base", "RateLimitCounterModel", "TimestampMixin"]
