"""Onboarding (lookup and claim) schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from lanyard.domain.attendee import Attendee
from lanyard.presentation.api.schemas.common import (
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    StrictRequest,
    sanitize_string,
    validate_name,
    validate_uuid4,
)


class LookupRequest(StrictRequest):
    """Find an unclaimed directory entry by name."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_name(value)


class LookupResponse(BaseModel):
    success: bool = True
    found: bool
    attendee_id: Optional[UUID] = Field(None, serialization_alias="attendeeId")


class ClaimRequest(StrictRequest):
    """Claim a directory entry for the authenticated caller."""

    attendee_id: UUID = Field(..., alias="attendeeId")
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    email: EmailStr

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "attendeeId": "6f1c9f52-8d0e-4c4b-9a41-3f1c2b7d9e10",
                "name": "Jane Doe",
                "email": "jane@example.com",
            },
        },
    )

    @field_validator("attendee_id", mode="before")
    @classmethod
    def _check_attendee_id(cls, value: object) -> UUID:
        return validate_uuid4(str(value))

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_name(value)

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, value: object) -> object:
        if isinstance(value, str):
            value = sanitize_string(value).lower()
            if len(value) > MAX_EMAIL_LENGTH:
                msg = f"Email must be {MAX_EMAIL_LENGTH} characters or less"
                raise ValueError(msg)
        return value


class AttendeeResponse(BaseModel):
    id: UUID
    user_id: Optional[UUID]
    name: str
    email: Optional[str]
    job_title: Optional[str]
    company: Optional[str]
    linkedin_url: Optional[str]
    about: Optional[str]
    ai_summary: Optional[list[str]]
    industry_tags: list[str]
    sort_order: int
    is_pinned: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_domain(cls, attendee: Attendee) -> "AttendeeResponse":
        return cls.model_validate(attendee)


class ClaimResponse(BaseModel):
    success: bool = True
    data: AttendeeResponse
