"""External profile lookup schemas."""

from typing import Optional

from pydantic import Field, field_validator

from lanyard.presentation.api.schemas.common import (
    MAX_COMPANY_LENGTH,
    MAX_JOB_TITLE_LENGTH,
    MAX_NAME_LENGTH,
    StrictRequest,
    sanitize_optional,
    validate_name,
)


class LookupLinkedinRequest(StrictRequest):
    """Find the most likely LinkedIn profile for a person."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    job_title: Optional[str] = Field(None, max_length=MAX_JOB_TITLE_LENGTH)
    company: Optional[str] = Field(None, max_length=MAX_COMPANY_LENGTH)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_name(value)

    @field_validator("job_title", "company")
    @classmethod
    def _sanitize_optional(cls, value: Optional[str]) -> Optional[str]:
        return sanitize_optional(value)
