"""Profile enrichment schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lanyard.domain.enrichment import EnrichmentOutcome, EnrichmentRequest
from lanyard.presentation.api.schemas.common import (
    MAX_ABOUT_LENGTH,
    MAX_COMPANY_LENGTH,
    MAX_JOB_TITLE_LENGTH,
    MAX_LINKEDIN_URL_LENGTH,
    MAX_NAME_LENGTH,
    StrictRequest,
    sanitize_optional,
    sanitize_string,
    validate_linkedin_url,
)


class EnrichProfileRequest(StrictRequest):
    """Request to generate a summary and tags for one person.

    A blank name is accepted here and rejected by the service with
    ``MISSING_NAME``.
    """

    name: str = Field("", max_length=MAX_NAME_LENGTH)
    job_title: Optional[str] = Field(None, max_length=MAX_JOB_TITLE_LENGTH)
    company: Optional[str] = Field(None, max_length=MAX_COMPANY_LENGTH)
    linkedin_url: Optional[str] = Field(None, max_length=MAX_LINKEDIN_URL_LENGTH)
    about: Optional[str] = Field(None, max_length=MAX_ABOUT_LENGTH)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "job_title": "Head of Partnerships",
                "company": "Example FC",
                "linkedin_url": "https://www.linkedin.com/in/janedoe",
                "about": "Fifteen years in sports sponsorship.",
            },
        },
    )

    @field_validator("name")
    @classmethod
    def _sanitize_name(cls, value: str) -> str:
        return sanitize_string(value)

    @field_validator("job_title", "company", "about")
    @classmethod
    def _sanitize_optional(cls, value: Optional[str]) -> Optional[str]:
        return sanitize_optional(value)

    @field_validator("linkedin_url")
    @classmethod
    def _check_linkedin_url(cls, value: Optional[str]) -> Optional[str]:
        return validate_linkedin_url(value)

    def to_domain(self) -> EnrichmentRequest:
        return EnrichmentRequest(
            name=self.name,
            job_title=self.job_title,
            company=self.company,
            linkedin_url=self.linkedin_url,
            about=self.about,
        )


class EnrichmentData(BaseModel):
    summary: list[str]
    industry_tags: list[str]
    sources_found: int
    search_error: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome: EnrichmentOutcome) -> "EnrichmentData":
        return cls(
            summary=list(outcome.result.summary),
            industry_tags=list(outcome.result.industry_tags),
            sources_found=outcome.result.sources_found,
            search_error=outcome.search_error,
        )


class EnrichProfileResponse(BaseModel):
    success: bool = True
    data: EnrichmentData
