"""Input sanitisation shared by request schemas."""

import re
import unicodedata
from typing import Optional
from urllib.parse import urlsplit
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 254
MAX_JOB_TITLE_LENGTH = 200
MAX_COMPANY_LENGTH = 200
MAX_ABOUT_LENGTH = 2000
MAX_LINKEDIN_URL_LENGTH = 500

# Control characters except tab, newline and carriage return
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_UUID_V4 = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_NAME_PUNCTUATION = set(" -'.,;:&()/")


def sanitize_string(value: str) -> str:
    """Trim, drop control characters and normalise to NFC."""
    return unicodedata.normalize("NFC", _CONTROL_CHARS.sub("", value.strip()))


def sanitize_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return sanitize_string(value) or None


def is_valid_name(value: str) -> bool:
    """Letters, combining marks, whitespace and ``-'.,;:&()/`` only."""
    return bool(value) and all(
        char.isspace()
        or char in _NAME_PUNCTUATION
        or unicodedata.category(char)[0] in ("L", "M")
        for char in value
    )


def validate_name(value: str) -> str:
    value = sanitize_string(value)
    if not value:
        msg = "Name is required"
        raise ValueError(msg)
    if not is_valid_name(value):
        msg = "Name contains invalid characters"
        raise ValueError(msg)
    return value


def validate_linkedin_url(value: Optional[str]) -> Optional[str]:
    """Accept only https URLs on linkedin.com or one of its subdomains."""
    value = sanitize_optional(value)
    if value is None:
        return None
    parts = urlsplit(value)
    host = (parts.hostname or "").lower()
    if parts.scheme != "https" or not (
        host == "linkedin.com" or host.endswith(".linkedin.com")
    ):
        msg = "Must be an https LinkedIn URL"
        raise ValueError(msg)
    return value


def validate_uuid4(value: str) -> UUID:
    value = sanitize_string(str(value))
    if not _UUID_V4.match(value):
        msg = "Invalid ID format"
        raise ValueError(msg)
    return UUID(value.lower())


class StrictRequest(BaseModel):
    """Base for request bodies: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
