"""Enrichment request value object."""

from dataclasses import dataclass
from typing import Optional


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True)
class EnrichmentRequest:
    """Immutable input to one enrichment attempt.

    Optional fields are normalised so that blank strings behave exactly
    like absent values.
    """

    name: str
    job_title: Optional[str] = None
    company: Optional[str] = None
    linkedin_url: Optional[str] = None
    about: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", (self.name or "").strip())
        for field_name in ("job_title", "company", "linkedin_url", "about"):
            object.__setattr__(self, field_name, _clean(getattr(self, field_name)))

    @property
    def has_name(self) -> bool:
        return bool(self.name)
