"""Enrichment result value objects."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

SUMMARY_LENGTH = 3
MAX_INDUSTRY_TAGS = 3


class RecoveryTier(Enum):
    """Which stage turned raw model output into a result."""

    DIRECT = "direct"
    EXTRACTED = "extracted"
    REPAIRED = "repaired"
    DEFAULT = "default"


@dataclass(frozen=True)
class EnrichmentResult:
    """A bounded summary and tag set.

    ``summary`` always holds exactly three entries and ``industry_tags``
    between one and three.
    """

    summary: tuple[str, ...]
    industry_tags: tuple[str, ...]
    sources_found: int = 0

    def __post_init__(self) -> None:
        if len(self.summary) != SUMMARY_LENGTH:
            msg = f"summary must have exactly {SUMMARY_LENGTH} entries"
            raise ValueError(msg)
        if not 1 <= len(self.industry_tags) <= MAX_INDUSTRY_TAGS:
            msg = f"industry_tags must have 1 to {MAX_INDUSTRY_TAGS} entries"
            raise ValueError(msg)
        if self.sources_found < 0:
            msg = "sources_found cannot be negative"
            raise ValueError(msg)

    def with_sources(self, sources_found: int) -> "EnrichmentResult":
        return EnrichmentResult(
            summary=self.summary,
            industry_tags=self.industry_tags,
            sources_found=sources_found,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": list(self.summary),
            "industry_tags": list(self.industry_tags),
            "sources_found": self.sources_found,
        }


@dataclass(frozen=True)
class EnrichmentOutcome:
    """An enrichment result plus a record of every degradation on the way."""

    result: EnrichmentResult
    model_used: str
    recovered_by: RecoveryTier
    search_degraded: bool = False
    search_error: Optional[str] = None
    fallback_model_used: bool = False
    strict_retry_used: bool = False

    @property
    def used_default_result(self) -> bool:
        return self.recovered_by is RecoveryTier.DEFAULT
