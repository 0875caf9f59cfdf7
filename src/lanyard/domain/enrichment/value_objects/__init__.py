"""Enrichment value objects."""

from lanyard.domain.enrichment.value_objects.enrichment_request import (
    EnrichmentRequest,
)
from lanyard.domain.enrichment.value_objects.enrichment_result import (
    MAX_INDUSTRY_TAGS,
    SUMMARY_LENGTH,
    EnrichmentOutcome,
    EnrichmentResult,
    RecoveryTier,
)
from lanyard.domain.enrichment.value_objects.generation import (
    GENERATE_CONTENT,
    GenerationModelInfo,
    ModelCacheEntry,
)
from lanyard.domain.enrichment.value_objects.search import (
    SearchHit,
    SearchQuery,
    SearchResponse,
)
from lanyard.domain.enrichment.value_objects.search_context import (
    ContextSnippet,
    SearchContext,
)

__all__ = [
    "GENERATE_CONTENT",
    "MAX_INDUSTRY_TAGS",
    "SUMMARY_LENGTH",
    "ContextSnippet",
    "EnrichmentOutcome",
    "EnrichmentRequest",
    "EnrichmentResult",
    "GenerationModelInfo",
    "ModelCacheEntry",
    "RecoveryTier",
    "SearchContext",
    "SearchHit",
    "SearchQuery",
    "SearchResponse",
]
