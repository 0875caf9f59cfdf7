"""Profile enrichment domain: search context, generation output, tags."""

from lanyard.domain.enrichment.exceptions import (
    GenerationProviderError,
    MissingNameError,
    NoCapableModelFoundError,
    SearchProviderError,
    UpstreamGenerationError,
    UpstreamSearchError,
)
from lanyard.domain.enrichment.ports import (
    ModelCache,
    TextGenerationProvider,
    WebSearchProvider,
)
from lanyard.domain.enrichment.value_objects import (
    EnrichmentOutcome,
    EnrichmentRequest,
    EnrichmentResult,
    GenerationModelInfo,
    ModelCacheEntry,
    RecoveryTier,
    SearchContext,
    SearchHit,
    SearchQuery,
    SearchResponse,
)

__all__ = [
    "EnrichmentOutcome",
    "EnrichmentRequest",
    "EnrichmentResult",
    "GenerationModelInfo",
    "GenerationProviderError",
    "MissingNameError",
    "ModelCache",
    "ModelCacheEntry",
    "NoCapableModelFoundError",
    "RecoveryTier",
    "SearchContext",
    "SearchHit",
    "SearchProviderError",
    "SearchQuery",
    "SearchResponse",
    "TextGenerationProvider",
    "UpstreamGenerationError",
    "UpstreamSearchError",
    "WebSearchProvider",
]
