"""Enrichment domain services."""

from lanyard.domain.enrichment.services.context_builder import (
    MAX_SNIPPETS,
    MIN_CONTEXT_LENGTH,
    SNIPPET_CHAR_BUDGET,
    build_context,
    truncate_snippet,
)
from lanyard.domain.enrichment.services.prompts import (
    build_enrichment_prompt,
    build_enrichment_search_query,
    build_profile_search_query,
    build_strict_prompt,
)
from lanyard.domain.enrichment.services.relevance_scorer import (
    ScoredCandidate,
    is_personal_profile,
    pick_best,
    rank,
    score,
)
from lanyard.domain.enrichment.services.response_recoverer import (
    DEFAULT_ENRICHMENT,
    GENERIC_SUMMARY,
    GENERIC_TAGS,
    RecoveryResult,
    ResponseRecoverer,
    recover,
)

__all__ = [
    "DEFAULT_ENRICHMENT",
    "GENERIC_SUMMARY",
    "GENERIC_TAGS",
    "MAX_SNIPPETS",
    "MIN_CONTEXT_LENGTH",
    "SNIPPET_CHAR_BUDGET",
    "RecoveryResult",
    "ResponseRecoverer",
    "ScoredCandidate",
    "build_context",
    "build_enrichment_prompt",
    "build_enrichment_search_query",
    "build_profile_search_query",
    "build_strict_prompt",
    "is_personal_profile",
    "pick_best",
    "rank",
    "recover",
    "score",
    "truncate_snippet",
]
