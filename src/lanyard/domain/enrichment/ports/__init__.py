"""Enrichment ports (interfaces to external collaborators)."""

from lanyard.domain.enrichment.ports.model_cache import ModelCache
from lanyard.domain.enrichment.ports.text_generation_provider import (
    TextGenerationProvider,
)
from lanyard.domain.enrichment.ports.web_search_provider import WebSearchProvider

__all__ = [
    "ModelCache",
    "TextGenerationProvider",
    "WebSearchProvider",
]
