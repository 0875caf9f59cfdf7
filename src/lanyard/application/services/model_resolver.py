"""Chooses which generation model to call.

The configured model is tried first. When the provider reports it missing
or unable to generate, the resolver lists the provider's models and picks
the best capable one from a static preference order. The choice is cached
process-wide so a retired model costs at most one listing per TTL.
"""

import logging
import re
from datetime import timedelta
from typing import Optional

from lanyard.domain.enrichment import (
    GenerationModelInfo,
    ModelCache,
    ModelCacheEntry,
    NoCapableModelFoundError,
    TextGenerationProvider,
)
from lanyard.domain.shared.time import Clock, utc_now

logger = logging.getLogger(__name__)

MODEL_CACHE_TTL_SECONDS = 600

PREFERRED_MODELS: tuple[str, ...] = (
    "models/gemini-3-flash-preview",
    "models/gemini-3.0-flash-preview",
    "models/gemini-3-flash-preview-latest",
    "models/gemini-1.5-flash",
    "models/gemini-1.5-flash-latest",
    "models/gemini-1.5-pro",
    "models/gemini-1.0-pro",
    "models/gemini-pro",
)

_MODEL_ISSUE = re.compile(r"not found|not supported for generateContent", re.I)
_HTTP_NOT_FOUND = 404


def is_model_unavailable(error: BaseException) -> bool:
    """Whether ``error`` means the model is gone rather than the call failed."""
    if getattr(error, "status_code", None) == _HTTP_NOT_FOUND:
        return True
    return bool(_MODEL_ISSUE.search(str(error)))


def choose_model(
    models: list[GenerationModelInfo],
    preferred: tuple[str, ...] = PREFERRED_MODELS,
) -> Optional[GenerationModelInfo]:
    capable = [m for m in models if m.supports()]
    by_name = {m.name: m for m in capable}
    for name in preferred:
        if name in by_name:
            return by_name[name]
    return capable[0] if capable else None


class ModelResolver:
    """
    Resolves the preferred and fallback generation models.

    Parameters
    ----------
    provider
        Generation service used for the capability listing
    cache
        Holds the last fallback resolution
    clock
        Source of the current time for cache expiry
    ttl_seconds
        How long a resolution stays valid
    preferred_models
        Fallback preference order, full provider names
    """

    def __init__(  # NOQA: PLR0913
        self,
        provider: TextGenerationProvider,
        cache: ModelCache,
        clock: Clock = utc_now,
        ttl_seconds: int = MODEL_CACHE_TTL_SECONDS,
        preferred_models: tuple[str, ...] = PREFERRED_MODELS,
    ):
        self._provider = provider
        self._cache = cache
        self._clock = clock
        self._ttl = timedelta(seconds=ttl_seconds)
        self._preferred = preferred_models

    def resolve_model(self, preferred: str) -> str:
        return preferred.removeprefix("models/")

    def cached_model(self) -> Optional[str]:
        entry = self._cache.get()
        if entry is None:
            return None
        if self._clock() - entry.resolved_at >= self._ttl:
            return None
        return entry.resolved_model_name

    async def resolve_fallback_model(self) -> str:
        """
        Return the best capable model, using the cache when fresh.

        Raises
        ------
        NoCapableModelFoundError
            If no listed model supports generation
        GenerationProviderError
            If the listing call fails
        """
        cached = self.cached_model()
        if cached is not None:
            logger.debug("Using cached fallback model %s", cached)
            return cached

        models = await self._provider.list_models()
        chosen = choose_model(models, self._preferred)
        if chosen is None:
            raise NoCapableModelFoundError([m.name for m in models])

        name = chosen.short_name
        self._cache.set(
            ModelCacheEntry(resolved_model_name=name, resolved_at=self._clock()),
        )
        logger.info("Resolved fallback generation model: %s", name)
        return name

    def invalidate(self) -> None:
        self._cache.clear()
