"""Process-wide model cache."""

from typing import Optional

from lanyard.domain.enrichment import ModelCache, ModelCacheEntry


class InMemoryModelCache(ModelCache):
    """Single-slot cache; a write replaces the entry in one assignment."""

    def __init__(self) -> None:
        self._entry: Optional[ModelCacheEntry] = None

    def get(self) -> Optional[ModelCacheEntry]:
        return self._entry

    def set(self, entry: ModelCacheEntry) -> None:
        self._entry = entry

    def clear(self) -> None:
        self._entry = None
