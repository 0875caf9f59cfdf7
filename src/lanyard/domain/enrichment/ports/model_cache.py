"""Model resolution cache port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from lanyard.domain.enrichment.value_objects import ModelCacheEntry


class ModelCache(ABC):
    """Holds the last resolved fallback model.

    Writes replace the entry wholesale; concurrent resolvers may race and
    the last write wins, which is harmless because resolution is idempotent.
    """

    @abstractmethod
    def get(self) -> Optional[ModelCacheEntry]:
        """Return the current entry, regardless of age."""

    @abstractmethod
    def set(self, entry: ModelCacheEntry) -> None:
        """Replace the current entry."""

    @abstractmethod
    def clear(self) -> None:
        """Drop the current entry."""
