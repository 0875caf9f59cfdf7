"""Text generation value objects."""

from dataclasses import dataclass, field
from datetime import datetime

GENERATE_CONTENT = "generateContent"


@dataclass(frozen=True)
class GenerationModelInfo:
    """A model as reported by the provider's capability listing."""

    name: str
    supported_methods: tuple[str, ...] = field(default_factory=tuple)

    def supports(self, method: str = GENERATE_CONTENT) -> bool:
        return method in self.supported_methods

    @property
    def short_name(self) -> str:
        return self.name.removeprefix("models/")


@dataclass(frozen=True)
class ModelCacheEntry:
    """Process-wide memo of the resolved fallback model."""

    resolved_model_name: str
    resolved_at: datetime
