"""Web search value objects."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class SearchQuery:
    """A free-text query plus provider hints."""

    query: str
    max_results: int = 5
    depth: str = "advanced"
    include_answer: bool = True
    include_domains: tuple[str, ...] = ()


@dataclass(frozen=True)
class SearchHit:
    """One ranked web result."""

    title: str = ""
    url: str = ""
    content: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchHit":
        return cls(
            title=str(data.get("title") or ""),
            url=str(data.get("url") or ""),
            content=str(data.get("content") or ""),
        )


@dataclass(frozen=True)
class SearchResponse:
    """Ordered hits plus an optional synthesized answer."""

    hits: tuple[SearchHit, ...] = field(default_factory=tuple)
    answer: Optional[str] = None

    @classmethod
    def empty(cls) -> "SearchResponse":
        return cls()

    @property
    def sources_found(self) -> int:
        return len(self.hits)
