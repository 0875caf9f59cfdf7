"""Bounded prompt context assembled from search results."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class ContextSnippet:
    title: str
    content: str


@dataclass(frozen=True)
class SearchContext:
    """Prompt context in inclusion order: about, answer, snippets, marker."""

    about: Optional[str] = None
    answer: Optional[str] = None
    snippets: tuple[ContextSnippet, ...] = ()
    limited_information_note: Optional[str] = None

    @property
    def limited_information(self) -> bool:
        return self.limited_information_note is not None

    def with_limited_information(self, note: str) -> "SearchContext":
        return replace(self, limited_information_note=note)

    def render(self) -> str:
        parts: list[str] = []
        if self.about:
            parts.append(f"User-provided context: {self.about}\n\n")
        if self.answer:
            parts.append(f"AI Summary: {self.answer}\n\n")
        for index, snippet in enumerate(self.snippets, start=1):
            block = f"Source {index}:\nTitle: {snippet.title or 'N/A'}\n"
            if snippet.content:
                block += f"Content: {snippet.content}\n"
            parts.append(block + "\n")
        if self.limited_information_note:
            parts.append(self.limited_information_note)
        return "".join(parts)
