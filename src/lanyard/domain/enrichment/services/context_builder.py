"""Builds the bounded prompt context for one enrichment."""

from typing import Optional

from lanyard.domain.enrichment.value_objects import (
    ContextSnippet,
    SearchContext,
    SearchResponse,
)

MAX_SNIPPETS = 3
SNIPPET_CHAR_BUDGET = 300
MIN_CONTEXT_LENGTH = 100


def truncate_snippet(content: str, budget: int = SNIPPET_CHAR_BUDGET) -> str:
    if not content:
        return ""
    return f"{content[:budget]}..."


def build_context(
    search_response: SearchResponse,
    about: Optional[str],
    name: str,
) -> SearchContext:
    """Assemble context from the user's note and the top search hits.

    The user-provided "about" text comes first and is treated as ground
    truth. When the result is too short to be useful an explicit marker is
    appended so generation stays generic.
    """
    about_text = about.strip() if about and about.strip() else None
    snippets = tuple(
        ContextSnippet(
            title=hit.title,
            content=truncate_snippet(hit.content),
        )
        for hit in search_response.hits[:MAX_SNIPPETS]
    )
    context = SearchContext(
        about=about_text,
        answer=search_response.answer or None,
        snippets=snippets,
    )

    if len(context.render()) < MIN_CONTEXT_LENGTH:
        return context.with_limited_information(
            f"Limited information available about {name}. "
            "Please infer based on any available context.",
        )
    return context
