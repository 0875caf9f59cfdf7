"""Tests for the enrichment context builder."""

from lanyard.domain.enrichment import SearchHit, SearchResponse
from lanyard.domain.enrichment.services import (
    MAX_SNIPPETS,
    MIN_CONTEXT_LENGTH,
    SNIPPET_CHAR_BUDGET,
    build_context,
    truncate_snippet,
)

LONG_CONTENT = "x" * 1000


def _hit(index: int, content: str = LONG_CONTENT) -> SearchHit:
    return SearchHit(
        title=f"Result {index}",
        url=f"https://example.com/{index}",
        content=content,
    )


class TestTruncateSnippet:
    """Tests for per-snippet truncation."""

    def test_long_content_is_cut_and_marked(self):
        """Content is cut to the budget and suffixed with an ellipsis."""
        snippet = truncate_snippet(LONG_CONTENT)

        assert snippet == "x" * SNIPPET_CHAR_BUDGET + "..."

    def test_empty_content_stays_empty(self):
        """Empty content produces no ellipsis."""
        assert truncate_snippet("") == ""


class TestBuildContext:
    """Tests for build_context."""

    def test_snippets_are_bounded(self):
        """Five long hits yield three snippets of at most 303 characters."""
        response = SearchResponse(hits=tuple(_hit(i) for i in range(5)))

        context = build_context(response, None, "Jane Doe")

        assert len(context.snippets) == MAX_SNIPPETS
        for snippet in context.snippets:
            assert len(snippet.content) <= SNIPPET_CHAR_BUDGET + 3
            assert snippet.content.endswith("...")
        assert not context.limited_information

    def test_snippets_keep_search_order(self):
        """The top-ranked hits are the ones kept."""
        response = SearchResponse(hits=tuple(_hit(i) for i in range(5)))

        context = build_context(response, None, "Jane Doe")

        assert [s.title for s in context.snippets] == [
            "Result 0",
            "Result 1",
            "Result 2",
        ]

    def test_about_comes_first(self):
        """User-provided about text precedes the answer and snippets."""
        response = SearchResponse(
            hits=(_hit(0),),
            answer="Jane is a partnerships lead.",
        )

        rendered = build_context(response, "Ran a podcast.", "Jane Doe").render()

        assert rendered.index("User-provided context: Ran a podcast.") < rendered.index(
            "AI Summary: Jane is a partnerships lead.",
        )
        assert rendered.index("AI Summary") < rendered.index("Source 1:")

    def test_empty_search_adds_limited_information_marker(self):
        """Sparse context gets the explicit limited-information note."""
        context = build_context(SearchResponse.empty(), None, "Jane Doe")

        assert context.limited_information
        assert context.render() == (
            "Limited information available about Jane Doe. "
            "Please infer based on any available context."
        )

    def test_short_about_is_still_marked_limited(self):
        """A short about alone is below the minimum context length."""
        context = build_context(SearchResponse.empty(), "Likes hockey.", "Jane Doe")

        assert context.limited_information
        assert context.render().startswith("User-provided context: Likes hockey.")

    def test_sufficient_context_has_no_marker(self):
        """Context at or above the minimum length is left alone."""
        about = "a" * MIN_CONTEXT_LENGTH

        context = build_context(SearchResponse.empty(), about, "Jane Doe")

        assert not context.limited_information
        assert "Limited information" not in context.render()

    def test_blank_about_is_ignored(self):
        """Whitespace-only about text is treated as absent."""
        context = build_context(SearchResponse.empty(), "   ", "Jane Doe")

        assert context.about is None

    def test_hit_without_title_renders_placeholder(self):
        """Missing titles render as N/A."""
        response = SearchResponse(hits=(SearchHit(title="", content=LONG_CONTENT),))

        rendered = build_context(response, None, "Jane Doe").render()

        assert "Title: N/A" in rendered
