"""Tests for external profile relevance scoring."""

from lanyard.domain.enrichment import SearchHit
from lanyard.domain.enrichment.services import (
    is_personal_profile,
    pick_best,
    rank,
    score,
)


def _profile(title: str, content: str = "", slug: str = "someone") -> SearchHit:
    return SearchHit(
        title=title,
        url=f"https://www.linkedin.com/in/{slug}",
        content=content,
    )


class TestScore:
    """Tests for the additive score."""

    def test_name_tokens_score_ten_each(self):
        """Every name token of three or more letters found adds 10."""
        hit = _profile("Jane Doe - Partnerships")

        assert score(hit, "Jane Doe") == 20

    def test_short_tokens_are_ignored(self):
        """Tokens shorter than three characters never score."""
        hit = _profile("Al Li")

        assert score(hit, "Al Li") == 0

    def test_matching_is_case_insensitive(self):
        """Title and content are compared lower-cased."""
        hit = _profile("JANE DOE")

        assert score(hit, "jane doe") == 20

    def test_job_title_tokens_score_five_each(self):
        """Job title tokens add 5 each."""
        hit = _profile("Jane Doe", "Head of Partnerships at Example FC")

        assert score(hit, "Jane Doe", job_title="Head Partnerships") == 30

    def test_exact_company_beats_partial(self):
        """Containing the whole company string adds at least 15 over a miss."""
        with_company = _profile("Jane Doe", "Works at Acme Sports Group")
        without_company = _profile("Jane Doe", "Works at a stadium")

        diff = score(with_company, "Jane Doe", company="Acme Sports Group") - score(
            without_company,
            "Jane Doe",
            company="Acme Sports Group",
        )

        assert diff >= 15

    def test_company_tokens_score_when_no_exact_match(self):
        """Partial company matches add 3 per token."""
        hit = _profile("Jane Doe", "Formerly with Acme and Sports United")

        assert score(hit, "Jane Doe", company="Acme Sports Group") == 26


class TestPickBest:
    """Tests for candidate selection."""

    def test_non_profile_urls_are_skipped(self):
        """Company pages never qualify, however well they score."""
        company_page = SearchHit(
            title="Jane Doe Jane Doe",
            url="https://www.linkedin.com/company/acme",
        )

        assert not is_personal_profile(company_page)
        assert pick_best([company_page], "Jane Doe") is None

    def test_highest_score_wins(self):
        """The best scoring profile is returned."""
        weak = _profile("Someone else", slug="weak")
        strong = _profile("Jane Doe", "Example FC", slug="strong")

        best = pick_best([weak, strong], "Jane Doe", company="Example FC")

        assert best is not None
        assert best.hit is strong

    def test_ties_keep_search_order(self):
        """Equal scores keep the order the search returned."""
        first = _profile("Jane Doe", slug="first")
        second = _profile("Jane Doe", slug="second")

        ranked = rank([first, second], "Jane Doe")

        assert [c.hit for c in ranked] == [first, second]

    def test_no_hits_returns_none(self):
        """An empty result list has no best candidate."""
        assert pick_best([], "Jane Doe") is None
