"""Tests for the external profile lookup service."""

from unittest.mock import AsyncMock, PropertyMock

import pytest

from lanyard.application.services import ExternalProfileLookupService
from lanyard.domain.enrichment import (
    MissingNameError,
    SearchHit,
    SearchProviderError,
    SearchResponse,
    UpstreamSearchError,
    WebSearchProvider,
)
from lanyard.domain.shared import UpstreamConfigurationError


@pytest.fixture
def search():
    provider = AsyncMock(spec=WebSearchProvider)
    type(provider).is_configured = PropertyMock(return_value=True)
    provider.search.return_value = SearchResponse.empty()
    return provider


@pytest.fixture
def service(search) -> ExternalProfileLookupService:
    return ExternalProfileLookupService(search)


class TestLookup:
    """Tests for ExternalProfileLookupService.lookup."""

    @pytest.mark.asyncio
    async def test_restricted_basic_search(self, service, search):
        """The search is basic depth, without answer, on linkedin.com."""
        await service.lookup("Jane Doe", "Partnerships", "Example FC")

        query = search.search.await_args.args[0]
        assert query.query == "Jane Doe Partnerships Example FC site:linkedin.com/in"
        assert query.depth == "basic"
        assert not query.include_answer
        assert query.include_domains == ("linkedin.com",)

    @pytest.mark.asyncio
    async def test_best_profile_is_returned(self, service, search):
        """The highest scoring personal profile wins."""
        search.search.return_value = SearchResponse(
            hits=(
                SearchHit(
                    title="Example FC",
                    url="https://www.linkedin.com/company/example-fc",
                    content="Jane Doe Example FC",
                ),
                SearchHit(
                    title="Jane Doe - Example FC",
                    url="https://www.linkedin.com/in/janedoe",
                    content="y" * 500,
                ),
            ),
        )

        result = await service.lookup("Jane Doe", company="Example FC")

        assert result.linkedin_url == "https://www.linkedin.com/in/janedoe"
        assert result.title == "Jane Doe - Example FC"
        assert len(result.snippet) == 200
        assert result.to_dict() == {
            "linkedin_url": "https://www.linkedin.com/in/janedoe",
            "title": "Jane Doe - Example FC",
            "snippet": "y" * 200,
        }

    @pytest.mark.asyncio
    async def test_no_profile_found(self, service):
        """No personal profile gives a null URL and a message."""
        result = await service.lookup("Jane Doe")

        assert result.linkedin_url is None
        assert result.to_dict() == {
            "linkedin_url": None,
            "message": "No LinkedIn profile found",
        }

    @pytest.mark.asyncio
    async def test_missing_name(self, service, search):
        """Blank names are rejected before searching."""
        with pytest.raises(MissingNameError):
            await service.lookup("   ")

        search.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_not_configured(self, service, search):
        """Without a search key the lookup cannot run."""
        type(search).is_configured = PropertyMock(return_value=False)

        with pytest.raises(UpstreamConfigurationError):
            await service.lookup("Jane Doe")

    @pytest.mark.asyncio
    async def test_search_failure_surfaces(self, service, search):
        """Search is the whole operation here, so failures are not absorbed."""
        search.search.side_effect = SearchProviderError("Tavily API error: 503", 503)

        with pytest.raises(UpstreamSearchError):
            await service.lookup("Jane Doe")
