"""Web search port (interface)."""

from abc import ABC, abstractmethod

from lanyard.domain.enrichment.value_objects import SearchQuery, SearchResponse


class WebSearchProvider(ABC):
    """
    Abstract interface for the external web search service.

    Usage in Application Layer:
        >>> provider = TavilySearchProvider(api_key="...")
        >>> response = await provider.search(SearchQuery("Jane Doe biography"))
        >>> response.sources_found
        5
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the credential needed to call the service is present."""

    @abstractmethod
    async def search(self, query: SearchQuery) -> SearchResponse:
        """
        Run one search.

        Raises
        ------
        SearchProviderError
            If the service is unreachable, times out, rejects the request
            or is not configured
        """
