from lanyard.infrastructure.integration.search.tavily_search_provider import (
    TavilySearchProvider,
)

__all__ = ["TavilySearchProvider"]
