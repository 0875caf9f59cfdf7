"""Tavily implementation of the WebSearchProvider port."""

import logging
from typing import Any, Optional

import httpx

from lanyard.domain.enrichment import (
    SearchHit,
    SearchProviderError,
    SearchQuery,
    SearchResponse,
    WebSearchProvider,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.tavily.com"


class TavilySearchProvider(WebSearchProvider):
    """Calls the Tavily search REST endpoint.

    Every failure (missing key, transport error, timeout, non-200 status,
    unreadable body) surfaces as ``SearchProviderError``.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key or None
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return self._api_key is not None

    def _build_payload(self, query: SearchQuery) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "api_key": self._api_key,
            "query": query.query,
            "max_results": query.max_results,
            "search_depth": query.depth,
            "include_answer": query.include_answer,
            "include_raw_content": False,
        }
        if query.include_domains:
            payload["include_domains"] = list(query.include_domains)
        return payload

    async def search(self, query: SearchQuery) -> SearchResponse:
        if not self.is_configured:
            raise SearchProviderError("Missing Tavily API key")

        logger.info("Searching: %r", query.query)
        timeout = httpx.Timeout(self._timeout, connect=5.0)
        try:
            async with httpx.AsyncClient(
                timeout=timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    f"{self._base_url}/search",
                    json=self._build_payload(query),
                )
        except httpx.TimeoutException as e:
            msg = f"Tavily request timed out after {self._timeout:.1f}s"
            raise SearchProviderError(msg) from e
        except httpx.HTTPError as e:
            msg = f"Could not reach Tavily: {type(e).__name__}"
            raise SearchProviderError(msg) from e

        if response.status_code != 200:
            raise SearchProviderError(
                f"Tavily API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            msg = "Tavily returned an unreadable response"
            raise SearchProviderError(msg) from e

        return self._parse_response(data)

    def _parse_response(self, data: Any) -> SearchResponse:
        if not isinstance(data, dict):
            return SearchResponse.empty()

        results = data.get("results") or []
        hits = tuple(
            SearchHit.from_dict(item) for item in results if isinstance(item, dict)
        )
        answer = data.get("answer")
        return SearchResponse(
            hits=hits,
            answer=answer if isinstance(answer, str) and answer else None,
        )
