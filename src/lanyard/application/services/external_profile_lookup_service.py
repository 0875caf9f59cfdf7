"""Finds the most likely public professional profile page for a person."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from lanyard.domain.enrichment import (
    MissingNameError,
    SearchProviderError,
    SearchQuery,
    UpstreamSearchError,
    WebSearchProvider,
)
from lanyard.domain.enrichment.services import build_profile_search_query, pick_best
from lanyard.domain.shared import UpstreamConfigurationError

logger = logging.getLogger(__name__)

PROFILE_DOMAINS = ("linkedin.com",)
SNIPPET_LENGTH = 200
NO_PROFILE_MESSAGE = "No LinkedIn profile found"


@dataclass(frozen=True)
class ProfileLookupResult:
    linkedin_url: Optional[str]
    title: Optional[str] = None
    snippet: Optional[str] = None
    score: int = 0
    message: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        if self.linkedin_url is None:
            return {"linkedin_url": None, "message": self.message}
        return {
            "linkedin_url": self.linkedin_url,
            "title": self.title,
            "snippet": self.snippet,
        }


class ExternalProfileLookupService:
    """Runs a profile-restricted search and keeps the best scored hit."""

    def __init__(self, search_provider: WebSearchProvider):
        self._search = search_provider

    async def lookup(
        self,
        name: str,
        job_title: Optional[str] = None,
        company: Optional[str] = None,
    ) -> ProfileLookupResult:
        name = (name or "").strip()
        if not name:
            raise MissingNameError
        if not self._search.is_configured:
            raise UpstreamConfigurationError("LinkedIn lookup", "TAVILY_API_KEY")

        query = SearchQuery(
            query=build_profile_search_query(name, job_title, company),
            depth="basic",
            include_answer=False,
            include_domains=PROFILE_DOMAINS,
        )
        try:
            response = await self._search.search(query)
        except SearchProviderError as e:
            raise UpstreamSearchError(e.message) from e

        best = pick_best(response.hits, name, job_title, company)
        if best is None:
            logger.info("No profile page among %d results", response.sources_found)
            return ProfileLookupResult(linkedin_url=None, message=NO_PROFILE_MESSAGE)

        logger.info("Best profile match (score %d): %s", best.score, best.hit.url)
        return ProfileLookupResult(
            linkedin_url=best.hit.url,
            title=best.hit.title or None,
            snippet=best.hit.content[:SNIPPET_LENGTH] or None,
            score=best.score,
        )
