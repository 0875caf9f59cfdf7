"""Enriches an attendee profile with a generated summary and tags."""

import logging
from typing import Optional

from lanyard.application.services.model_resolver import (
    ModelResolver,
    is_model_unavailable,
)
from lanyard.domain.enrichment import (
    EnrichmentOutcome,
    EnrichmentRequest,
    GenerationProviderError,
    MissingNameError,
    NoCapableModelFoundError,
    RecoveryTier,
    SearchProviderError,
    SearchQuery,
    SearchResponse,
    TextGenerationProvider,
    UpstreamGenerationError,
    WebSearchProvider,
)
from lanyard.domain.enrichment.services import (
    DEFAULT_ENRICHMENT,
    RecoveryResult,
    ResponseRecoverer,
    build_context,
    build_enrichment_prompt,
    build_enrichment_search_query,
    build_strict_prompt,
)
from lanyard.domain.shared import UpstreamConfigurationError

logger = logging.getLogger(__name__)

GENERATION_TEMPERATURE = 0.6
STRICT_TEMPERATURE = 0.2


class ProfileEnrichmentService:
    """
    Search, build context, generate and recover, in that order.

    Search is best effort: any search failure is logged and recorded on the
    outcome, and generation proceeds from the user's own fields. Generation
    failures are the only errors that reach the caller.

    Parameters
    ----------
    search_provider
        Web search adapter
    generation_provider
        Text generation adapter
    model_resolver
        Picks a fallback model when the preferred one is unavailable
    preferred_model
        Model tried first for every request
    """

    def __init__(
        self,
        search_provider: WebSearchProvider,
        generation_provider: TextGenerationProvider,
        model_resolver: ModelResolver,
        preferred_model: str,
    ):
        self._search = search_provider
        self._generation = generation_provider
        self._resolver = model_resolver
        self._preferred_model = preferred_model
        self._recoverer = ResponseRecoverer(restrict_to_vocabulary=True)

    async def enrich(self, request: EnrichmentRequest) -> EnrichmentOutcome:
        """
        Produce a bounded summary and tag set for one person.

        Raises
        ------
        MissingNameError
            If the request has no usable name
        UpstreamConfigurationError
            If the generation service has no credential
        UpstreamGenerationError
            If generation fails on the preferred and the fallback model
        """
        if not request.has_name:
            raise MissingNameError
        if not self._generation.is_configured:
            raise UpstreamConfigurationError("Text generation", "GEMINI_API_KEY")

        logger.info(
            "Enriching profile: %s%s",
            request.name,
            f" at {request.company}" if request.company else "",
        )

        search_response, search_error = await self._run_search(request)
        context = build_context(search_response, request.about, request.name)
        prompt = build_enrichment_prompt(request, context)

        raw_text, model_used, fallback_used = await self._generate(prompt)

        strict_retry_used = False
        recovered = self._recoverer.attempt(raw_text)
        if recovered is None:
            logger.warning("Could not parse generation output, retrying strictly")
            strict_retry_used = True
            recovered = await self._strict_retry(prompt, model_used)

        return EnrichmentOutcome(
            result=recovered.result.with_sources(search_response.sources_found),
            model_used=model_used,
            recovered_by=recovered.tier,
            search_degraded=search_error is not None,
            search_error=search_error,
            fallback_model_used=fallback_used,
            strict_retry_used=strict_retry_used,
        )

    async def _run_search(
        self,
        request: EnrichmentRequest,
    ) -> tuple[SearchResponse, Optional[str]]:
        query = SearchQuery(build_enrichment_search_query(request))
        try:
            if not self._search.is_configured:
                raise SearchProviderError("Web search is not configured")
            response = await self._search.search(query)
        except SearchProviderError as e:
            logger.warning("Search failed, continuing without web context: %s", e)
            return SearchResponse.empty(), e.message

        logger.info("Search found %d results", response.sources_found)
        return response, None

    async def _generate(self, prompt: str) -> tuple[str, str, bool]:
        model = self._resolver.resolve_model(self._preferred_model)
        try:
            text = await self._generation.generate(
                model,
                prompt,
                temperature=GENERATION_TEMPERATURE,
            )
        except GenerationProviderError as e:
            if not is_model_unavailable(e):
                raise UpstreamGenerationError(model, e.message) from e
            logger.warning("Model %s unavailable, resolving a fallback", model)
        else:
            return text, model, False

        try:
            fallback = await self._resolver.resolve_fallback_model()
            text = await self._generation.generate(
                fallback,
                prompt,
                temperature=GENERATION_TEMPERATURE,
            )
        except NoCapableModelFoundError as e:
            raise UpstreamGenerationError(model, "no capable model") from e
        except GenerationProviderError as e:
            raise UpstreamGenerationError(model, e.message) from e

        logger.info("Generated with fallback model %s", fallback)
        return text, fallback, True

    async def _strict_retry(self, prompt: str, model: str) -> RecoveryResult:
        try:
            text = await self._generation.generate(
                model,
                build_strict_prompt(prompt),
                temperature=STRICT_TEMPERATURE,
            )
        except GenerationProviderError as e:
            logger.warning("Strict retry failed: %s", e.message)
            text = ""

        recovered = self._recoverer.attempt(text)
        if recovered is None:
            logger.warning("Strict retry output still invalid, using default")
            return RecoveryResult(DEFAULT_ENRICHMENT, RecoveryTier.DEFAULT)
        return recovered
