"""Tests for the enrichment orchestrator."""

import json
from typing import Optional

import pytest

from lanyard.application.services import ModelResolver, ProfileEnrichmentService
from lanyard.domain.enrichment import (
    EnrichmentRequest,
    GenerationModelInfo,
    GenerationProviderError,
    MissingNameError,
    RecoveryTier,
    SearchHit,
    SearchProviderError,
    SearchQuery,
    SearchResponse,
    TextGenerationProvider,
    UpstreamGenerationError,
    WebSearchProvider,
)
from lanyard.domain.enrichment.industry import APPROVED_SUBCATEGORIES
from lanyard.domain.enrichment.services import DEFAULT_ENRICHMENT
from lanyard.domain.shared import UpstreamConfigurationError
from lanyard.infrastructure.cache import InMemoryModelCache

VALID_OUTPUT = json.dumps(
    {
        "summary": [
            "Leads partnerships for a top-flight football club",
            "Built the club's first data-driven sponsorship program",
            "Speaks regularly on fan engagement",
        ],
        "industry_tags": ["Partnerships", "Fan Experience"],
    },
)


class FakeSearch(WebSearchProvider):
    def __init__(
        self,
        response: Optional[SearchResponse] = None,
        error: Optional[Exception] = None,
        configured: bool = True,
    ):
        self.response = response or SearchResponse(
            hits=(SearchHit(title="Jane Doe", url="https://example.com", content="x"),),
        )
        self.error = error
        self.configured = configured
        self.queries: list[SearchQuery] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def search(self, query: SearchQuery) -> SearchResponse:
        self.queries.append(query)
        if self.error:
            raise self.error
        return self.response


class FakeGeneration(TextGenerationProvider):
    """Returns scripted outputs; an Exception entry is raised instead."""

    def __init__(self, outputs: list, configured: bool = True):
        self.outputs = list(outputs)
        self.configured = configured
        self.calls: list[tuple[str, str, float]] = []
        self.listing = [
            GenerationModelInfo("models/gemini-1.5-flash", ("generateContent",)),
        ]

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate(self, model: str, prompt: str, temperature: float = 0.6) -> str:
        self.calls.append((model, prompt, temperature))
        output = self.outputs.pop(0)
        if isinstance(output, Exception):
            raise output
        return output

    async def list_models(self) -> list[GenerationModelInfo]:
        return self.listing


def _service(search: WebSearchProvider, generation: FakeGeneration):
    return ProfileEnrichmentService(
        search_provider=search,
        generation_provider=generation,
        model_resolver=ModelResolver(generation, InMemoryModelCache()),
        preferred_model="gemini-3-flash-preview",
    )


REQUEST = EnrichmentRequest(name="Jane Doe", company="Example FC")


class TestEnrichHappyPath:
    """Tests for the normal flow."""

    @pytest.mark.asyncio
    async def test_valid_output(self):
        """Clean output is returned with the source count."""
        search = FakeSearch()
        generation = FakeGeneration([VALID_OUTPUT])

        outcome = await _service(search, generation).enrich(REQUEST)

        assert outcome.result.industry_tags == ("Partnerships", "Fan Experience")
        assert outcome.result.sources_found == 1
        assert outcome.recovered_by is RecoveryTier.DIRECT
        assert outcome.model_used == "gemini-3-flash-preview"
        assert not outcome.search_degraded
        assert not outcome.fallback_model_used
        assert not outcome.strict_retry_used

    @pytest.mark.asyncio
    async def test_generation_settings(self):
        """The first call uses the preferred model at temperature 0.6."""
        generation = FakeGeneration([VALID_OUTPUT])

        await _service(FakeSearch(), generation).enrich(REQUEST)

        model, prompt, temperature = generation.calls[0]
        assert model == "gemini-3-flash-preview"
        assert temperature == 0.6
        assert "Company: Example FC" in prompt

    @pytest.mark.asyncio
    async def test_search_query(self):
        """Search runs with the enrichment query."""
        search = FakeSearch()

        await _service(search, FakeGeneration([VALID_OUTPUT])).enrich(REQUEST)

        assert search.queries[0].query.startswith("Jane Doe Example FC")
        assert search.queries[0].depth == "advanced"


class TestValidation:
    """Tests for failures raised before any network call."""

    @pytest.mark.asyncio
    async def test_missing_name(self):
        """Whitespace names are rejected."""
        search = FakeSearch()
        generation = FakeGeneration([])

        with pytest.raises(MissingNameError):
            await _service(search, generation).enrich(EnrichmentRequest(name="  "))

        assert search.queries == []

    @pytest.mark.asyncio
    async def test_generation_not_configured(self):
        """A missing generation key is a configuration error."""
        search = FakeSearch()

        with pytest.raises(UpstreamConfigurationError):
            await _service(search, FakeGeneration([], configured=False)).enrich(
                REQUEST,
            )

        assert search.queries == []


class TestSearchDegradation:
    """Tests for best-effort search."""

    @pytest.mark.asyncio
    async def test_search_failure_is_absorbed(self):
        """A failing search still yields a result and records why."""
        search = FakeSearch(error=SearchProviderError("Tavily API error: 500", 500))

        outcome = await _service(search, FakeGeneration([VALID_OUTPUT])).enrich(
            REQUEST,
        )

        assert outcome.search_degraded
        assert outcome.search_error == "Tavily API error: 500"
        assert outcome.result.sources_found == 0

    @pytest.mark.asyncio
    async def test_missing_search_key_is_absorbed(self):
        """No search key only degrades the context."""
        search = FakeSearch(configured=False)
        generation = FakeGeneration([VALID_OUTPUT])

        outcome = await _service(search, generation).enrich(REQUEST)

        assert outcome.search_degraded
        assert search.queries == []
        assert "Limited information available about Jane Doe" in generation.calls[0][1]


class TestModelFallback:
    """Tests for the fallback model path."""

    @pytest.mark.asyncio
    async def test_unavailable_model_falls_back(self):
        """A 404 on the preferred model retries once on the resolved one."""
        generation = FakeGeneration(
            [GenerationProviderError("model not found", 404), VALID_OUTPUT],
        )

        outcome = await _service(FakeSearch(), generation).enrich(REQUEST)

        assert outcome.fallback_model_used
        assert outcome.model_used == "gemini-1.5-flash"
        assert [c[0] for c in generation.calls] == [
            "gemini-3-flash-preview",
            "gemini-1.5-flash",
        ]

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self):
        """Quota errors surface immediately as upstream failures."""
        generation = FakeGeneration([GenerationProviderError("quota", 429)])

        with pytest.raises(UpstreamGenerationError):
            await _service(FakeSearch(), generation).enrich(REQUEST)

        assert len(generation.calls) == 1

    @pytest.mark.asyncio
    async def test_fallback_failure_surfaces(self):
        """If the fallback model fails too, the request fails."""
        generation = FakeGeneration(
            [
                GenerationProviderError("model not found", 404),
                GenerationProviderError("server error", 500),
            ],
        )

        with pytest.raises(UpstreamGenerationError):
            await _service(FakeSearch(), generation).enrich(REQUEST)

    @pytest.mark.asyncio
    async def test_no_capable_model_surfaces(self):
        """An empty capability listing is an upstream failure."""
        generation = FakeGeneration([GenerationProviderError("not found", 404)])
        generation.listing = []

        with pytest.raises(UpstreamGenerationError):
            await _service(FakeSearch(), generation).enrich(REQUEST)


class TestMalformedOutput:
    """Tests for recovery of bad model output."""

    @pytest.mark.asyncio
    async def test_garbage_twice_uses_default(self):
        """Two unparseable outputs still give a bounded result."""
        generation = FakeGeneration(["I cannot help with that.", "Still no JSON"])

        outcome = await _service(FakeSearch(), generation).enrich(REQUEST)

        assert len(outcome.result.summary) == 3
        assert 1 <= len(outcome.result.industry_tags) <= 3
        assert outcome.result.summary == DEFAULT_ENRICHMENT.summary
        assert outcome.recovered_by is RecoveryTier.DEFAULT
        assert outcome.used_default_result
        assert outcome.strict_retry_used

    @pytest.mark.asyncio
    async def test_strict_retry_recovers(self):
        """The stricter prompt runs at temperature 0.2 on the same model."""
        generation = FakeGeneration(["nonsense", VALID_OUTPUT])

        outcome = await _service(FakeSearch(), generation).enrich(REQUEST)

        assert outcome.strict_retry_used
        assert outcome.recovered_by is RecoveryTier.DIRECT
        model, prompt, temperature = generation.calls[1]
        assert model == "gemini-3-flash-preview"
        assert temperature == 0.2
        assert "Return ONLY a valid JSON object" in prompt

    @pytest.mark.asyncio
    async def test_strict_retry_error_uses_default(self):
        """A provider error on the strict retry degrades to the default."""
        generation = FakeGeneration(
            ["nonsense", GenerationProviderError("server error", 500)],
        )

        outcome = await _service(FakeSearch(), generation).enrich(REQUEST)

        assert outcome.used_default_result

    @pytest.mark.asyncio
    async def test_unapproved_tags_are_dropped(self):
        """Only approved subcategories reach the caller."""
        raw = json.dumps(
            {"summary": ["a", "b", "c"], "industry_tags": ["Crypto", "analytics"]},
        )

        outcome = await _service(FakeSearch(), FakeGeneration([raw])).enrich(REQUEST)

        assert outcome.result.industry_tags == ("Analytics",)
        assert set(outcome.result.industry_tags) <= set(APPROVED_SUBCATEGORIES)
