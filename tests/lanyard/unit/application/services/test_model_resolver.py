"""Tests for generation model resolution."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from lanyard.application.services import (
    ModelResolver,
    choose_model,
    is_model_unavailable,
)
from lanyard.domain.enrichment import (
    GenerationModelInfo,
    GenerationProviderError,
    NoCapableModelFoundError,
)
from lanyard.infrastructure.cache import InMemoryModelCache

START = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _model(name: str, *methods: str) -> GenerationModelInfo:
    return GenerationModelInfo(name=name, supported_methods=methods)


CAPABLE_LISTING = [
    _model("models/embedding-001", "embedContent"),
    _model("models/gemini-1.5-pro", "generateContent"),
    _model("models/gemini-1.5-flash", "generateContent", "countTokens"),
]


@pytest.fixture
def clock():
    clock = MagicMock(return_value=START)
    return clock


@pytest.fixture
def provider():
    provider = AsyncMock()
    provider.list_models.return_value = list(CAPABLE_LISTING)
    return provider


@pytest.fixture
def resolver(provider, clock) -> ModelResolver:
    return ModelResolver(provider, InMemoryModelCache(), clock=clock)


class TestIsModelUnavailable:
    """Tests for error classification."""

    def test_http_404(self):
        """A 404 from the provider means the model is gone."""
        assert is_model_unavailable(GenerationProviderError("boom", status_code=404))

    def test_not_found_message(self):
        """Provider messages saying 'not found' count."""
        error = GenerationProviderError("models/x is NOT FOUND for API version")

        assert is_model_unavailable(error)

    def test_not_supported_message(self):
        """Models that cannot generate count too."""
        error = GenerationProviderError(
            "model is not supported for generateContent",
            status_code=400,
        )

        assert is_model_unavailable(error)

    def test_other_errors(self):
        """Quota and server errors are not model problems."""
        assert not is_model_unavailable(
            GenerationProviderError("Quota exceeded", status_code=429),
        )
        assert not is_model_unavailable(
            GenerationProviderError("Internal error", status_code=500),
        )


class TestChooseModel:
    """Tests for preference-ordered selection."""

    def test_preference_order_wins(self):
        """The earliest preferred capable model is chosen."""
        chosen = choose_model(CAPABLE_LISTING)

        assert chosen is not None
        assert chosen.name == "models/gemini-1.5-flash"

    def test_first_capable_when_none_preferred(self):
        """Without a preferred model the first capable one is used."""
        listing = [
            _model("models/embedding-001", "embedContent"),
            _model("models/custom-a", "generateContent"),
            _model("models/custom-b", "generateContent"),
        ]

        chosen = choose_model(listing)

        assert chosen is not None
        assert chosen.name == "models/custom-a"

    def test_no_capable_model(self):
        """Only non-generating models gives None."""
        assert choose_model([_model("models/embedding-001", "embedContent")]) is None


class TestModelResolver:
    """Tests for ModelResolver."""

    def test_resolve_model_strips_prefix(self, resolver):
        """Configured names may carry the models/ prefix."""
        assert resolver.resolve_model("models/gemini-pro") == "gemini-pro"
        assert resolver.resolve_model("gemini-pro") == "gemini-pro"

    @pytest.mark.asyncio
    async def test_fallback_strips_prefix(self, resolver):
        """The resolved name is returned without the models/ prefix."""
        assert await resolver.resolve_fallback_model() == "gemini-1.5-flash"

    @pytest.mark.asyncio
    async def test_cache_hit_skips_listing(self, resolver, provider):
        """A second resolution within the TTL uses the cache."""
        first = await resolver.resolve_fallback_model()
        second = await resolver.resolve_fallback_model()

        assert first == second
        provider.list_models.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_cache_expires(self, resolver, provider, clock):
        """After the TTL the listing runs again."""
        await resolver.resolve_fallback_model()
        clock.return_value = START + timedelta(minutes=10)

        await resolver.resolve_fallback_model()

        assert provider.list_models.await_count == 2

    @pytest.mark.asyncio
    async def test_invalidate_forces_listing(self, resolver, provider):
        """invalidate drops the cached choice."""
        await resolver.resolve_fallback_model()
        resolver.invalidate()

        await resolver.resolve_fallback_model()

        assert provider.list_models.await_count == 2

    @pytest.mark.asyncio
    async def test_no_capable_model(self, resolver, provider):
        """A listing without generation support raises."""
        provider.list_models.return_value = [
            _model("models/embedding-001", "embedContent"),
        ]

        with pytest.raises(NoCapableModelFoundError) as exc_info:
            await resolver.resolve_fallback_model()

        assert exc_info.value.available == ["models/embedding-001"]
        assert resolver.cached_model() is None
