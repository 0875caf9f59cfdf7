"""Fixtures for API endpoint tests.

The app runs against a temporary SQLite file with ``NullPool`` so every
request opens its connection in the TestClient's own event loop. Outbound
search and generation are replaced by scripted fakes.
"""

import asyncio
from typing import Optional
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from lanyard.domain.attendee import Attendee
from lanyard.domain.enrichment import (
    GenerationModelInfo,
    SearchQuery,
    SearchResponse,
    TextGenerationProvider,
    WebSearchProvider,
)
from lanyard.domain.ratelimit import RateLimiter
from lanyard.infrastructure.cache import InMemoryModelCache
from lanyard.infrastructure.persistence.sqlalchemy.models import Base
from lanyard.infrastructure.persistence.sqlalchemy.repositories import (
    AttendeeRepositorySQLAlchemy,
)
from lanyard.infrastructure.ratelimit import InMemoryRateLimitStore
from lanyard.infrastructure.security import JWTVerifier
from lanyard.presentation.api.app import API_V1_PREFIX, create_app
from lanyard.presentation.api.dependencies import (
    build_rate_limit_policies,
    get_db_session,
    get_generation_provider,
    get_jwt_verifier,
    get_model_cache,
    get_rate_limiter,
    get_search_provider,
)
from lanyard_config.settings import Settings, get_settings

TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_USER_ID_2 = UUID("00000000-0000-0000-0000-000000000001")
TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


class FakeSearch(WebSearchProvider):
    def __init__(self) -> None:
        self.response = SearchResponse.empty()
        self.error: Optional[Exception] = None
        self.configured = True

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def search(self, query: SearchQuery) -> SearchResponse:
        if self.error:
            raise self.error
        return self.response


class FakeGeneration(TextGenerationProvider):
    """Returns scripted outputs in order; Exception entries are raised."""

    def __init__(self) -> None:
        self.outputs: list = []
        self.configured = True

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate(self, model: str, prompt: str, temperature: float = 0.6) -> str:
        output = self.outputs.pop(0)
        if isinstance(output, Exception):
            raise output
        return output

    async def list_models(self) -> list[GenerationModelInfo]:
        return [GenerationModelInfo("models/gemini-1.5-flash", ("generateContent",))]


def _run(coro):
    """Run a coroutine in a fresh event loop, apart from TestClient's."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'lanyard-test.db'}",
        auth_jwt_secret=TEST_JWT_SECRET,
        auth_jwt_audience="authenticated",
        rate_limit_lookup=5,
        rate_limit_strict=5,
        rate_limit_expensive=3,
        rate_limit_expensive_authenticated=6,
    )


@pytest.fixture
def async_engine(api_settings):
    engine = create_async_engine(api_settings.database_url, poolclass=NullPool)

    async def _setup():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    _run(_setup())
    yield engine
    _run(engine.dispose())


@pytest.fixture
def session_maker(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def seed_attendees(session_maker):
    """Insert attendees and return them."""

    def _seed(*attendees: Attendee) -> tuple[Attendee, ...]:
        async def _insert():
            async with session_maker() as session:
                repo = AttendeeRepositorySQLAlchemy(session)
                for attendee in attendees:
                    await repo.save(attendee)
                await session.commit()

        _run(_insert())
        return attendees

    return _seed


@pytest.fixture
def fake_search() -> FakeSearch:
    return FakeSearch()


@pytest.fixture
def fake_generation() -> FakeGeneration:
    return FakeGeneration()


@pytest.fixture
def test_user_id() -> UUID:
    return TEST_USER_ID


@pytest.fixture
def jwt_verifier() -> JWTVerifier:
    return JWTVerifier(TEST_JWT_SECRET, audience="authenticated")


@pytest.fixture
def auth_headers(jwt_verifier) -> dict:
    token = jwt_verifier.issue(TEST_USER_ID, "jane@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(jwt_verifier) -> dict:
    token = jwt_verifier.issue(TEST_USER_ID_2, "someone@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def app(
    api_settings,
    session_maker,
    fake_search,
    fake_generation,
    jwt_verifier,
):
    """App with the database, outbound services and limiter overridden."""
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    limiter = RateLimiter(
        build_rate_limit_policies(api_settings),
        InMemoryRateLimitStore(),
    )
    model_cache = InMemoryModelCache()

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_settings] = lambda: api_settings
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    app.dependency_overrides[get_search_provider] = lambda: fake_search
    app.dependency_overrides[get_generation_provider] = lambda: fake_generation
    app.dependency_overrides[get_model_cache] = lambda: model_cache
    app.dependency_overrides[get_jwt_verifier] = lambda: jwt_verifier
    return app


@pytest.fixture
def test_client(app) -> TestClient:
    return TestClient(app)
