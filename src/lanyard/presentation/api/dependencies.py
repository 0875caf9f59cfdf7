"""FastAPI dependency injection for the Lanyard API.

Provides dependencies for:
- Database sessions
- Caller identity (from the identity provider's bearer token)
- Rate limiter, outbound adapters and application services
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lanyard.application.services import (
    ExternalProfileLookupService,
    ModelResolver,
    ProfileEnrichmentService,
)
from lanyard.domain.enrichment import (
    ModelCache,
    TextGenerationProvider,
    WebSearchProvider,
)
from lanyard.domain.ratelimit import RateLimiter, RateLimitPolicy, RateLimitStore
from lanyard.domain.shared import AuthenticationRequiredError
from lanyard.infrastructure.cache import InMemoryModelCache
from lanyard.infrastructure.integration.ai import GeminiGenerationProvider
from lanyard.infrastructure.integration.search import TavilySearchProvider
from lanyard.infrastructure.persistence.sqlalchemy.repositories import (
    AttendeeRepositorySQLAlchemy,
)
from lanyard.infrastructure.ratelimit import (
    InMemoryRateLimitStore,
    SQLAlchemyRateLimitStore,
)
from lanyard.infrastructure.security import (
    InvalidTokenError,
    JWTVerifier,
    VerifiedIdentity,
)
from lanyard_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


def _secret(value) -> Optional[str]:
    if value is None:
        return None
    return value.get_secret_value() or None


@lru_cache()
def get_database_url() -> str:
    url = get_settings().database_url

    # Ensure data directory exists for SQLite files
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Rate Limiting
# -----------------------------------------------------------------------------


def build_rate_limit_policies(settings: Settings) -> list[RateLimitPolicy]:
    window = settings.rate_limit_window_seconds
    return [
        RateLimitPolicy("strict", settings.rate_limit_strict, window),
        RateLimitPolicy(
            "expensive",
            settings.rate_limit_expensive,
            window,
            authenticated_limit=settings.rate_limit_expensive_authenticated,
        ),
        RateLimitPolicy("lookup", settings.rate_limit_lookup, window),
    ]


@lru_cache(maxsize=1)
def get_rate_limit_store() -> RateLimitStore:
    if get_settings().rate_limit_backend == "database":
        return SQLAlchemyRateLimitStore(get_session_maker())
    return InMemoryRateLimitStore()


@lru_cache(maxsize=1)
def get_rate_limiter() -> RateLimiter:
    """Process-wide limiter; counters live in the configured store."""
    return RateLimiter(
        build_rate_limit_policies(get_settings()),
        get_rate_limit_store(),
    )


# -----------------------------------------------------------------------------
# Outbound Adapters & Application Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_model_cache() -> ModelCache:
    return InMemoryModelCache()


def get_search_provider() -> WebSearchProvider:
    settings = get_settings()
    return TavilySearchProvider(
        api_key=_secret(settings.tavily_api_key),
        base_url=settings.tavily_base_url,
        timeout=settings.search_timeout,
    )


def get_generation_provider() -> TextGenerationProvider:
    settings = get_settings()
    return GeminiGenerationProvider(
        api_key=_secret(settings.gemini_api_key),
        base_url=settings.gemini_base_url,
        timeout=settings.generation_timeout,
        listing_timeout=settings.model_listing_timeout,
    )


def get_model_resolver(
    provider: TextGenerationProvider = Depends(get_generation_provider),
    cache: ModelCache = Depends(get_model_cache),
) -> ModelResolver:
    return ModelResolver(
        provider,
        cache,
        ttl_seconds=get_settings().model_cache_ttl_seconds,
    )


def get_enrichment_service(
    search_provider: WebSearchProvider = Depends(get_search_provider),
    generation_provider: TextGenerationProvider = Depends(get_generation_provider),
    model_resolver: ModelResolver = Depends(get_model_resolver),
) -> ProfileEnrichmentService:
    return ProfileEnrichmentService(
        search_provider=search_provider,
        generation_provider=generation_provider,
        model_resolver=model_resolver,
        preferred_model=get_settings().gemini_model,
    )


def get_profile_lookup_service(
    search_provider: WebSearchProvider = Depends(get_search_provider),
) -> ExternalProfileLookupService:
    return ExternalProfileLookupService(search_provider)


async def get_attendee_repository(
    session: DBSession,
) -> AttendeeRepositorySQLAlchemy:
    return AttendeeRepositorySQLAlchemy(session)


EnrichmentService = Annotated[
    ProfileEnrichmentService,
    Depends(get_enrichment_service),
]
ProfileLookupService = Annotated[
    ExternalProfileLookupService,
    Depends(get_profile_lookup_service),
]
AttendeeRepo = Annotated[
    AttendeeRepositorySQLAlchemy,
    Depends(get_attendee_repository),
]


# -----------------------------------------------------------------------------
# Caller Identity (JWT Authentication)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_jwt_verifier() -> Optional[JWTVerifier]:
    """Verifier for identity provider tokens, or None when not configured."""
    settings = get_settings()
    secret = settings.auth_jwt_secret.get_secret_value()
    if not secret:
        logger.warning("AUTH_JWT_SECRET not set; every caller is anonymous")
        return None
    return JWTVerifier(secret, audience=settings.auth_jwt_audience)


async def get_optional_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    verifier: Optional[JWTVerifier] = Depends(get_jwt_verifier),
) -> Optional[VerifiedIdentity]:
    """
    Identity of the caller if a valid bearer token is present.

    Invalid tokens are treated like missing ones; endpoints that need an
    identity reject the request via ``get_current_identity``.
    """
    if credentials is None or verifier is None:
        return None

    try:
        return verifier.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        return None


OptionalIdentity = Annotated[
    Optional[VerifiedIdentity],
    Depends(get_optional_identity),
]


async def get_current_identity(identity: OptionalIdentity) -> VerifiedIdentity:
    """
    Require a verified caller.

    Raises
    ------
    AuthenticationRequiredError
        401 if the token is missing or invalid
    """
    if identity is None:
        raise AuthenticationRequiredError
    return identity


CurrentIdentity = Annotated[VerifiedIdentity, Depends(get_current_identity)]
