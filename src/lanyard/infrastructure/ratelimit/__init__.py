from lanyard.infrastructure.ratelimit.in_memory_store import InMemoryRateLimitStore
from lanyard.infrastructure.ratelimit.sqlalchemy_store import SQLAlchemyRateLimitStore

__all__ = ["InMemoryRateLimitStore", "SQLAlchemyRateLimitStore"]
