from lanyard.infrastructure.cache.in_memory_model_cache import InMemoryModelCache

__all__ = ["InMemoryModelCache"]
