from lanyard.infrastructure.integration.ai.gemini_generation_provider import (
    GeminiGenerationProvider,
)

__all__ = ["GeminiGenerationProvider"]
