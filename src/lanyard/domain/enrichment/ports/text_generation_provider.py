"""Text generation port (interface)."""

from abc import ABC, abstractmethod

from lanyard.domain.enrichment.value_objects import GenerationModelInfo


class TextGenerationProvider(ABC):
    """
    Abstract interface for the external text generation service.

    Responsibilities:
    - Complete a prompt against a named model, expecting JSON text back
    - List every model the provider exposes with its supported operations
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the credential needed to call the service is present."""

    @abstractmethod
    async def generate(
        self,
        model: str,
        prompt: str,
        temperature: float = 0.6,
    ) -> str:
        """
        Complete ``prompt`` with ``model`` and return the raw text.

        Raises
        ------
        GenerationProviderError
            On transport errors, timeouts and non-success responses. The
            ``status_code`` attribute carries the HTTP status when known.
        """

    @abstractmethod
    async def list_models(self) -> list[GenerationModelInfo]:
        """
        Capability listing: every model with its supported operations.

        Raises
        ------
        GenerationProviderError
            If the listing call fails
        """
