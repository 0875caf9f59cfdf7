"""Gemini REST implementation of the TextGenerationProvider port."""

import logging
from typing import Any, Optional

import httpx

from lanyard.domain.enrichment import (
    GenerationModelInfo,
    GenerationProviderError,
    TextGenerationProvider,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
API_VERSION = "v1beta"


class GeminiGenerationProvider(TextGenerationProvider):
    """
    Talks to the Generative Language REST API with a plain API key.

    ``generate`` asks for ``application/json`` output; the caller still has
    to cope with text that is not valid JSON.
    """

    def __init__(  # NOQA: PLR0913
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        listing_timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key or None
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._listing_timeout = listing_timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return self._api_key is not None

    def _model_path(self, model: str) -> str:
        name = model if model.startswith("models/") else f"models/{model}"
        return f"{self._base_url}/{API_VERSION}/{name}"

    async def generate(
        self,
        model: str,
        prompt: str,
        temperature: float = 0.6,
    ) -> str:
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "temperature": temperature,
            },
        }
        logger.debug("Generating with %s (temperature %.1f)", model, temperature)
        data = await self._request(
            "POST",
            f"{self._model_path(model)}:generateContent",
            self._timeout,
            json=payload,
        )
        return self._extract_text(data)

    async def list_models(self) -> list[GenerationModelInfo]:
        data = await self._request(
            "GET",
            f"{self._base_url}/{API_VERSION}/models",
            self._listing_timeout,
        )
        models = data.get("models") or []
        return [
            GenerationModelInfo(
                name=str(item.get("name", "")),
                supported_methods=tuple(item.get("supportedGenerationMethods") or ()),
            )
            for item in models
            if isinstance(item, dict) and item.get("name")
        ]

    async def _request(
        self,
        method: str,
        url: str,
        timeout: float,
        json: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        if not self.is_configured:
            raise GenerationProviderError("Missing Gemini API key")

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(timeout, connect=5.0),
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params={"key": self._api_key},
                    json=json,
                )
        except httpx.TimeoutException as e:
            msg = f"Gemini request timed out after {timeout:.1f}s"
            raise GenerationProviderError(msg) from e
        except httpx.HTTPError as e:
            msg = f"Could not reach Gemini: {type(e).__name__}"
            raise GenerationProviderError(msg) from e

        if response.status_code != 200:
            raise GenerationProviderError(
                f"Gemini API error {response.status_code}: "
                f"{self._error_message(response)}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            msg = "Gemini returned an unreadable response"
            raise GenerationProviderError(msg) from e
        if not isinstance(data, dict):
            msg = "Gemini returned an unexpected response"
            raise GenerationProviderError(msg)
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            error = response.json().get("error") or {}
            return str(error.get("message") or response.reason_phrase)
        except (ValueError, AttributeError):
            return response.text[:200] or response.reason_phrase

    @staticmethod
    def _extract_text(data: dict[str, Any]) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            msg = "Gemini returned no candidates"
            raise GenerationProviderError(msg)
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(str(part.get("text", "")) for part in parts)
