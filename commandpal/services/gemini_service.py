"""Adapter for Gemini's generateContent endpoint."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from commandpal.config import Settings
from commandpal.exceptions import (
    ConfigurationError,
    EmptyGenerationError,
    MalformedProviderResponseError,
    ProviderRequestError,
    ProviderUnavailableError,
)
from commandpal.models import GenerationConfig, SafetySetting

logger = logging.getLogger(__name__)


class GeminiService:
    """Wrapper around Gemini's text generation endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Settings,
        safety_settings: Iterable[SafetySetting] = (),
    ) -> None:
        self._client = client
        self._settings = settings
        self._safety_settings = tuple(safety_settings)

    async def generate(self, prompt: str, generation_config: GenerationConfig) -> str:
        """Send ``prompt`` to Gemini and return the first candidate's text."""

        api_key = self._settings.gemini_api_key
        if not api_key:
            logger.error("Gemini API key not found")
            raise ConfigurationError()

        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": generation_config.model_dump(by_alias=True),
            "safetySettings": [
                setting.model_dump(by_alias=True) for setting in self._safety_settings
            ],
        }

        try:
            response = await self._client.post(
                self._settings.generate_content_url,
                params={"key": api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Gemini API error",
                extra={
                    "status_code": exc.response.status_code,
                    "reason": exc.response.reason_phrase,
                    "response_text": exc.response.text,
                },
            )
            raise ProviderUnavailableError(
                f"API Error: {exc.response.status_code} {exc.response.reason_phrase}",
                provider_status=exc.response.status_code,
                provider_body=exc.response.text,
            ) from exc
        except httpx.HTTPError as exc:
            logger.exception("Unexpected Gemini HTTP error")
            raise ProviderRequestError() from exc

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Gemini response is not JSON", extra={"raw_response": response.text})
            raise MalformedProviderResponseError() from exc

        return extract_text(data)


def extract_text(data: Any) -> str:
    """Unwrap ``candidates[0].content.parts[0].text`` and trim it."""

    try:
        candidate = data["candidates"][0]
        content = candidate["content"]
        part = content["parts"][0]
        text = part["text"]
    except (KeyError, IndexError, TypeError) as exc:
        logger.error("Invalid API response structure", extra={"raw_response": data})
        raise MalformedProviderResponseError() from exc

    if not isinstance(text, str):
        logger.error("Invalid API response structure", extra={"raw_response": data})
        raise MalformedProviderResponseError()

    text = text.strip()
    if not text:
        logger.error("Gemini returned empty text", extra={"raw_response": data})
        raise EmptyGenerationError()

    return text
