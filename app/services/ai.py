"""
AI service: send the compiled prompt to a text-generation provider.

Providers are tried in order (Gemini, then OpenAI). Every failure mode, including a
missing key, is collapsed into the UNAVAILABLE result so callers branch on two cases only.
"""
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from openai import AsyncOpenAI
from openai import APIError as OpenAIAPIError

from app.config import Settings

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_GENERATION_CONFIG = {"temperature": 0.7, "maxOutputTokens": 800, "topP": 0.8, "topK": 10}


@dataclass(frozen=True)
class ProviderResult:
    text: str | None
    provider: str | None = None

    @property
    def available(self) -> bool:
        return self.text is not None


UNAVAILABLE = ProviderResult(text=None)


def _gemini_text(data: Any) -> str | None:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text else None


class AIService:
    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
        openai_client: AsyncOpenAI | None = None,
    ) -> None:
        self.settings = settings
        self._http_client = http_client
        self._openai_client = openai_client

    def is_configured(self) -> bool:
        return self.settings.provider_configured

    def _get_openai_client(self) -> AsyncOpenAI:
        if self._openai_client is None:
            self._openai_client = AsyncOpenAI(
                api_key=self.settings.openai_api_key,
                timeout=self.settings.provider_timeout_seconds,
            )
        return self._openai_client

    async def _post_gemini(self, client: httpx.AsyncClient, prompt: str) -> httpx.Response:
        endpoint = f"{GEMINI_BASE_URL}/models/{self.settings.gemini_model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": GEMINI_GENERATION_CONFIG,
        }
        headers = {"x-goog-api-key": self.settings.gemini_api_key}
        return await client.post(endpoint, headers=headers, json=payload)

    async def call_gemini(self, prompt: str) -> str | None:
        """Returns the first candidate's text, or None on any failure."""
        if not self.settings.gemini_configured:
            return None
        try:
            if self._http_client is not None:
                resp = await self._post_gemini(self._http_client, prompt)
            else:
                async with httpx.AsyncClient(timeout=self.settings.provider_timeout_seconds) as client:
                    resp = await self._post_gemini(client, prompt)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Gemini request failed with status %s", e.response.status_code)
            return None
        except Exception as e:
            logger.warning("Gemini request failed: %s", type(e).__name__)
            return None
        text = _gemini_text(data)
        if text is None:
            logger.warning("Gemini response had no candidate text")
        return text

    async def call_openai(self, prompt: str) -> str | None:
        """Returns the chat completion content, or None on any failure."""
        if not self.settings.openai_configured:
            return None
        try:
            resp = await self._get_openai_client().chat.completions.create(
                model=self.settings.openai_model,
                messages=[
                    {"role": "system", "content": "You write LinkedIn sales messages and output only valid JSON."},
                    {"role": "user", "content": prompt},
                ],
                temperature=0.7,
            )
        except OpenAIAPIError as e:
            logger.warning("OpenAI API error during sequence generation: %s", e)
            return None
        usage = getattr(resp, "usage", None)
        if usage:
            logger.debug("OpenAI usage: %s input / %s output tokens", usage.prompt_tokens, usage.completion_tokens)
        if not resp.choices:
            return None
        return resp.choices[0].message.content or None

    async def complete(self, prompt: str) -> ProviderResult:
        """Raw provider text, unparsed, or UNAVAILABLE."""
        text = await self.call_gemini(prompt)
        if text is not None:
            return ProviderResult(text=text, provider="Gemini")
        text = await self.call_openai(prompt)
        if text is not None:
            return ProviderResult(text=text, provider="OpenAI")
        return UNAVAILABLE
