from __future__ import annotations
import logging
import os
from typing import Optional

import httpx

from llm.errors import ConfigurationError, ProviderError
from llm.parsing import parse_story_map_reply
from llm.prompts import SYSTEM_PROMPT, build_story_map_prompt
from llm.schemas import StoryMapResult
from .base import StoryMapProvider, read_timeout_s

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"


class GeminiProvider(StoryMapProvider):
    provider_id = "gemini"
    display_name = "Google Gemini"

    temperature = 0.7
    max_output_tokens = 4000

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        try:
            self.api_key = (api_key if api_key is not None else os.getenv("GEMINI_API_KEY", "")).strip()
            self.api_url = (api_url or os.getenv("GEMINI_API_URL", DEFAULT_API_URL)).strip()
        except Exception as e:
            logger.warning(f"Failed to read Gemini configuration: {e}")
            self.api_key = ""
            self.api_url = DEFAULT_API_URL
        self.timeout_s = timeout_s if timeout_s is not None else read_timeout_s()
        self.transport = transport

    def is_configured(self) -> bool:
        try:
            return bool(self.api_key)
        except Exception as e:
            logger.warning(f"Error checking Gemini configuration: {e}")
            return False

    def generate(self, product_description: str) -> StoryMapResult:
        if not self.is_configured():
            raise ConfigurationError("Gemini API key not found. Set GEMINI_API_KEY.")

        # Gemini has no separate system role on this endpoint, so the instructions go first.
        payload = {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": f"{SYSTEM_PROMPT}\n\n{build_story_map_prompt(product_description)}"}],
                }
            ],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }

        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
                r = client.post(self.api_url, params={"key": self.api_key}, json=payload)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(f"Gemini API error: {e.response.status_code} - {e.response.text}") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Gemini returned a non-JSON body: {e}") from e

        try:
            content = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"Unexpected Gemini response body: {e}") from e

        if not content:
            raise ProviderError("No response content from Gemini API")

        return parse_story_map_reply(content)
