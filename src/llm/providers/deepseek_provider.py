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

DEFAULT_API_URL = "https://api.deepseek.com/v1/chat/completions"
DEFAULT_MODEL = "deepseek-chat"


class DeepSeekProvider(StoryMapProvider):
    provider_id = "deepseek"
    display_name = "DeepSeek"

    temperature = 0.7
    max_tokens = 4000

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        try:
            self.api_key = (api_key if api_key is not None else os.getenv("DEEPSEEK_API_KEY", "")).strip()
            self.api_url = (api_url or os.getenv("DEEPSEEK_API_URL", DEFAULT_API_URL)).strip()
            self.model = (model or os.getenv("DEEPSEEK_MODEL", DEFAULT_MODEL)).strip()
        except Exception as e:
            logger.warning(f"Failed to read DeepSeek configuration: {e}")
            self.api_key = ""
            self.api_url = DEFAULT_API_URL
            self.model = DEFAULT_MODEL
        self.timeout_s = timeout_s if timeout_s is not None else read_timeout_s()
        self.transport = transport

    def is_configured(self) -> bool:
        try:
            return bool(self.api_key)
        except Exception as e:
            logger.warning(f"Error checking DeepSeek configuration: {e}")
            return False

    def generate(self, product_description: str) -> StoryMapResult:
        if not self.is_configured():
            raise ConfigurationError("DeepSeek API key not found. Set DEEPSEEK_API_KEY.")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_story_map_prompt(product_description)},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
                r = client.post(self.api_url, headers=headers, json=payload)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(f"DeepSeek API error: {e.response.status_code} - {e.response.text}") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"DeepSeek request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"DeepSeek returned a non-JSON body: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"Unexpected DeepSeek response body: {e}") from e

        if not content:
            raise ProviderError("No response content from DeepSeek API")

        return parse_story_map_reply(content)
