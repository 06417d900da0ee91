from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from api.metrics import GENERATIONS_TOTAL, PROVIDER_FALLBACKS_TOTAL
from llm.errors import ConfigurationError, ProviderError, ValidationError
from llm.providers.base import StoryMapProvider
from llm.providers.deepseek_provider import DeepSeekProvider
from llm.providers.gemini_provider import GeminiProvider
from llm.providers.mock_provider import MockProvider
from llm.schemas import StoryMapResult
from story_mapper.converter import to_internal_tree
from story_mapper.models import StoryMap

logger = logging.getLogger(__name__)


class ProviderKind(str, Enum):
    DEEPSEEK = "deepseek"
    GEMINI = "gemini"
    MOCK = "mock"


@dataclass(frozen=True)
class ProviderInfo:
    id: str
    display_name: str
    configured: bool


def _fallback_reason(exc: Exception) -> str:
    if isinstance(exc, ConfigurationError):
        return "configuration"
    if isinstance(exc, ValidationError):
        return "validation"
    if isinstance(exc, ProviderError):
        return "provider"
    return "unexpected"


def _count_fallback(provider: ProviderKind, reason: str) -> None:
    try:
        PROVIDER_FALLBACKS_TOTAL.labels(provider=provider.value, reason=reason).inc()
    except Exception:
        pass


class StoryMapOrchestrator:
    """Central orchestration component: picks a provider and never lets a failure escape.

    Live providers that are missing configuration or fail in any way are replaced
    by the mock provider's output for the same description.
    """

    def __init__(
        self,
        deepseek: StoryMapProvider,
        gemini: StoryMapProvider,
        mock: Optional[MockProvider] = None,
        mock_delay_s: float = 2.0,
    ):
        self.mock = mock or MockProvider()
        self.mock_delay_s = mock_delay_s
        self._providers: Dict[ProviderKind, StoryMapProvider] = {
            ProviderKind.DEEPSEEK: deepseek,
            ProviderKind.GEMINI: gemini,
            ProviderKind.MOCK: self.mock,
        }

    def _resolve(self, provider: Union[ProviderKind, str]) -> ProviderKind:
        try:
            return ProviderKind(provider)
        except ValueError:
            logger.warning(f"Unknown provider {provider!r}, falling back to mock data")
            return ProviderKind.MOCK

    def _mock_result(self, product_description: str) -> StoryMapResult:
        return self.mock.generate(product_description)

    async def generate_story_map(
        self,
        product_description: str,
        provider: Union[ProviderKind, str] = ProviderKind.MOCK,
    ) -> StoryMapResult:
        kind = self._resolve(provider)

        try:
            GENERATIONS_TOTAL.labels(provider=kind.value).inc()
        except Exception:
            pass

        if kind is ProviderKind.MOCK:
            # Keep perceived latency close to a real provider.
            await asyncio.sleep(self.mock_delay_s)
            return self._mock_result(product_description)

        client = self._providers[kind]
        if not client.is_configured():
            logger.warning(f"{client.display_name} not configured, falling back to mock data")
            _count_fallback(kind, "not_configured")
            return self._mock_result(product_description)

        try:
            return await asyncio.to_thread(client.generate, product_description)
        except Exception as e:
            logger.error(f"Error generating story map with {kind.value}: {e}")
            _count_fallback(kind, _fallback_reason(e))
            return self._mock_result(product_description)

    async def generate_internal_story_map(
        self,
        product_description: str,
        provider: Union[ProviderKind, str] = ProviderKind.MOCK,
    ) -> StoryMap:
        result = await self.generate_story_map(product_description, provider)
        return to_internal_tree(result)

    def list_providers(self) -> List[ProviderInfo]:
        return [
            ProviderInfo(
                id=kind.value,
                display_name=client.display_name,
                configured=client.is_configured(),
            )
            for kind, client in self._providers.items()
        ]


def build_orchestrator() -> StoryMapOrchestrator:
    """Wire the default providers from the environment."""
    try:
        mock_delay_s = float(os.getenv("MOCK_DELAY_SECONDS", "2.0"))
    except ValueError:
        logger.warning("Invalid MOCK_DELAY_SECONDS, using 2.0")
        mock_delay_s = 2.0

    return StoryMapOrchestrator(
        deepseek=DeepSeekProvider(),
        gemini=GeminiProvider(),
        mock=MockProvider(),
        mock_delay_s=mock_delay_s,
    )
