from __future__ import annotations
import logging
import os
from abc import ABC, abstractmethod

from llm.schemas import StoryMapResult

logger = logging.getLogger(__name__)


class StoryMapProvider(ABC):
    provider_id: str = ""
    display_name: str = ""

    @abstractmethod
    def generate(self, product_description: str) -> StoryMapResult:
        """
        Return a normalized story map, or raise one of the errors in llm.errors.
        """
        raise NotImplementedError

    @abstractmethod
    def is_configured(self) -> bool:
        """Must never raise."""
        raise NotImplementedError


def read_timeout_s(default: float = 60.0) -> float:
    """LLM_HTTP_TIMEOUT_S, or the default when unset or malformed."""
    raw = os.getenv("LLM_HTTP_TIMEOUT_S", "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid LLM_HTTP_TIMEOUT_S {raw!r}, using {default}")
        return default
