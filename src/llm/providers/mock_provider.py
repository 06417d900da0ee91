from __future__ import annotations

from llm.providers.base import StoryMapProvider
from llm.providers.mock_templates import ECOMMERCE, GENERIC, SOCIAL_NETWORK, TASK_MANAGEMENT
from llm.schemas import StoryMapResult

# Checked in order; the first category with a matching keyword wins.
KEYWORD_TEMPLATES = (
    (("ecommerce", "shop", "store"), ECOMMERCE),
    (("social", "network"), SOCIAL_NETWORK),
    (("task", "todo"), TASK_MANAGEMENT),
)


class MockProvider(StoryMapProvider):
    provider_id = "mock"
    display_name = "Mock Data (Demo)"

    def is_configured(self) -> bool:
        return True

    def generate(self, product_description: str) -> StoryMapResult:
        """
        Returns a canned story map picked by keywords in the description.
        """
        keywords = product_description.lower()
        for triggers, template in KEYWORD_TEMPLATES:
            if any(t in keywords for t in triggers):
                return StoryMapResult.model_validate(template)

        # Default fallback
        result = StoryMapResult.model_validate(GENERIC)
        result.description = product_description
        return result
