import json

import httpx
import pytest

from llm.errors import ProviderError
from llm.providers.base import StoryMapProvider
from llm.parsing import parse_story_map_reply


class FakeProvider(StoryMapProvider):
    display_name = "Fake"

    def __init__(self, response_text: str = "", configured: bool = True, error: Exception = None):
        self._response_text = response_text
        self._configured = configured
        self._error = error
        self.calls = []

    def is_configured(self) -> bool:
        return self._configured

    def generate(self, product_description: str):
        self.calls.append(product_description)
        if self._error is not None:
            raise self._error
        return parse_story_map_reply(self._response_text)


VALID_REPLY = {
    "title": "Recipe Planner",
    "description": "Plan weekly meals",
    "epics": [
        {
            "title": "Meal Planning",
            "description": "Plan meals for the week",
            "features": [
                {
                    "title": "Weekly Calendar",
                    "description": "Drag recipes into days",
                    "tasks": [
                        {
                            "title": "Calendar grid",
                            "description": "Seven day grid",
                            "priority": "high",
                            "effort": "3 days",
                            "acceptance_criteria": ["Shows seven days"],
                        }
                    ],
                }
            ],
        }
    ],
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "DEEPSEEK_API_KEY", "DEEPSEEK_API_URL", "DEEPSEEK_MODEL",
        "GEMINI_API_KEY", "GEMINI_API_URL", "LLM_HTTP_TIMEOUT_S",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("MOCK_DELAY_SECONDS", "0")


@pytest.fixture
def valid_reply():
    return json.loads(json.dumps(VALID_REPLY))


@pytest.fixture
def fake_provider_factory():
    def _make(response_text: str = "", configured: bool = True, error: Exception = None):
        return FakeProvider(response_text, configured=configured, error=error)
    return _make


@pytest.fixture
def failing_provider_factory():
    def _make(message: str = "boom"):
        return FakeProvider(configured=True, error=ProviderError(message))
    return _make


@pytest.fixture
def mock_transport_factory():
    """httpx transport that records requests and answers with a fixed response."""
    def _make(status_code: int = 200, json_body=None, text: str = None, exc: Exception = None):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if exc is not None:
                raise exc
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, text=text or "")

        transport = httpx.MockTransport(handler)
        transport.seen = seen
        return transport
    return _make
