import json
import sys

import httpx
import pytest

from llm.errors import ConfigurationError, ProviderError, ValidationError
from llm.providers.deepseek_provider import DeepSeekProvider
from llm.providers.gemini_provider import GeminiProvider


def _deepseek_body(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _gemini_body(content: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": content}]}}]}


def test_deepseek_generate_parses_prose_wrapped_json(valid_reply, mock_transport_factory):
    transport = mock_transport_factory(
        json_body=_deepseek_body("Here is the map:\n" + json.dumps(valid_reply))
    )
    provider = DeepSeekProvider(api_key="sk-test", transport=transport)

    result = provider.generate("A recipe planner")

    assert result.title == "Recipe Planner"
    request = transport.seen[0]
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body["temperature"] == 0.7
    assert body["max_tokens"] == 4000
    assert body["model"] == "deepseek-chat"
    assert "A recipe planner" in body["messages"][-1]["content"]
    assert "Infrastructure & Technical" in body["messages"][-1]["content"]


def test_deepseek_reads_key_from_env(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "  from-env  ")
    provider = DeepSeekProvider()
    assert provider.is_configured()
    assert provider.api_key == "from-env"


def test_deepseek_without_key_raises_configuration_error():
    provider = DeepSeekProvider()
    assert provider.is_configured() is False
    with pytest.raises(ConfigurationError):
        provider.generate("anything")


def test_deepseek_http_error_status(mock_transport_factory):
    transport = mock_transport_factory(status_code=401, text="bad key")
    provider = DeepSeekProvider(api_key="sk-test", transport=transport)
    with pytest.raises(ProviderError, match="401"):
        provider.generate("anything")


def test_deepseek_network_failure(mock_transport_factory):
    transport = mock_transport_factory(exc=httpx.ConnectError("connection refused"))
    provider = DeepSeekProvider(api_key="sk-test", transport=transport)
    with pytest.raises(ProviderError):
        provider.generate("anything")


def test_deepseek_non_json_body(mock_transport_factory):
    transport = mock_transport_factory(text="<html>gateway timeout</html>")
    provider = DeepSeekProvider(api_key="sk-test", transport=transport)
    with pytest.raises(ProviderError):
        provider.generate("anything")


def test_deepseek_reply_without_story_map_shape(mock_transport_factory):
    transport = mock_transport_factory(json_body=_deepseek_body('{"answer": 42}'))
    provider = DeepSeekProvider(api_key="sk-test", transport=transport)
    with pytest.raises(ValidationError):
        provider.generate("anything")


def test_gemini_generate_sends_key_and_generation_config(valid_reply, mock_transport_factory):
    transport = mock_transport_factory(json_body=_gemini_body(json.dumps(valid_reply)))
    provider = GeminiProvider(api_key="g-key", transport=transport)

    result = provider.generate("A recipe planner")

    assert result.epics[0].title == "Meal Planning"
    request = transport.seen[0]
    assert request.url.params["key"] == "g-key"
    body = json.loads(request.content)
    assert body["generationConfig"] == {"temperature": 0.7, "maxOutputTokens": 4000}
    assert body["contents"][0]["role"] == "user"
    assert "A recipe planner" in body["contents"][0]["parts"][0]["text"]


def test_gemini_empty_candidates(mock_transport_factory):
    transport = mock_transport_factory(json_body={"candidates": []})
    provider = GeminiProvider(api_key="g-key", transport=transport)
    with pytest.raises(ProviderError):
        provider.generate("anything")


def test_gemini_reply_without_json(mock_transport_factory):
    transport = mock_transport_factory(json_body=_gemini_body("I cannot help with that."))
    provider = GeminiProvider(api_key="g-key", transport=transport)
    with pytest.raises(ProviderError):
        provider.generate("anything")


def test_gemini_without_key_raises_configuration_error():
    with pytest.raises(ConfigurationError):
        GeminiProvider().generate("anything")


@pytest.mark.parametrize("provider_cls", [DeepSeekProvider, GeminiProvider])
def test_is_configured_survives_broken_configuration_access(monkeypatch, provider_cls):
    class BrokenOs:
        @staticmethod
        def getenv(*args, **kwargs):
            raise RuntimeError("environment unavailable")

    monkeypatch.setattr(sys.modules[provider_cls.__module__], "os", BrokenOs)
    provider = provider_cls()
    assert provider.is_configured() is False


@pytest.mark.parametrize("provider_cls", [DeepSeekProvider, GeminiProvider])
def test_is_configured_survives_missing_attribute(provider_cls):
    provider = provider_cls(api_key="x")
    del provider.api_key
    assert provider.is_configured() is False


@pytest.mark.parametrize(
    "provider_cls, key_var",
    [(DeepSeekProvider, "DEEPSEEK_API_KEY"), (GeminiProvider, "GEMINI_API_KEY")],
)
def test_malformed_timeout_keeps_key(monkeypatch, provider_cls, key_var):
    monkeypatch.setenv(key_var, "real-key")
    monkeypatch.setenv("LLM_HTTP_TIMEOUT_S", "sixty")

    provider = provider_cls()

    assert provider.is_configured() is True
    assert provider.api_key == "real-key"
    assert provider.timeout_s == 60.0


def test_timeout_read_from_env(monkeypatch):
    monkeypatch.setenv("LLM_HTTP_TIMEOUT_S", "12.5")
    assert GeminiProvider(api_key="g").timeout_s == 12.5
