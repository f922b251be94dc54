"""
Tests for AI model providers.
"""

import json

import pytest

from article_quiz.providers import (
    get_provider,
    pick_model,
    GroqProvider,
    OpenAIProvider,
    ClaudeProvider,
    MockProvider,
)
from article_quiz.providers.base import (
    ModelResponse,
    ProviderError,
    RateLimitError,
    AuthenticationError,
    classify_error,
)
from article_quiz.agents.prompts import format_question_system_prompt


class TestMockProvider:
    """Tests for MockProvider."""

    @pytest.mark.asyncio
    async def test_basic_generate(self):
        provider = MockProvider(fixed_response="Hello, world!")
        response = await provider.generate("Test prompt")

        assert response.content == "Hello, world!"
        assert response.provider == "mock"
        assert response.model == "mock-model-v1"

    @pytest.mark.asyncio
    async def test_custom_response_generator(self):
        def my_generator(prompt, system):
            return f"{system}: {prompt}"

        provider = MockProvider(response_generator=my_generator)
        response = await provider.generate("Hello", system="Sys")

        assert response.content == "Sys: Hello"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", ["true_false", "multiple_choice", "fill_blank"])
    async def test_question_detection(self, kind):
        """The mock answers question prompts with a JSON array."""
        provider = MockProvider()
        response = await provider.generate("Article", system=format_question_system_prompt(kind))

        data = json.loads(response.content)
        assert isinstance(data, list)
        assert len(data) == 5

    @pytest.mark.asyncio
    async def test_simulated_failure(self):
        provider = MockProvider(fail_rate=1.0)

        with pytest.raises(ProviderError):
            await provider.generate("Test")

    @pytest.mark.asyncio
    async def test_list_models(self):
        provider = MockProvider(models=["a", "b"])
        assert await provider.list_models() == ["a", "b"]

    @pytest.mark.asyncio
    async def test_records_calls(self):
        provider = MockProvider()
        await provider.generate("P", system="S", model="m")

        assert provider.calls == [{"prompt": "P", "system": "S", "model": "m"}]


class TestModelResponse:
    """Tests for ModelResponse dataclass."""

    def test_token_properties(self):
        response = ModelResponse(
            content="Test",
            model="test-model",
            provider="test",
            usage={"input_tokens": 100, "output_tokens": 50},
        )

        assert response.input_tokens == 100
        assert response.output_tokens == 50
        assert response.total_tokens == 150

    def test_empty_usage(self):
        response = ModelResponse(content="Test", model="test-model", provider="test")
        assert response.total_tokens == 0


class TestErrorClassification:
    """Tests for classify_error."""

    def test_rate_limit(self):
        assert isinstance(classify_error("Groq", Exception("Error code: 429")), RateLimitError)

    def test_auth(self):
        assert isinstance(classify_error("Groq", Exception("Invalid API Key")), AuthenticationError)

    def test_generic(self):
        error = classify_error("Groq", Exception("server exploded"))
        assert type(error) is ProviderError
        assert "Groq API error" in str(error)

    def test_passthrough(self):
        original = RateLimitError("slow down")
        assert classify_error("Groq", original) is original


class TestPickModel:
    """Tests for pick_model."""

    def test_keeps_preferred(self):
        assert pick_model(["a", "b"], "b", "a") == "b"

    def test_falls_back_to_default(self):
        assert pick_model(["a", "b"], "gone", "a") == "a"

    def test_nothing_usable(self):
        assert pick_model(["x"], None, "a") is None


class TestProviderFactory:
    """Tests for get_provider and provider setup."""

    def test_known_providers(self):
        assert isinstance(get_provider("groq", api_key="k"), GroqProvider)
        assert isinstance(get_provider("openai", api_key="k"), OpenAIProvider)
        assert isinstance(get_provider("claude", api_key="k"), ClaudeProvider)
        assert isinstance(get_provider("mock"), MockProvider)

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            get_provider("nope")

    def test_groq_defaults(self):
        provider = GroqProvider(api_key="k")

        assert provider.name == "groq"
        assert provider.default_model == "llama-3.1-8b-instant"
        assert provider._base_url == "https://api.groq.com/openai/v1"

    @pytest.mark.asyncio
    async def test_groq_missing_key(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        provider = GroqProvider()

        with pytest.raises(AuthenticationError):
            await provider.generate("Hello")

    @pytest.mark.asyncio
    async def test_claude_missing_key(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        provider = ClaudeProvider()

        with pytest.raises(AuthenticationError):
            await provider.generate("Hello")

    def test_repr(self):
        assert repr(GroqProvider(api_key="k")) == "GroqProvider(model='llama-3.1-8b-instant')"
