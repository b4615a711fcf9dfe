"""
Unit tests for the text-generation backends and their selection.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.api import dependencies
from app.core.providers import gemini_provider
from app.core.providers.anthropic_provider import AnthropicProvider
from app.core.providers.enums import LLMProviderType
from app.core.providers.groq_provider import GroqProvider


def groq_response(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents],
        usage=None,
    )


def anthropic_response(*blocks):
    return SimpleNamespace(content=list(blocks), usage=None)


@pytest.mark.asyncio
async def test_groq_complete_text_sends_single_user_message():
    provider = GroqProvider(api_key="test-key", model_name="llama-test")
    provider.client = MagicMock()
    provider.client.chat.completions.create = AsyncMock(return_value=groq_response("1. A\n2. B"))

    text = await provider.complete_text("prompt", max_tokens=500)

    assert text == "1. A\n2. B"
    kwargs = provider.client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "llama-test"
    assert kwargs["max_tokens"] == 500
    assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]


@pytest.mark.asyncio
async def test_groq_zero_choices_is_empty_text():
    provider = GroqProvider(api_key="test-key")
    provider.client = MagicMock()
    provider.client.chat.completions.create = AsyncMock(return_value=groq_response())

    assert await provider.complete_text("prompt", max_tokens=500) == ""


@pytest.mark.asyncio
async def test_groq_null_content_is_empty_text():
    provider = GroqProvider(api_key="test-key")
    provider.client = MagicMock()
    provider.client.chat.completions.create = AsyncMock(return_value=groq_response(None))

    assert await provider.complete_text("prompt", max_tokens=500) == ""


@pytest.mark.asyncio
async def test_anthropic_reads_first_text_block():
    provider = AnthropicProvider(api_key="test-key", model_name="claude-test")
    provider.client = MagicMock()
    provider.client.messages.create = AsyncMock(
        return_value=anthropic_response(SimpleNamespace(type="text", text="1. A"))
    )

    assert await provider.complete_text("prompt", max_tokens=500) == "1. A"
    kwargs = provider.client.messages.create.call_args.kwargs
    assert kwargs["max_tokens"] == 500
    assert "system" not in kwargs


@pytest.mark.asyncio
async def test_anthropic_non_text_block_is_empty_text():
    provider = AnthropicProvider(api_key="test-key")
    provider.client = MagicMock()
    provider.client.messages.create = AsyncMock(
        return_value=anthropic_response(SimpleNamespace(type="tool_use", id="x"))
    )

    assert await provider.complete_text("prompt", max_tokens=500) == ""


class BlockedGeminiResponse:
    usage_metadata = None

    @property
    def text(self):
        raise ValueError("response has no text parts")


@pytest.fixture
def gemini_model(monkeypatch):
    model = MagicMock()
    monkeypatch.setattr(gemini_provider.genai, "configure", MagicMock())
    monkeypatch.setattr(gemini_provider.genai, "GenerativeModel", MagicMock(return_value=model))
    monkeypatch.setattr(gemini_provider.genai, "GenerationConfig", MagicMock())
    return model


@pytest.mark.asyncio
async def test_gemini_sends_prompt_as_is(gemini_model):
    gemini_model.generate_content_async = AsyncMock(
        return_value=SimpleNamespace(text="1. A\n2. B", usage_metadata=None)
    )
    provider = gemini_provider.GeminiProvider(api_key="test-key", model_name="gemini-test")

    assert await provider.complete_text("prompt", max_tokens=500) == "1. A\n2. B"
    assert gemini_model.generate_content_async.call_args.args == ("prompt",)
    config_kwargs = gemini_provider.genai.GenerationConfig.call_args.kwargs
    assert config_kwargs["max_output_tokens"] == 500
    gemini_provider.genai.configure.assert_called_once_with(api_key="test-key")
    gemini_provider.genai.GenerativeModel.assert_called_once_with("gemini-test")


@pytest.mark.asyncio
async def test_gemini_response_without_text_is_empty_text(gemini_model):
    gemini_model.generate_content_async = AsyncMock(return_value=BlockedGeminiResponse())
    provider = gemini_provider.GeminiProvider(api_key="test-key")

    assert await provider.complete_text("prompt", max_tokens=500) == ""


@pytest.mark.parametrize(
    "provider_type, attr, key_setting",
    [
        (LLMProviderType.GROQ, "GroqProvider", "GROQ_API_KEY"),
        (LLMProviderType.ANTHROPIC, "AnthropicProvider", "ANTHROPIC_API_KEY"),
        (LLMProviderType.GEMINI, "GeminiProvider", "GEMINI_API_KEY"),
    ],
)
def test_build_llm_provider_selects_backend(monkeypatch, provider_type, attr, key_setting):
    provider_cls = MagicMock()
    monkeypatch.setattr(dependencies, attr, provider_cls)
    monkeypatch.setattr(dependencies.settings, key_setting, "secret")

    provider = dependencies.build_llm_provider(provider_type)

    assert provider is provider_cls.return_value
    assert provider_cls.call_args.kwargs["api_key"] == "secret"


def test_build_llm_provider_without_key_returns_none(monkeypatch):
    provider_cls = MagicMock()
    monkeypatch.setattr(dependencies, "AnthropicProvider", provider_cls)
    monkeypatch.setattr(dependencies.settings, "ANTHROPIC_API_KEY", None)

    assert dependencies.build_llm_provider(LLMProviderType.ANTHROPIC) is None
    provider_cls.assert_not_called()
