"""
Anthropic (Claude) implementation of LLMProvider.
"""
from typing import Optional

from anthropic import AsyncAnthropic
from loguru import logger

from app.core.providers.llm_provider import LLMProvider, LLMResponse

# The Messages API requires an explicit output ceiling
DEFAULT_MAX_TOKENS = 1024


class AnthropicProvider(LLMProvider):
    """
    Anthropic implementation of LLMProvider.

    Only the first content block is read, and a block that is not text
    counts as an empty completion.
    """

    def __init__(self, api_key: str, model_name: str = "claude-sonnet-4-20250514"):
        self.client = AsyncAnthropic(api_key=api_key)
        self.model_name = model_name

    async def generate_text(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate text completion using Claude."""
        logger.debug(f"Sending request to Anthropic ({self.model_name})")
        response = await self.client.messages.create(
            model=self.model_name,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens or DEFAULT_MAX_TOKENS,
        )

        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.input_tokens,
                "completion_tokens": response.usage.output_tokens,
                "total_tokens": response.usage.input_tokens + response.usage.output_tokens,
            }
            logger.debug(f"Anthropic token usage: {usage}")

        content = ""
        if response.content:
            block = response.content[0]
            if block.type == "text":
                content = block.text
            else:
                logger.warning(f"Anthropic returned a non-text block: {block.type}")

        return LLMResponse(
            content=content,
            model=self.model_name,
            usage=usage,
        )
