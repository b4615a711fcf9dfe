"""
Abstract base class for LLM providers.

This module defines a vendor-neutral interface for interacting with
Large Language Models. Concrete implementations (Groq, Anthropic, Gemini)
must implement this interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict


class LLMResponse(BaseModel):
    """Standardized response from an LLM provider."""

    content: str
    model: str
    usage: Optional[dict[str, int]] = None

    model_config = ConfigDict(frozen=True)


class LLMProvider(ABC):
    """
    Abstract interface for LLM providers.

    Implementations submit one user prompt and return one completion. A
    provider that receives zero completions, or a completion that is not
    plain text, returns an empty ``content`` instead of raising; only
    transport and auth failures raise.

    Example:
        provider = GroqProvider(api_key="...", model_name="llama-3.3-70b-versatile")
        text = await provider.complete_text("Hello!", max_tokens=500)
    """

    model_name: str

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """
        Generate a completion for a single user prompt.

        Args:
            prompt: The user prompt.
            temperature: Sampling temperature (0.0-1.0).
            max_tokens: Maximum tokens to generate (None for model default).

        Returns:
            LLMResponse containing generated content and metadata.
        """
        ...

    async def complete_text(
        self,
        prompt: str,
        max_tokens: int,
        temperature: float = 0.7,
    ) -> str:
        """Submit one prompt and return the single completion's text."""
        response = await self.generate_text(
            prompt,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return response.content
