"""
Provider abstraction layer for model-agnostic AI integration.
"""
from app.core.providers.llm_provider import (
    LLMProvider,
    LLMResponse,
)
from app.core.providers.enums import LLMProviderType

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "LLMProviderType",
]
