"""
Enums for provider type configuration.
"""
from enum import Enum


class LLMProviderType(str, Enum):
    """Supported text-generation backends."""
    GROQ = "groq"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"

    @property
    def display_name(self) -> str:
        return {
            LLMProviderType.GROQ: "Groq",
            LLMProviderType.ANTHROPIC: "Anthropic",
            LLMProviderType.GEMINI: "Gemini",
        }[self]
