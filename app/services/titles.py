"""
Title variation service.

Asks a language model for alternative titles and normalizes its free-form
answer into a short list of clean strings:

1. The text is split into lines.
2. Leading enumeration markers ("1.", "2. ", "10.") are removed.
3. Lines are trimmed and blank lines dropped.
4. Only the first ``TitleConfig.MAX_VARIATIONS`` lines are kept.

Malformed or empty output never raises; it simply yields fewer (or zero)
titles. Only configuration and transport failures raise.
"""
import re
from typing import Optional

from loguru import logger

from app.core.constants import TitleConfig
from app.core.exceptions import AppException, ConfigurationError, ProviderError
from app.core.prompts import TitlePrompts
from app.core.providers.enums import LLMProviderType
from app.core.providers.llm_provider import LLMProvider

# One marker only; text after it is part of the title
ENUMERATION_MARKER = re.compile(r"^\s*\d+\.\s*")


def normalize_variations(
    text: Optional[str], limit: int = TitleConfig.MAX_VARIATIONS
) -> list[str]:
    """
    Turn a numbered, one-per-line completion into at most ``limit`` titles.

    Duplicates are kept and the result is never padded.

    Example:
        >>> normalize_variations("1. Alpha\\n2. Beta\\n\\n3.Gamma\\nDelta")
        ['Alpha', 'Beta', 'Gamma', 'Delta']
    """
    if not text:
        return []

    titles = []
    for line in text.split("\n"):
        title = ENUMERATION_MARKER.sub("", line, count=1).strip()
        if title:
            titles.append(title)
    return titles[:limit]


class TitleService:
    """
    Generates alternative titles for a seed title with one LLM call.

    The provider is None when its credential is not configured; the service
    then refuses to run before anything is sent upstream.
    """

    def __init__(
        self,
        llm_provider: Optional[LLMProvider],
        provider_type: LLMProviderType = LLMProviderType.GROQ,
        provider_error_status: int = 500,
    ):
        """
        Initialize the title service.

        Args:
            llm_provider: Backend used for completions, or None when unconfigured.
            provider_type: Which backend this is (used in error messages).
            provider_error_status: HTTP status reported for upstream failures.
        """
        self.llm_provider = llm_provider
        self.provider_type = provider_type
        self.provider_error_status = provider_error_status

    def ensure_configured(self) -> None:
        """Raise ConfigurationError when the backend credential is missing."""
        if self.llm_provider is None:
            raise ConfigurationError(
                f"{self.provider_type.display_name} API key not configured"
            )

    async def generate_variations(self, seed_title: str) -> list[str]:
        """
        Generate up to five alternative titles for ``seed_title``.

        Raises:
            ConfigurationError: If the backend credential is missing.
            ProviderError: If the call to the backend fails.
        """
        self.ensure_configured()

        prompt = TitlePrompts.variations(seed_title)
        logger.info(f"Generating title variations with {self.provider_type.value}")

        try:
            text = await self.llm_provider.complete_text(
                prompt,
                max_tokens=TitleConfig.MAX_OUTPUT_TOKENS,
                temperature=TitleConfig.TEMPERATURE,
            )
        except AppException:
            raise
        except Exception as e:
            logger.error(f"{self.provider_type.display_name} request failed: {e}")
            raise ProviderError(
                f"{self.provider_type.display_name} API error: {type(e).__name__}",
                status_code=self.provider_error_status,
            ) from e

        variations = normalize_variations(text)
        if not variations:
            logger.warning("Model returned no usable title variations")
        else:
            logger.info(f"Generated {len(variations)} title variations")
        return variations
