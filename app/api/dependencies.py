"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection. Providers are selected based on config.
"""
from functools import lru_cache
from typing import Optional

from fastapi import Depends
from loguru import logger

from app.core.config import settings
from app.core.providers.anthropic_provider import AnthropicProvider
from app.core.providers.enums import LLMProviderType
from app.core.providers.gemini_provider import GeminiProvider
from app.core.providers.groq_provider import GroqProvider
from app.core.providers.llm_provider import LLMProvider
from app.services.titles import TitleService
from app.services.youtube import YouTubeService


def not_found_status() -> int:
    return 404 if settings.DISTINCT_UPSTREAM_STATUS else 500


def provider_error_status() -> int:
    return 502 if settings.DISTINCT_UPSTREAM_STATUS else 500


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

def build_llm_provider(provider_type: LLMProviderType) -> Optional[LLMProvider]:
    """
    Build the text-generation backend named by ``provider_type``.

    Returns None when its credential is not configured, so no client is
    created and nothing is sent upstream.
    """
    api_key = settings.llm_api_key(provider_type)
    if not api_key:
        logger.warning(f"{provider_type.display_name} API key not configured")
        return None

    if provider_type == LLMProviderType.GROQ:
        return GroqProvider(
            api_key=api_key,
            model_name=settings.GROQ_MODEL_NAME,
        )
    elif provider_type == LLMProviderType.ANTHROPIC:
        return AnthropicProvider(
            api_key=api_key,
            model_name=settings.ANTHROPIC_MODEL_NAME,
        )
    elif provider_type == LLMProviderType.GEMINI:
        return GeminiProvider(
            api_key=api_key,
            model_name=settings.GEMINI_MODEL_NAME,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider_type}")


@lru_cache
def get_title_llm_provider() -> Optional[LLMProvider]:
    """
    Get LLM provider for title generation.

    Default: Groq (configured in settings.TITLE_LLM_PROVIDER)
    """
    return build_llm_provider(settings.TITLE_LLM_PROVIDER)


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

def get_youtube_service() -> YouTubeService:
    """Get YouTube service for video metadata lookups."""
    return YouTubeService(
        api_key=settings.YOUTUBE_API_KEY,
        not_found_status=not_found_status(),
        provider_error_status=provider_error_status(),
    )


def get_title_service(
    llm_provider: Optional[LLMProvider] = Depends(get_title_llm_provider),
) -> TitleService:
    """Get title service bound to the configured backend."""
    return TitleService(
        llm_provider=llm_provider,
        provider_type=settings.TITLE_LLM_PROVIDER,
        provider_error_status=provider_error_status(),
    )
