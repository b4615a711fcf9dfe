"""
Application configuration using pydantic-settings.
"""
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.providers.enums import LLMProviderType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "YouTube Title Generator"
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        return v

    # YouTube Data API
    YOUTUBE_API_KEY: Optional[str] = None

    # Title generation backend
    TITLE_LLM_PROVIDER: LLMProviderType = LLMProviderType.GROQ

    # Groq API
    GROQ_MODEL_NAME: str = "llama-3.3-70b-versatile"
    GROQ_API_KEY: Optional[str] = None

    # Anthropic API
    ANTHROPIC_MODEL_NAME: str = "claude-sonnet-4-20250514"
    ANTHROPIC_API_KEY: Optional[str] = None

    # Gemini API
    GEMINI_MODEL_NAME: str = "gemini-2.5-flash"
    GEMINI_API_KEY: Optional[str] = None

    # Error reporting: keep not-found and upstream failures as 500, or split into 404/502
    DISTINCT_UPSTREAM_STATUS: bool = False

    # Refuse to start when a required credential is missing instead of failing per request
    FAIL_FAST_ON_MISSING_CREDENTIALS: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "logs/app.log"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def llm_api_key(self, provider_type: LLMProviderType) -> Optional[str]:
        """Return the configured credential for a text-generation backend."""
        keys = {
            LLMProviderType.GROQ: self.GROQ_API_KEY,
            LLMProviderType.ANTHROPIC: self.ANTHROPIC_API_KEY,
            LLMProviderType.GEMINI: self.GEMINI_API_KEY,
        }
        return keys.get(provider_type) or None

    def missing_credentials(self) -> list[str]:
        """Names of the credentials the enabled features need but lack."""
        missing = []
        if not self.YOUTUBE_API_KEY:
            missing.append("YOUTUBE_API_KEY")
        if not self.llm_api_key(self.TITLE_LLM_PROVIDER):
            missing.append(f"{self.TITLE_LLM_PROVIDER.name}_API_KEY")
        return missing


settings = Settings()
