"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # LLM Provider (OpenAI-compatible: Mistral by default)
    mistral_api_key: str = ""
    llm_base_url: str = "https://api.mistral.ai/v1"
    llm_model: str = "mistral-medium"
    llm_temperature: float = 0.7

    # Quotes provider (keyword is appended as a path segment)
    zenquotes_api_url: str = "https://zenquotes.io/api/random"

    # Both upstream calls race against this timer
    upstream_timeout: float = 10.0

    cors_allow_origin: str = "*"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
