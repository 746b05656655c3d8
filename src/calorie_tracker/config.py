"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_tracker.domain.ai_providers import AIProvider

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    admin_token: str
    default_ai_provider: str = "openai"
    anthropic_base_url: str = "https://api.anthropic.com"
    anthropic_version: str = "2023-06-01"
    gemini_base_url: str = "https://generativelanguage.googleapis.com"
    openai_base_url: str | None = None
    ai_request_timeout_seconds: float = 15
    ai_log_max_entries: int = 500
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_ai_provider(raw: str | None) -> AIProvider:
    """Parse the configured default AI provider, falling back to OpenAI."""
    if raw is None:
        return AIProvider.OPENAI
    cleaned = raw.strip().lower()
    if cleaned == "chatgpt":
        return AIProvider.OPENAI
    try:
        return AIProvider(cleaned)
    except ValueError:
        return AIProvider.OPENAI
