"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal, Self

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    env: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    app_name: str = "Skills Agent"
    app_version: str = "0.1.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Sessions
    session_ttl_minutes: int | None = 60  # None keeps idle sessions forever
    max_sessions: int | None = 100

    # LLM Provider
    llm_provider: Literal["ollama", "anthropic", "openai", "openrouter"] = "ollama"

    # Agents
    router_model: str | None = None  # Defaults to the provider's chat model
    chat_temperature: float = 0.7
    router_temperature: float = 0.3
    max_iterations: int = 15
    llm_timeout: int = 60
    llm_max_retries: int = 3

    # Ollama
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"

    # Anthropic
    anthropic_api_key: str | None = None
    anthropic_model: str = "claude-sonnet-4-20250514"

    # OpenAI
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"

    # OpenRouter (OpenAI-compatible)
    openrouter_api_key: str | None = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "openai/gpt-4o-mini"
    openrouter_referer: str = "https://github.com/skills-agent"
    openrouter_title: str = "Skills Agent"

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def effective_log_level(self) -> str:
        """Explicit log level, or DEBUG/INFO depending on debug."""
        if self.log_level:
            return self.log_level
        return "DEBUG" if self.debug else "INFO"

    @model_validator(mode="after")
    def validate_provider_config(self) -> Self:
        """Validate that required API keys are present for the selected provider."""
        if self.llm_provider == "anthropic" and not self.anthropic_api_key:
            raise ValueError(
                "ANTHROPIC_API_KEY is required when LLM_PROVIDER=anthropic"
            )
        if self.llm_provider == "openai" and not self.openai_api_key:
            raise ValueError(
                "OPENAI_API_KEY is required when LLM_PROVIDER=openai"
            )
        if self.llm_provider == "openrouter" and not self.openrouter_api_key:
            raise ValueError(
                "OPENROUTER_API_KEY is required when LLM_PROVIDER=openrouter"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
