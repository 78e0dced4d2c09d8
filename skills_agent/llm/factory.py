"""LLM provider factory."""

from skills_agent.config import Settings
from skills_agent.llm.anthropic import AnthropicProvider
from skills_agent.llm.ollama import OllamaProvider
from skills_agent.llm.openai import OpenAIProvider
from skills_agent.llm.openrouter import OpenRouterProvider
from skills_agent.llm.protocol import LLMProvider


class LLMFactoryError(Exception):
    """Raised when LLM factory cannot create a provider."""


def _require_key(key: str | None, env_var: str) -> str:
    if not key:
        raise LLMFactoryError(f"{env_var} is required for this provider")
    return key


def create_llm_provider(settings: Settings) -> LLMProvider:
    """Create the provider selected by ``settings.llm_provider``.

    The provider's defaults are the chat agent's model and temperature.

    Raises:
        LLMFactoryError: If the provider is unknown or its key is missing.
    """
    temperature = settings.chat_temperature

    match settings.llm_provider:
        case "ollama":
            return OllamaProvider(
                base_url=settings.ollama_base_url,
                model=settings.ollama_model,
                temperature=temperature,
            )

        case "anthropic":
            return AnthropicProvider(
                api_key=_require_key(settings.anthropic_api_key, "ANTHROPIC_API_KEY"),
                model=settings.anthropic_model,
                temperature=temperature,
                timeout=settings.llm_timeout,
                max_retries=settings.llm_max_retries,
            )

        case "openai":
            return OpenAIProvider(
                api_key=_require_key(settings.openai_api_key, "OPENAI_API_KEY"),
                model=settings.openai_model,
                temperature=temperature,
                timeout=settings.llm_timeout,
                max_retries=settings.llm_max_retries,
            )

        case "openrouter":
            return OpenRouterProvider(
                api_key=_require_key(settings.openrouter_api_key, "OPENROUTER_API_KEY"),
                model=settings.openrouter_model,
                base_url=settings.openrouter_base_url,
                referer=settings.openrouter_referer,
                title=settings.openrouter_title,
                temperature=temperature,
                timeout=settings.llm_timeout,
                max_retries=settings.llm_max_retries,
            )

        case _:
            raise LLMFactoryError(f"Unknown LLM provider: {settings.llm_provider}")
