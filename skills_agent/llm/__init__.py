"""LLM provider module."""

from skills_agent.llm.anthropic import AnthropicProvider
from skills_agent.llm.factory import LLMFactoryError, create_llm_provider
from skills_agent.llm.ollama import OllamaProvider
from skills_agent.llm.openai import OpenAIProvider
from skills_agent.llm.openrouter import OpenRouterProvider
from skills_agent.llm.protocol import LLMProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "LLMFactoryError",
    "OllamaProvider",
    "AnthropicProvider",
    "OpenAIProvider",
    "OpenRouterProvider",
]
