"""LLM provider protocol definition."""

from typing import Protocol, runtime_checkable

from langchain_core.language_models import BaseChatModel


@runtime_checkable
class LLMProvider(Protocol):
    """A configured LLM backend.

    One provider serves both agents: the main agent uses its defaults, the
    router asks for a chat model with its own model name and temperature.
    """

    @property
    def model_name(self) -> str:
        """Default model name."""
        ...

    @property
    def provider_name(self) -> str:
        """Provider name (ollama, anthropic, openai, openrouter)."""
        ...

    def get_chat_model(
        self,
        *,
        model: str | None = None,
        temperature: float | None = None,
    ) -> BaseChatModel:
        """Build a LangChain chat model, optionally overriding the defaults."""
        ...
