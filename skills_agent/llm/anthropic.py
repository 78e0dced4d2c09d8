"""Anthropic Claude provider."""

from dataclasses import dataclass

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel


@dataclass
class AnthropicProvider:
    """Claude models through the Anthropic API."""

    api_key: str
    model: str = "claude-sonnet-4-20250514"
    temperature: float = 0.7
    max_tokens: int = 4096
    timeout: int = 60
    max_retries: int = 3

    @property
    def model_name(self) -> str:
        return self.model

    @property
    def provider_name(self) -> str:
        return "anthropic"

    def get_chat_model(
        self,
        *,
        model: str | None = None,
        temperature: float | None = None,
    ) -> BaseChatModel:
        return ChatAnthropic(
            api_key=self.api_key,
            model=model or self.model,
            temperature=self.temperature if temperature is None else temperature,
            max_tokens=self.max_tokens,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
