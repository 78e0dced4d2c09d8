"""Ollama provider for local models."""

from dataclasses import dataclass

from langchain_core.language_models import BaseChatModel
from langchain_ollama import ChatOllama


@dataclass
class OllamaProvider:
    """Models served by a local Ollama daemon. No API key needed."""

    base_url: str
    model: str
    temperature: float = 0.7

    @property
    def model_name(self) -> str:
        return self.model

    @property
    def provider_name(self) -> str:
        return "ollama"

    def get_chat_model(
        self,
        *,
        model: str | None = None,
        temperature: float | None = None,
    ) -> BaseChatModel:
        return ChatOllama(
            base_url=self.base_url,
            model=model or self.model,
            temperature=self.temperature if temperature is None else temperature,
        )
