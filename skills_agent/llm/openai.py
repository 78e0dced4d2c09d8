"""OpenAI provider."""

from dataclasses import dataclass

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI


@dataclass
class OpenAIProvider:
    """GPT models through the OpenAI API."""

    api_key: str
    model: str = "gpt-4o"
    temperature: float = 0.7
    timeout: int = 60
    max_retries: int = 3

    @property
    def model_name(self) -> str:
        return self.model

    @property
    def provider_name(self) -> str:
        return "openai"

    def get_chat_model(
        self,
        *,
        model: str | None = None,
        temperature: float | None = None,
    ) -> BaseChatModel:
        return ChatOpenAI(
            api_key=self.api_key,
            model=model or self.model,
            temperature=self.temperature if temperature is None else temperature,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
