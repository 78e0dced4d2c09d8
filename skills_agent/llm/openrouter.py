"""OpenRouter provider over the OpenAI-compatible API."""

from dataclasses import dataclass

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI


@dataclass
class OpenRouterProvider:
    """Any OpenRouter-hosted model, reached through the OpenAI client.

    Model names carry the upstream vendor, e.g. ``openai/gpt-4o-mini``.
    """

    api_key: str
    model: str
    base_url: str = "https://openrouter.ai/api/v1"
    referer: str | None = None
    title: str | None = None
    temperature: float = 0.7
    timeout: int = 60
    max_retries: int = 3

    @property
    def model_name(self) -> str:
        return self.model

    @property
    def provider_name(self) -> str:
        return "openrouter"

    @property
    def default_headers(self) -> dict[str, str]:
        """Attribution headers OpenRouter uses for app rankings."""
        headers = {}
        if self.referer:
            headers["HTTP-Referer"] = self.referer
        if self.title:
            headers["X-Title"] = self.title
        return headers

    def get_chat_model(
        self,
        *,
        model: str | None = None,
        temperature: float | None = None,
    ) -> BaseChatModel:
        return ChatOpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
            model=model or self.model,
            temperature=self.temperature if temperature is None else temperature,
            timeout=self.timeout,
            max_retries=self.max_retries,
            default_headers=self.default_headers,
        )
