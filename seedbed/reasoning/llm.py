"""Thin wrapper around the Anthropic Messages API."""

from typing import Optional

from anthropic import AsyncAnthropic, APIConnectionError

from ..utils import (
    get_settings, get_logger, get_rate_limiter, with_retry,
    LLMNotConfiguredError, LLMResponseError
)

logger = get_logger(__name__)


class LLMClient:
    """Text completion against Claude. Unavailable when no API key is set."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        settings = get_settings()
        api_key = api_key or settings.anthropic_api_key
        self.model = model or settings.llm_model
        self.client = AsyncAnthropic(api_key=api_key) if api_key else None
        self.rate_limiter = get_rate_limiter("anthropic")

    @property
    def available(self) -> bool:
        return self.client is not None

    async def complete(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 1000,
        temperature: float = 0.7
    ) -> str:
        """
        Send a single user message and return the text of the reply.

        Raises:
            LLMNotConfiguredError: no API key is configured.
            LLMResponseError: the reply has no text content.
        """
        if self.client is None:
            raise LLMNotConfiguredError("LLM API key not configured")

        await self.rate_limiter.acquire()

        kwargs = {}
        if system:
            kwargs["system"] = system

        response = await self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=temperature,
            messages=[{"role": "user", "content": prompt}],
            **kwargs
        )

        text = "".join(
            block.text for block in response.content
            if getattr(block, "type", None) == "text"
        ).strip()
        if not text:
            raise LLMResponseError("No response from AI")
        return text

    @with_retry(exceptions=(APIConnectionError,))
    async def complete_with_retry(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 1000,
        temperature: float = 0.7
    ) -> str:
        """``complete`` with exponential backoff on connection errors."""
        return await self.complete(
            prompt,
            system=system,
            max_tokens=max_tokens,
            temperature=temperature
        )


# Singleton
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """Get LLM client singleton."""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client
