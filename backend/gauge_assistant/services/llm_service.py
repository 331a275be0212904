"""
LLM Service
===========
Groq API integration: one non-streaming completion per allowed question
"""

import logging
from typing import Optional

from groq import AsyncGroq, GroqError

from gauge_assistant.config import settings
from gauge_assistant.exceptions import ConfigurationError, GenerationError

logger = logging.getLogger(__name__)


class LLMService:
    """
    Service for interacting with Groq LLM API

    The credential is resolved lazily, so the service can be constructed
    (and guardrail-only requests served) without GROQ_API_KEY set.
    Unset constructor arguments fall back to settings.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None
    ):
        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._async_client: Optional[AsyncGroq] = None

    @property
    def api_key(self) -> str:
        return self._api_key if self._api_key is not None else settings.groq_api_key

    @property
    def model(self) -> str:
        return self._model or settings.llm_model

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def async_client(self) -> AsyncGroq:
        """Get async Groq client"""
        if not self.api_key:
            raise ConfigurationError("GROQ_API_KEY environment variable not set")
        if self._async_client is None:
            # Exactly one attempt per request
            self._async_client = AsyncGroq(api_key=self.api_key, max_retries=0)
        return self._async_client

    async def generate(self, prompt: str) -> str:
        """
        Generate a complete answer for a grounding prompt

        Args:
            prompt: Full prompt (knowledge base + guidelines + question)

        Returns:
            Answer text, stripped

        Raises:
            ConfigurationError: no API key configured
            GenerationError: request failed or the model returned no text
        """
        client = self.async_client

        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self._max_tokens or settings.llm_max_tokens,
                temperature=self._temperature if self._temperature is not None else settings.llm_temperature
            )
        except GroqError as e:
            raise GenerationError(f"Groq request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise GenerationError("Groq returned an empty response")

        logger.info(f"Generated response: {len(content)} chars with {self.model}")
        return content.strip()


# Singleton instance
llm_service = LLMService()
