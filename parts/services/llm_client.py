"""
Language-Model Client

Thin, explicitly constructed wrapper around the OpenAI chat-completions API.
There is no module-level client: callers build one (usually through
``LLMClient.from_config()``) and inject it into the ``IntentEnhancer``.

A client without an API key is a valid object whose ``is_configured`` is
False; the enhancer checks that and skips the call entirely.
"""

import logging
from typing import Optional

from core.exceptions import (
    ConfigurationError,
    LLMResponseError,
    LLMServiceError,
    LLMTimeoutError,
)

logger = logging.getLogger(__name__)


class LLMClient:
    """
    Prompt in, free text out.

    Args:
        api_key: OpenAI API key ("" means not configured)
        model: Chat model name
        timeout: Per-request transport timeout in seconds
        client: Pre-built ``openai.OpenAI`` instance (tests inject fakes here)
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = "gpt-4o-mini",
        timeout: float = 12.0,
        client=None,
    ):
        self.api_key = api_key or ""
        self.model = model
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_config(cls, llm_config=None) -> "LLMClient":
        """Build from ``partsform.config``; disabled configs yield an unconfigured client."""
        if llm_config is None:
            from partsform.config import get_config
            llm_config = get_config().llm
        api_key = llm_config.api_key if llm_config.enabled else ""
        return cls(api_key=api_key, model=llm_config.model, timeout=llm_config.timeout)

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    @property
    def client(self):
        """Lazy-load OpenAI client."""
        if self._client is None and self.api_key:
            from openai import OpenAI
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    def complete(self, prompt: str, system: Optional[str] = None) -> str:
        """
        Send one prompt and return the text of the first choice.

        Raises:
            ConfigurationError: no API key
            LLMTimeoutError: transport timeout
            LLMServiceError: any other API failure
            LLMResponseError: empty answer
        """
        if not self.is_configured:
            raise ConfigurationError("Language model is not configured", setting="OPENAI_API_KEY")

        import openai

        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=0,
                response_format={"type": "json_object"},
            )
        except openai.APITimeoutError as e:
            raise LLMTimeoutError(f"Language model timed out: {e}", timeout=self.timeout) from e
        except openai.OpenAIError as e:
            raise LLMServiceError(f"Language model call failed: {e}") from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError) as e:
            raise LLMResponseError("Language model returned no choices") from e
        if not content:
            raise LLMResponseError("Language model returned an empty message")
        return content
