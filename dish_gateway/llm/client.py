from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from groq import AsyncGroq
from openai import AsyncOpenAI

from ..errors import EmptyCompletionError, UpstreamError
from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)


class CompletionClient:
    """Single-attempt chat-completion client for the configured provider.

    The SDK client is created on first use and reused for later requests.
    Retries are disabled so every incoming request maps to one upstream call.
    """

    def __init__(self, config: LLMConfig = DEFAULT_LLM_CONFIG) -> None:
        self.config = config
        self._client: Any = None

    def _get_client(self) -> Any:
        if self._client is None:
            if self.config.provider == "openai":
                self._client = AsyncOpenAI(
                    api_key=self.config.api_key,
                    organization=self.config.organization,
                    timeout=self.config.timeout,
                    max_retries=0,
                )
            else:
                self._client = AsyncGroq(
                    api_key=self.config.api_key,
                    timeout=self.config.timeout,
                    max_retries=0,
                )
        return self._client

    async def complete(
        self,
        user_message: str,
        system_prompt: str,
        max_tokens: int | None = None,
    ) -> str:
        """
        Send ``system_prompt`` and ``user_message`` and return the text of
        the first candidate.

        Raises UpstreamError when the call fails and EmptyCompletionError
        when the provider returns no candidates or only blank text.
        """
        if not self.config.enabled or not self.config.api_key:
            logger.error("LLM provider %s is not configured", self.config.provider)
            raise UpstreamError()

        try:
            response = await self._get_client().chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_message},
                ],
                max_tokens=max_tokens or self.config.max_tokens,
                temperature=self.config.temperature,
            )
        except Exception as exc:
            logger.warning("%s completion call failed", self.config.provider, exc_info=True)
            raise UpstreamError() from exc

        choices = getattr(response, "choices", None) or []
        if not choices:
            logger.warning("%s returned no completion candidates", self.config.provider)
            raise EmptyCompletionError()

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None) or ""
        if not content.strip():
            logger.warning("%s returned a blank completion", self.config.provider)
            raise EmptyCompletionError()
        return content

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None


def get_completion_client(request: Request) -> CompletionClient:
    """Return the completion client owned by the running app."""
    return request.app.state.completion_client
