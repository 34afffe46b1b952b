"""OpenAI provider adapter.

Implements the Chat Completions integration on the async ``openai`` SDK.

Behavior notes:
* Defaults: model ``gpt-4o``, ``max_tokens`` 1000 and temperature 0.8; all
  can be overridden per adapter, and per request for model, ``max_tokens``
  and temperature.
* One ``AsyncOpenAI`` client is created lazily and reused. Transport timeout
  and SDK retry counts come from ``config.defaults``.
"""

from __future__ import annotations

from contextlib import aclosing
from typing import Any, AsyncIterator, Optional

import openai

from ..base.cancellation import CancellationToken
from ..base.logging import get_logger
from ..base.models import CompletionRequest, CompletionResult
from ..base.streaming import StreamChunk
from ..config import get_provider_config
from .chat_helpers import complete_impl as _complete_impl
from .stream_helpers import stream_impl as _stream_impl

__all__ = ["OpenAIProvider"]


class OpenAIProvider:
    """OpenAI Chat Completions adapter.

    Satisfies the ``ProviderAdapter`` protocol structurally. ``client`` lets
    callers (and tests) supply a pre-built SDK client.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        *,
        temperature: Optional[float] = None,
        client: Any = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
    ) -> None:
        cfg = get_provider_config(
            "openai",
            {
                "api_key": api_key,
                "model": model,
                "temperature": temperature,
                "timeout": timeout,
                "max_retries": max_retries,
            },
        )
        self._api_key: Optional[str] = cfg.get("api_key")
        self._model: str = cfg["model"]
        self._temperature: float = cfg["temperature"]
        self._timeout = cfg["timeout"]
        self._max_retries = cfg["max_retries"]
        self._client = client
        self._logger = get_logger("providers.openai")

    @property
    def provider_name(self) -> str:
        """Return the canonical provider name."""
        return "openai"

    def default_model(self) -> str:
        """Return the default model configured for OpenAI."""
        return self._model

    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def complete(
        self,
        request: CompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> CompletionResult:
        return await _complete_impl(self, request, cancel)

    async def stream(
        self,
        request: CompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> AsyncIterator[StreamChunk]:
        async with aclosing(_stream_impl(self, request, cancel)) as chunks:
            async for chunk in chunks:
                yield chunk

    def _create_client(self):
        """Return the cached ``openai.AsyncOpenAI`` client, building it once."""
        if self._client is None:
            self._client = openai.AsyncOpenAI(
                api_key=self._api_key,
                timeout=self._timeout,
                max_retries=self._max_retries,
            )
        return self._client
