"""AnthropicProvider adapter.

This module implements the Anthropic provider integration using the async
Messages API of the ``anthropic`` SDK (``client.messages.create`` for
completions and ``client.messages.stream`` for streaming).

Key behaviors / architecture notes:
* The credential is read once at construction; ``is_configured`` never does
  I/O.
* One ``AsyncAnthropic`` client is created lazily and reused for the lifetime
  of the adapter. Transport timeout and SDK retry counts come from
  ``config.defaults``.
* The completion and streaming flows live in ``chat_helpers`` and
  ``stream_helpers`` respectively.
"""

from __future__ import annotations

from contextlib import aclosing
from typing import Any, AsyncIterator, Optional

import anthropic

from ..base.cancellation import CancellationToken
from ..base.logging import get_logger
from ..base.models import CompletionRequest, CompletionResult
from ..base.streaming import StreamChunk
from ..config import get_provider_config
from .chat_helpers import complete_impl as _complete_impl
from .stream_helpers import stream_impl as _stream_impl


class AnthropicProvider:
    """Adapter for the Anthropic Messages API.

    Implements the ``ProviderAdapter`` protocol structurally; there is no
    shared base class between adapters.

    Args:
        api_key: Explicit credential. Defaults to ``ANTHROPIC_API_KEY``.
        model: Default model used when a request names none.
        client: Pre-built SDK client (tests inject fakes here). When omitted a
            real ``AsyncAnthropic`` is created on first use.
        timeout: Transport timeout in seconds for the SDK client.
        max_retries: SDK-level retry count for transient HTTP failures.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        *,
        client: Any = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
    ) -> None:
        cfg = get_provider_config(
            "anthropic",
            {"api_key": api_key, "model": model, "timeout": timeout, "max_retries": max_retries},
        )
        self._api_key: Optional[str] = cfg.get("api_key")
        self._model: str = cfg["model"]
        self._timeout = cfg["timeout"]
        self._max_retries = cfg["max_retries"]
        self._client = client
        self._logger = get_logger("providers.anthropic")

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier."""
        return "anthropic"

    def default_model(self) -> str:
        return self._model

    def is_configured(self) -> bool:
        """Return True when an API key is available."""
        return bool(self._api_key)

    async def complete(
        self,
        request: CompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> CompletionResult:
        """Delegate non-streaming completion to the helpers implementation."""
        return await _complete_impl(self, request, cancel)

    async def stream(
        self,
        request: CompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> AsyncIterator[StreamChunk]:
        """Delegate streaming to the helpers implementation."""
        async with aclosing(_stream_impl(self, request, cancel)) as chunks:
            async for chunk in chunks:
                yield chunk

    def _create_client(self):
        """Return the cached ``anthropic.AsyncAnthropic`` client, building it once."""
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(
                api_key=self._api_key,
                timeout=self._timeout,
                max_retries=self._max_retries,
            )
        return self._client


__all__ = ["AnthropicProvider"]
