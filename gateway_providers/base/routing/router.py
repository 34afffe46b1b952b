"""Provider router with sequential fallback.

The router owns an ordered, construction-time registry of adapters and runs
one request against them one at a time:

* Candidates are the configured adapters in registry order, with an optional
  preferred provider moved to the front. No adapter is attempted twice.
* ``complete`` returns the first success, tagged with the adapter's name.
  Every failed attempt is logged once at WARNING; when all fail the last
  failure's message is re-surfaced through :class:`AllProvidersFailedError`.
* ``stream`` forwards chunks as they arrive. An ``error`` chunk (or an
  exception) from the active adapter ends that candidate and the next one
  starts from scratch. Partial content already forwarded stays with the
  caller; routers built with ``emit_fallback_markers=True`` insert a
  :class:`FallbackChunk` at each boundary so consumers can discard it. A
  candidate whose stream ends without a trailing ``done`` chunk also fails.

Cancellation is cooperative: an optional :class:`CancellationToken` is
checked before each candidate and between chunks. Cancellation never
triggers fallback.
"""

from __future__ import annotations

import logging
from contextlib import aclosing
from typing import AsyncIterator, Dict, List, Optional, Sequence, Tuple

from ..cancellation import CancellationToken, CancelledError, raise_if_cancelled
from ..constants import (
    FALLBACK_ATTEMPT_FAILED,
    FALLBACK_CANCELLED,
    FALLBACK_EXHAUSTED,
    ROUTE_SUCCESS,
)
from ..errors import AllProvidersFailedError, ProviderError, classify_exception
from ..factory import ProviderFactory
from ..interfaces import ProviderAdapter
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import CompletionRequest, CompletionResult
from ..streaming import ContentChunk, DoneChunk, ErrorChunk, FallbackChunk, RouterChunk
from ..utils.messages import error_message
from ...config.defaults import (
    DEFAULT_PROVIDER_ORDER,
    NO_PROVIDERS_ERROR,
    STREAM_INCOMPLETE_ERROR,
)


class ProviderRouter:
    """Routes a request across adapters in priority order until one succeeds.

    Example usage:
        router = ProviderRouter([OpenAIProvider(), AnthropicProvider()])
        result = await router.complete(request, preferred_provider="anthropic")

        async for chunk in router.stream(request):
            ...

    Parameters
    ----------
    adapters:
        Adapters in default priority order. When omitted, one adapter per
        entry of ``DEFAULT_PROVIDER_ORDER`` is created through
        :class:`ProviderFactory`.
    emit_fallback_markers:
        Insert a :class:`FallbackChunk` into streams whenever a candidate
        fails and another one is about to start.

    Raises
    ------
    ValueError
        If two adapters report the same ``provider_name``.
    """

    def __init__(
        self,
        adapters: Optional[Sequence[ProviderAdapter]] = None,
        *,
        emit_fallback_markers: bool = False,
    ) -> None:
        if adapters is None:
            adapters = ProviderFactory.create_many(DEFAULT_PROVIDER_ORDER)
        self._adapters: Dict[str, ProviderAdapter] = {}
        for adapter in adapters:
            name = adapter.provider_name
            if name in self._adapters:
                raise ValueError(f"Duplicate provider '{name}' in router registry")
            self._adapters[name] = adapter
        self._emit_fallback_markers = emit_fallback_markers
        self._logger = get_logger("providers.router")

    # ---- Introspection ----
    @property
    def providers(self) -> Tuple[str, ...]:
        """Registered provider names in priority order (configured or not)."""
        return tuple(self._adapters)

    def get_adapter(self, name: str) -> Optional[ProviderAdapter]:
        """Return the adapter registered under ``name`` if it is configured."""
        adapter = self._adapters.get(name)
        if adapter is None or not adapter.is_configured():
            return None
        return adapter

    def is_configured(self) -> bool:
        """True when at least one registered adapter is configured."""
        return any(a.is_configured() for a in self._adapters.values())

    def available_providers(self) -> List[str]:
        """Names of the configured adapters in priority order."""
        return [name for name, a in self._adapters.items() if a.is_configured()]

    def candidates(self, preferred_provider: Optional[str] = None) -> List[ProviderAdapter]:
        """Build the ordered candidate list for one request.

        The preferred adapter (when registered and configured) goes first;
        every other configured adapter follows in registry order. An unknown
        or unconfigured preferred provider is silently excluded.
        """
        ordered: List[ProviderAdapter] = []
        preferred = self.get_adapter(preferred_provider) if preferred_provider else None
        if preferred is not None:
            ordered.append(preferred)
        for adapter in self._adapters.values():
            if adapter is preferred:
                continue
            if adapter.is_configured():
                ordered.append(adapter)
        return ordered

    # ---- Non-streaming ----
    async def complete(
        self,
        request: CompletionRequest,
        preferred_provider: Optional[str] = None,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> CompletionResult:
        """Return the first successful completion among the candidates.

        Raises
        ------
        AllProvidersFailedError
            With the sentinel message when there were no candidates, or with
            the last candidate's message (chained via ``__cause__``) when all
            of them failed.
        CancelledError
            When ``cancel`` fires before a candidate starts.
        """
        ctx = LogContext(extra={"preferred": preferred_provider, "mode": "complete"})
        candidates = self.candidates(preferred_provider)
        if not candidates:
            self._log_exhausted(ctx, [], NO_PROVIDERS_ERROR)
            raise AllProvidersFailedError(message=NO_PROVIDERS_ERROR)

        attempted: List[str] = []
        last_error: Optional[BaseException] = None
        for attempt, adapter in enumerate(candidates, start=1):
            name = adapter.provider_name
            try:
                raise_if_cancelled(cancel)
            except CancelledError as exc:
                self._log_cancelled(ctx, attempted, exc.reason)
                raise
            attempted.append(name)
            try:
                result = await adapter.complete(request, cancel=cancel)
            except CancelledError as exc:
                self._log_cancelled(ctx, attempted, exc.reason)
                raise
            except Exception as exc:
                last_error = exc
                self._log_attempt_failed(
                    ctx.for_provider(name, request.model), attempt, len(candidates), exc, None
                )
                continue
            normalized_log_event(
                self._logger,
                ROUTE_SUCCESS,
                ctx.for_provider(name, result.model),
                phase="finalize",
                attempt=attempt,
                tokens=result.tokens_used,
                fallback_used=attempt > 1,
            )
            return result.with_provider(name)

        message = error_message(last_error, type(last_error).__name__)
        self._log_exhausted(ctx, attempted, message)
        raise AllProvidersFailedError(
            message=message,
            attempted=attempted,
            raw=last_error,
        ) from last_error

    # ---- Streaming ----
    async def stream(
        self,
        request: CompletionRequest,
        preferred_provider: Optional[str] = None,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> AsyncIterator[RouterChunk]:
        """Stream from the first candidate that ends on a terminal done chunk.

        A candidate stream that ends without a trailing :class:`DoneChunk`
        counts as failed and the next candidate is tried.

        Never raises for provider failures or cancellation: both end the
        sequence with exactly one :class:`ErrorChunk`.
        """
        ctx = LogContext(extra={"preferred": preferred_provider, "mode": "stream"})
        candidates = self.candidates(preferred_provider)
        if not candidates:
            self._log_exhausted(ctx, [], NO_PROVIDERS_ERROR)
            yield ErrorChunk(error=NO_PROVIDERS_ERROR)
            return

        attempted: List[str] = []
        last_message = NO_PROVIDERS_ERROR
        for attempt, adapter in enumerate(candidates, start=1):
            name = adapter.provider_name
            if cancel is not None and cancel.cancelled:
                yield self._cancelled_chunk(ctx, attempted, cancel.reason)
                return
            if attempt > 1 and self._emit_fallback_markers:
                yield FallbackChunk(provider=name, error=last_message)
            attempted.append(name)

            failure: Optional[str] = None
            failure_exc: Optional[BaseException] = None
            emitted = 0
            done_last = False
            try:
                async with aclosing(adapter.stream(request, cancel=cancel)) as chunks:
                    async for chunk in chunks:
                        if isinstance(chunk, ErrorChunk):
                            failure = chunk.error
                            break
                        if isinstance(chunk, ContentChunk):
                            emitted += 1
                        done_last = isinstance(chunk, DoneChunk)
                        yield chunk
                        raise_if_cancelled(cancel)
                if failure is None and not done_last:
                    failure = STREAM_INCOMPLETE_ERROR
            except CancelledError as exc:
                yield self._cancelled_chunk(ctx, attempted, exc.reason)
                return
            except Exception as exc:
                failure_exc = exc
                failure = error_message(exc, type(exc).__name__)

            if failure is None:
                normalized_log_event(
                    self._logger,
                    ROUTE_SUCCESS,
                    ctx.for_provider(name, request.model),
                    phase="finalize",
                    attempt=attempt,
                    emitted=emitted,
                    fallback_used=attempt > 1,
                )
                return

            last_message = failure
            self._log_attempt_failed(
                ctx.for_provider(name, request.model),
                attempt,
                len(candidates),
                failure_exc,
                failure,
                emitted=emitted,
            )

        self._log_exhausted(ctx, attempted, last_message)
        yield ErrorChunk(error=last_message)

    # ---- Logging helpers ----
    def _log_attempt_failed(
        self,
        ctx: LogContext,
        attempt: int,
        total: int,
        exc: Optional[BaseException],
        message: Optional[str],
        *,
        emitted: Optional[int] = None,
    ) -> None:
        if isinstance(exc, ProviderError):
            code = exc.code.value
        elif exc is not None:
            code = classify_exception(exc).value
        else:
            code = None
        normalized_log_event(
            self._logger,
            FALLBACK_ATTEMPT_FAILED,
            ctx,
            phase="attempt",
            level=logging.WARNING,
            attempt=attempt,
            error_code=code,
            emitted=emitted,
            error=message if message is not None else error_message(exc, repr(exc)),
            remaining=total - attempt,
        )

    def _log_exhausted(self, ctx: LogContext, attempted: List[str], message: str) -> None:
        normalized_log_event(
            self._logger,
            FALLBACK_EXHAUSTED,
            ctx,
            phase="finalize",
            level=logging.ERROR,
            attempted=attempted,
            error=message,
        )

    def _log_cancelled(self, ctx: LogContext, attempted: List[str], reason: str) -> None:
        normalized_log_event(
            self._logger,
            FALLBACK_CANCELLED,
            ctx,
            phase="finalize",
            level=logging.WARNING,
            attempted=attempted,
            error=reason,
        )

    def _cancelled_chunk(
        self, ctx: LogContext, attempted: List[str], reason: Optional[str]
    ) -> ErrorChunk:
        text = reason or CancelledError().reason
        self._log_cancelled(ctx, attempted, text)
        return ErrorChunk(error=text)


_default_router: Optional[ProviderRouter] = None


def get_router() -> ProviderRouter:
    """Return the process-wide router, building it on first use.

    Adapters read their credentials once, so environment changes after the
    first call are not observed; call :func:`reset_router` to rebuild.
    """
    global _default_router
    if _default_router is None:
        _default_router = ProviderRouter()
    return _default_router


def reset_router() -> None:
    """Drop the process-wide router so the next call rebuilds it."""
    global _default_router
    _default_router = None


async def complete(
    request: CompletionRequest,
    preferred_provider: Optional[str] = None,
    *,
    cancel: Optional[CancellationToken] = None,
) -> CompletionResult:
    """Module-level shortcut for ``get_router().complete``."""
    return await get_router().complete(request, preferred_provider, cancel=cancel)


async def stream(
    request: CompletionRequest,
    preferred_provider: Optional[str] = None,
    *,
    cancel: Optional[CancellationToken] = None,
) -> AsyncIterator[RouterChunk]:
    """Module-level shortcut for ``get_router().stream``."""
    async with aclosing(get_router().stream(request, preferred_provider, cancel=cancel)) as chunks:
        async for chunk in chunks:
            yield chunk


def get_provider(name: str) -> Optional[ProviderAdapter]:
    return get_router().get_adapter(name)


def is_ai_configured() -> bool:
    return get_router().is_configured()


def available_providers() -> List[str]:
    return get_router().available_providers()


__all__ = [
    "ProviderRouter",
    "get_router",
    "reset_router",
    "complete",
    "stream",
    "get_provider",
    "is_ai_configured",
    "available_providers",
]
