"""Anthropic streaming helpers.

Translates the Anthropic Messages streaming protocol into canonical chunks:

* ``content_block_delta`` events carrying a ``text_delta`` become
  :class:`ContentChunk` values.
* ``message_delta`` events carrying ``usage`` become an intermediate
  :class:`DoneChunk` (output tokens only; input tokens are unknown there).
* After the vendor stream is exhausted the final message is fetched and a
  terminal :class:`DoneChunk` with full usage is emitted.

Every other event type is absorbed. Any failure ends the stream with exactly
one :class:`ErrorChunk`; this generator never raises vendor errors. The SDK
stream is opened with ``async with`` so the HTTP response is released even
when the consumer stops iterating early.
"""

from __future__ import annotations

import logging
import time
from typing import Any, AsyncIterator, Optional

from ..base.cancellation import CancellationToken, CancelledError, raise_if_cancelled
from ..base.constants import MISSING_API_KEY_ERROR, STREAM_END, STREAM_ERROR, STREAM_START
from ..base.errors import wrap_provider_exception
from ..base.logging import LogContext, normalized_log_event
from ..base.models import CompletionRequest, TokenUsage
from ..base.streaming import ContentChunk, DoneChunk, ErrorChunk, StreamChunk
from ..base.utils.messages import error_message, split_system_message
from ..config.defaults import ANTHROPIC_UNKNOWN_ERROR
from .helpers import build_params, extract_usage


def translate_stream_event(event: Any) -> Optional[StreamChunk]:
    """Map one raw Anthropic stream event onto a canonical chunk (or ``None``)."""
    etype = getattr(event, "type", None)
    if etype == "content_block_delta":
        delta = getattr(event, "delta", None)
        if getattr(delta, "type", None) == "text_delta":
            return ContentChunk(content=getattr(delta, "text", "") or "")
        return None
    if etype == "message_delta":
        usage = getattr(event, "usage", None)
        if usage is not None:
            return DoneChunk(
                tokens_used=TokenUsage.from_counts(0, getattr(usage, "output_tokens", None))
            )
    return None


async def stream_impl(
    provider,
    request: CompletionRequest,
    cancel: Optional[CancellationToken] = None,
) -> AsyncIterator[StreamChunk]:
    """Unified streaming implementation for the Anthropic provider.

    Yields:
        StreamChunk: content chunks, intermediate/terminal done chunks, or a
        single error chunk.

    Raises:
        CancelledError: propagated unchanged when ``cancel`` fires so the
            caller decides how cancellation is reported.
    """
    model = request.model or provider._model
    ctx = LogContext(provider=provider.provider_name, model=model)
    raise_if_cancelled(cancel)

    if not provider._api_key:
        normalized_log_event(
            provider._logger,
            STREAM_ERROR,
            ctx,
            phase="start",
            level=logging.ERROR,
            error=MISSING_API_KEY_ERROR,
        )
        yield ErrorChunk(error=MISSING_API_KEY_ERROR)
        return

    system_message, conversation = split_system_message(request.messages)
    params = build_params(model, request, system_message, conversation)
    normalized_log_event(
        provider._logger,
        STREAM_START,
        ctx,
        phase="start",
        max_tokens=params["max_tokens"],
        temperature=params.get("temperature"),
    )
    t0 = time.perf_counter()
    emitted = 0
    try:
        client = provider._create_client()
        async with client.messages.stream(**params) as stream:
            async for event in stream:
                raise_if_cancelled(cancel)
                chunk = translate_stream_event(event)
                if chunk is None:
                    continue
                if isinstance(chunk, ContentChunk):
                    emitted += 1
                yield chunk
            final = await stream.get_final_message()
        usage = extract_usage(final)
    except CancelledError:
        raise
    except Exception as e:
        err = wrap_provider_exception(e, provider=provider.provider_name, model=model)
        message = error_message(err, ANTHROPIC_UNKNOWN_ERROR)
        normalized_log_event(
            provider._logger,
            STREAM_ERROR,
            ctx,
            phase="mid_stream" if emitted else "start",
            level=logging.ERROR,
            error=message,
            error_code=err.code.value,
            emitted=emitted,
        )
        yield ErrorChunk(error=message)
        return

    normalized_log_event(
        provider._logger,
        STREAM_END,
        ctx,
        phase="finalize",
        emitted=emitted,
        tokens=usage,
        latency_ms=(time.perf_counter() - t0) * 1000.0,
    )
    yield DoneChunk(tokens_used=usage)


__all__ = ["translate_stream_event", "stream_impl"]
