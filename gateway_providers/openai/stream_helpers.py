"""OpenAI streaming helpers.

Requests a Chat Completions stream with ``include_usage`` so the vendor sends
a trailing usage-only chunk. Text deltas become :class:`ContentChunk` values;
after exhaustion exactly one terminal :class:`DoneChunk` is emitted carrying
the reported usage, or zeros when the vendor never reported any. Failures end
the stream with a single :class:`ErrorChunk`.
"""

from __future__ import annotations

import logging
import time
from typing import AsyncIterator, Optional

from ..base.cancellation import CancellationToken, CancelledError, raise_if_cancelled
from ..base.constants import MISSING_API_KEY_ERROR, STREAM_END, STREAM_ERROR, STREAM_START
from ..base.errors import wrap_provider_exception
from ..base.logging import LogContext, normalized_log_event
from ..base.models import CompletionRequest, TokenUsage
from ..base.streaming import ContentChunk, DoneChunk, ErrorChunk, StreamChunk
from ..base.utils.messages import error_message, split_system_message
from ..config.defaults import OPENAI_UNKNOWN_ERROR
from .helpers import build_params, extract_delta_text, extract_usage


async def stream_impl(
    provider,
    request: CompletionRequest,
    cancel: Optional[CancellationToken] = None,
) -> AsyncIterator[StreamChunk]:
    """Streaming implementation for the OpenAI provider.

    Raises:
        CancelledError: propagated unchanged when ``cancel`` fires.
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
    params = build_params(
        model, request, system_message, conversation, default_temperature=provider._temperature
    )
    params["stream"] = True
    params["stream_options"] = {"include_usage": True}
    normalized_log_event(
        provider._logger,
        STREAM_START,
        ctx,
        phase="start",
        max_tokens=params["max_tokens"],
        temperature=params["temperature"],
    )
    t0 = time.perf_counter()
    emitted = 0
    usage: Optional[TokenUsage] = None
    try:
        client = provider._create_client()
        stream = await client.chat.completions.create(**params)
        async with stream:
            async for chunk in stream:
                raise_if_cancelled(cancel)
                text = extract_delta_text(chunk)
                if text:
                    emitted += 1
                    yield ContentChunk(content=text)
                reported = extract_usage(chunk)
                if reported is not None:
                    usage = reported
    except CancelledError:
        raise
    except Exception as e:
        err = wrap_provider_exception(e, provider=provider.provider_name, model=model)
        message = error_message(err, OPENAI_UNKNOWN_ERROR)
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

    final_usage = usage or TokenUsage.zero()
    normalized_log_event(
        provider._logger,
        STREAM_END,
        ctx,
        phase="finalize",
        emitted=emitted,
        tokens=final_usage,
        usage_reported=usage is not None,
        latency_ms=(time.perf_counter() - t0) * 1000.0,
    )
    yield DoneChunk(tokens_used=final_usage)


__all__ = ["stream_impl"]
