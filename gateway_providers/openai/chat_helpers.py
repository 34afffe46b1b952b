"""OpenAI non-streaming completion helpers.

The SDK client carries transport timeout and transient HTTP retries; vendor
failures are normalized into ``ProviderError`` and raised so the router can
fall back.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from ..base.cancellation import CancellationToken, CancelledError, raise_if_cancelled
from ..base.constants import COMPLETE_END, COMPLETE_ERROR, COMPLETE_START, MISSING_API_KEY_ERROR
from ..base.errors import ErrorCode, ProviderError, wrap_provider_exception
from ..base.logging import LogContext, normalized_log_event
from ..base.models import CompletionRequest, CompletionResult, TokenUsage
from ..base.utils.messages import split_system_message
from ..config.defaults import OPENAI_NO_CONTENT_ERROR
from .helpers import build_params, extract_text, extract_usage


def _fail(provider, ctx: LogContext, err: ProviderError, phase: str) -> ProviderError:
    normalized_log_event(
        provider._logger,
        COMPLETE_ERROR,
        ctx,
        phase=phase,
        level=logging.ERROR,
        error=err.message,
        error_code=err.code.value,
    )
    return err


async def complete_impl(
    provider,
    request: CompletionRequest,
    cancel: Optional[CancellationToken] = None,
) -> CompletionResult:
    """Run one Chat Completions call and normalize the response.

    Raises:
        ProviderError: missing credential, vendor failure (message preserved)
            or a response without choices/content.
        CancelledError: when ``cancel`` is already cancelled.
    """
    model = request.model or provider._model
    ctx = LogContext(provider=provider.provider_name, model=model)
    raise_if_cancelled(cancel)

    if not provider._api_key:
        raise _fail(
            provider,
            ctx,
            ProviderError(
                code=ErrorCode.NOT_CONFIGURED,
                message=MISSING_API_KEY_ERROR,
                provider=provider.provider_name,
                model=model,
            ),
            "start",
        )

    client = provider._create_client()
    system_message, conversation = split_system_message(request.messages)
    params = build_params(
        model, request, system_message, conversation, default_temperature=provider._temperature
    )
    normalized_log_event(
        provider._logger,
        COMPLETE_START,
        ctx,
        phase="start",
        max_tokens=params["max_tokens"],
        temperature=params["temperature"],
        has_system=system_message is not None,
    )
    t0 = time.perf_counter()
    try:
        resp = await client.chat.completions.create(**params)
    except CancelledError:
        raise
    except Exception as e:
        err = wrap_provider_exception(e, provider=provider.provider_name, model=model)
        raise _fail(provider, ctx, err, "finalize") from e
    latency_ms = (time.perf_counter() - t0) * 1000.0

    text = extract_text(resp)
    if text is None:
        raise _fail(
            provider,
            ctx,
            ProviderError(
                code=ErrorCode.NO_TEXT_CONTENT,
                message=OPENAI_NO_CONTENT_ERROR,
                provider=provider.provider_name,
                model=model,
            ),
            "finalize",
        )

    usage = extract_usage(resp) or TokenUsage.zero()
    normalized_log_event(
        provider._logger,
        COMPLETE_END,
        ctx,
        phase="finalize",
        latency_ms=latency_ms,
        tokens=usage,
    )
    return CompletionResult(
        content=text,
        tokens_used=usage,
        model=model,
        provider=provider.provider_name,
    )


__all__ = ["complete_impl"]
