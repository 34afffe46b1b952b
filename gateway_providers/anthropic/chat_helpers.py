"""Anthropic non-streaming completion helpers.

Purpose:
- Encapsulate the non-streaming completion flow used by the Anthropic
  provider. This module delegates to shared parameter builders in
  ``helpers.py``.

Timeouts & Retries:
- Transport timeouts and transient HTTP retries are handled by the SDK client
  (configured once in ``AnthropicProvider._create_client``). Provider-level
  fallback is the router's job, so failures here are raised, not retried.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from ..base.cancellation import CancellationToken, CancelledError, raise_if_cancelled
from ..base.constants import COMPLETE_END, COMPLETE_ERROR, COMPLETE_START, MISSING_API_KEY_ERROR
from ..base.errors import ErrorCode, ProviderError, wrap_provider_exception
from ..base.logging import LogContext, normalized_log_event
from ..base.models import CompletionRequest, CompletionResult
from ..base.utils.messages import split_system_message
from ..config.defaults import ANTHROPIC_NO_TEXT_ERROR
from .helpers import build_params, extract_text, extract_usage


def _log_error(provider, ctx: LogContext, err: ProviderError, phase: str) -> None:
    normalized_log_event(
        provider._logger,
        COMPLETE_ERROR,
        ctx,
        phase=phase,
        level=logging.ERROR,
        error=err.message,
        error_code=err.code.value,
    )


async def complete_impl(
    provider,
    request: CompletionRequest,
    cancel: Optional[CancellationToken] = None,
) -> CompletionResult:
    """Unified non-streaming completion for the Anthropic provider.

    Parameters:
        provider: The provider instance exposing ``_logger``, ``_api_key``,
            ``_model``, ``provider_name`` and ``_create_client``.
        request: Normalized completion request.
        cancel: Optional cancellation token checked before the vendor call.

    Returns:
        CompletionResult: text of the first text block plus usage. The
        ``provider`` field is filled with ``"anthropic"``.

    Raises:
        ProviderError: missing credential, vendor failure (message preserved)
            or a response without any text block.
        CancelledError: when ``cancel`` is already cancelled.
    """
    model = request.model or provider._model
    ctx = LogContext(provider=provider.provider_name, model=model)
    raise_if_cancelled(cancel)

    if not provider._api_key:
        err = ProviderError(
            code=ErrorCode.NOT_CONFIGURED,
            message=MISSING_API_KEY_ERROR,
            provider=provider.provider_name,
            model=model,
        )
        _log_error(provider, ctx, err, "start")
        raise err

    client = provider._create_client()
    system_message, conversation = split_system_message(request.messages)
    params = build_params(model, request, system_message, conversation)

    normalized_log_event(
        provider._logger,
        COMPLETE_START,
        ctx,
        phase="start",
        max_tokens=params["max_tokens"],
        temperature=params.get("temperature"),
        has_system=system_message is not None,
    )
    t0 = time.perf_counter()
    try:
        resp = await client.messages.create(**params)
    except CancelledError:
        raise
    except Exception as e:
        err = wrap_provider_exception(e, provider=provider.provider_name, model=model)
        _log_error(provider, ctx, err, "finalize")
        raise err from e
    latency_ms = (time.perf_counter() - t0) * 1000.0

    text = extract_text(resp)
    if text is None:
        err = ProviderError(
            code=ErrorCode.NO_TEXT_CONTENT,
            message=ANTHROPIC_NO_TEXT_ERROR,
            provider=provider.provider_name,
            model=model,
        )
        _log_error(provider, ctx, err, "finalize")
        raise err

    usage = extract_usage(resp)
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
