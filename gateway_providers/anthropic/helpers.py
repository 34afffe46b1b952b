"""Anthropic helpers module.

Purpose:
- Provide reusable, side-effect-free utilities for the Anthropic provider
  (parameter building, text extraction, usage mapping) to keep ``client.py``
  lean.

External dependencies:
- None directly. Helpers operate on SDK response objects through attribute
  access so tests can pass lightweight fakes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.models import CompletionRequest, Message, TokenUsage
from ..config.defaults import DEFAULT_MAX_TOKENS


def build_params(
    model: str,
    request: CompletionRequest,
    system_message: Optional[str],
    conversation: List[Message],
) -> Dict[str, Any]:
    """Build Anthropic ``messages`` parameters.

    Parameters:
        model: Target model name.
        request: Normalized completion request.
        system_message: Optional system string; sent as the top-level
            ``system`` field and omitted entirely when absent.
        conversation: Remaining user/assistant turns in order.

    Returns:
        Mapping of parameters for ``client.messages.create`` / ``.stream``.

    Notes:
        - ``temperature`` is forwarded only when the request sets it so the
          vendor default applies otherwise.
    """
    params: Dict[str, Any] = {
        "model": model,
        "max_tokens": request.max_tokens or DEFAULT_MAX_TOKENS,
        "messages": [m.to_dict() for m in conversation],
    }
    if system_message:
        params["system"] = system_message
    if request.temperature is not None:
        params["temperature"] = request.temperature
    return params


def extract_text(resp: Any) -> Optional[str]:
    """Return the text of the first ``text`` content block, or ``None``.

    Non-text blocks (``tool_use`` and friends) are skipped. An empty string
    in the first text block is returned as-is.
    """
    for block in getattr(resp, "content", None) or []:
        if getattr(block, "type", None) == "text":
            return getattr(block, "text", "") or ""
    return None


def extract_usage(resp: Any) -> TokenUsage:
    """Map ``usage.input_tokens`` / ``usage.output_tokens`` onto ``TokenUsage``.

    Missing usage or missing fields count as zero.
    """
    usage = getattr(resp, "usage", None)
    if usage is None:
        return TokenUsage.zero()
    return TokenUsage.from_counts(
        getattr(usage, "input_tokens", None),
        getattr(usage, "output_tokens", None),
    )


__all__ = ["build_params", "extract_text", "extract_usage"]
