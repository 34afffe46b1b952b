"""OpenAI helpers module.

Side-effect-free utilities for the OpenAI provider: parameter building plus
text and usage extraction from Chat Completions responses. Responses are read
through attribute access so tests can pass lightweight fakes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.models import CompletionRequest, Message, TokenUsage
from ..config.defaults import DEFAULT_MAX_TOKENS, OPENAI_DEFAULT_TEMPERATURE


def build_messages(system_message: Optional[str], conversation: List[Message]) -> List[Dict[str, str]]:
    """Return the Chat Completions ``messages`` list, system prompt first."""
    out: List[Dict[str, str]] = []
    if system_message:
        out.append({"role": "system", "content": system_message})
    out.extend(m.to_dict() for m in conversation)
    return out


def build_params(
    model: str,
    request: CompletionRequest,
    system_message: Optional[str],
    conversation: List[Message],
    *,
    default_temperature: float = OPENAI_DEFAULT_TEMPERATURE,
) -> Dict[str, Any]:
    """Build ``chat.completions.create`` parameters.

    ``temperature`` falls back to the provider default only when the request
    leaves it unset; an explicit ``0`` is sent as ``0``.
    """
    return {
        "model": model,
        "messages": build_messages(system_message, conversation),
        "max_tokens": request.max_tokens or DEFAULT_MAX_TOKENS,
        "temperature": (
            request.temperature if request.temperature is not None else default_temperature
        ),
    }


def extract_text(resp: Any) -> Optional[str]:
    """Return the first choice's message content, or ``None`` when absent or empty."""
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or None


def extract_delta_text(chunk: Any) -> Optional[str]:
    """Return ``choices[0].delta.content`` of a stream chunk, or ``None``.

    The final usage-only chunk of an ``include_usage`` stream has an empty
    ``choices`` list.
    """
    choices = getattr(chunk, "choices", None) or []
    if not choices:
        return None
    delta = getattr(choices[0], "delta", None)
    return getattr(delta, "content", None)


def extract_usage(obj: Any) -> Optional[TokenUsage]:
    """Map ``usage.prompt_tokens`` / ``usage.completion_tokens`` onto ``TokenUsage``.

    Returns ``None`` when the object carries no usage so callers can tell a
    missing report apart from a zero one.
    """
    usage = getattr(obj, "usage", None)
    if usage is None:
        return None
    return TokenUsage.from_counts(
        getattr(usage, "prompt_tokens", None),
        getattr(usage, "completion_tokens", None),
    )


__all__ = [
    "build_messages",
    "build_params",
    "extract_text",
    "extract_delta_text",
    "extract_usage",
]
