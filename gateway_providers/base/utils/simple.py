"""Convenience helpers for simple provider interactions.

This module provides a small utility to send a plain text prompt through a
provider (or the router) without manually constructing a full
``CompletionRequest``.
"""
from __future__ import annotations

from typing import Any, List, Optional

from ..models import CompletionRequest, CompletionResult, Message


async def simple(
    provider: Any,
    text: str,
    *,
    system: Optional[str] = None,
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
    temperature: Optional[float] = None,
) -> CompletionResult:
    """Send a plain text prompt with minimal ceremony.

    Builds a ``CompletionRequest`` with an optional system message followed by
    a single ``user`` message and awaits ``provider.complete``. Any object with
    an async ``complete(request)`` works, so both a single adapter and the
    router are accepted.

    Raises
    - ValueError: If ``text`` is empty or whitespace only.
    """
    if not (text or "").strip():
        raise ValueError("Prompt text is required")
    messages: List[Message] = []
    if system:
        messages.append(Message(role="system", content=system))
    messages.append(Message(role="user", content=text))
    req = CompletionRequest(
        messages=tuple(messages),
        model=(model or "").strip() or None,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    return await provider.complete(req)


__all__ = ["simple"]
