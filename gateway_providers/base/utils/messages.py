"""Message extraction helpers shared across providers.

This module provides small utilities that normalize chat message content
for downstream provider adapters. Helpers here must be side-effect free
and operate on provider-agnostic DTOs only.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..errors import ProviderError
from ..models import Message


def split_system_message(messages: Sequence[Message]) -> Tuple[Optional[str], List[Message]]:
    """Separate the system prompt from the conversation turns.

    Summary
    - Returns ``(system_text, conversation)`` where ``system_text`` is the
      content of the first ``system`` message (or ``None``) and
      ``conversation`` holds every other turn in the original order.

    Rules
    - Only the first system message is lifted out. Later ``system`` messages
      are kept in place and re-labelled as ``user`` turns so no instruction
      text is dropped for vendors that accept a single system field.
    - The input sequence is never mutated.

    Parameters
    - messages: Ordered ``Message`` DTOs from a ``CompletionRequest``.

    Returns
    - Tuple[Optional[str], List[Message]]
    """
    system_text: Optional[str] = None
    conversation: List[Message] = []
    for m in messages:
        if m.role == "system":
            if system_text is None:
                system_text = m.content
                continue
            conversation.append(Message(role="user", content=m.content))
        else:
            conversation.append(m)
    return system_text, conversation


def error_message(exc: BaseException, fallback: str) -> str:
    """Return the human-readable message carried by ``exc``.

    ``ProviderError`` exposes its ``message`` field; any other exception uses
    ``str(exc)``. Empty text yields ``fallback``.
    """
    text = exc.message if isinstance(exc, ProviderError) else str(exc)
    return text or fallback


__all__ = ["split_system_message", "error_message"]
