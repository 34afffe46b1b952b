"""
CompletionRequest DTO for provider-agnostic completion invocations.

Adapters map this normalized request shape to their vendor SDK call. The
request is constructed by the caller and is read-only to the gateway.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from .message import Message


@dataclass(frozen=True)
class CompletionRequest:
    """Normalized completion request sent to provider adapters.

    Attributes:
        messages: Ordered conversation turns. Stored as a tuple so the request
            cannot be mutated once handed to the router.
        model: Optional model identifier; each adapter substitutes its own
            default when absent.
        max_tokens: Optional completion budget; adapters default to 1000.
        temperature: Optional sampling temperature, forwarded only by adapters
            whose vendor call uses it.
    """

    messages: Tuple[Message, ...] = field(default_factory=tuple)
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def from_messages(cls, messages: Sequence[Message], **kwargs: Any) -> "CompletionRequest":
        """Convenience constructor accepting any sequence of messages."""
        return cls(messages=tuple(messages), **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "messages": [m.to_dict() for m in self.messages],
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


__all__ = [
    "CompletionRequest",
]
