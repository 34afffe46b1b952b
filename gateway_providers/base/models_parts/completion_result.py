"""
CompletionResult DTO returned by a successful non-streaming completion.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict

from .token_usage import TokenUsage


@dataclass(frozen=True)
class CompletionResult:
    """Normalized, immutable result of one successful ``complete`` call.

    Attributes:
        content: Answer text extracted from the vendor response.
        tokens_used: Normalized usage for the call.
        model: Model identifier actually sent to the vendor.
        provider: Identifier of the adapter that served the request.
    """

    content: str
    tokens_used: TokenUsage
    model: str
    provider: str

    def with_provider(self, provider: str) -> "CompletionResult":
        """Return a copy tagged with ``provider`` (the result itself is frozen)."""
        if provider == self.provider:
            return self
        return replace(self, provider=provider)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "tokens_used": self.tokens_used.to_dict(),
            "model": self.model,
            "provider": self.provider,
        }


__all__ = ["CompletionResult"]
