"""
Pydantic DTOs and validators for inbound completion requests.

Purpose
-------
Validate loosely-typed inbound payloads (for example an HTTP JSON body) before
they reach the router. Enforces roles, non-empty content, and numeric bounds
so malformed requests fail at the edge instead of inside a vendor call.

External dependencies: Pydantic only (no network/CLI calls). No timeouts.

Fallback semantics: Not applicable. Validation either succeeds or raises a
`pydantic.ValidationError`. Callers should handle this at the controller edge
and return an appropriate 4xx response when used in an HTTP server context.

Design
------
- The router accepts the frozen dataclasses from ``base.models``; these DTOs
  convert into them through ``to_request()``.
- No provider SDK imports here.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..models import CompletionRequest, Message


class MessageDTO(BaseModel):
    """A single chat turn with a validated role and non-empty text content."""

    role: Literal["system", "user", "assistant"]
    content: str

    @field_validator("content")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        if value.strip() == "":
            raise ValueError("content string must be non-empty")
        return value

    def to_message(self) -> Message:
        return Message(role=self.role, content=self.content)


class CompletionRequestDTO(BaseModel):
    """Validated inbound completion request.

    Parameters:
        messages: Ordered, non-empty list of ``MessageDTO``.
        model: Optional model override (non-empty when given).
        max_tokens: If provided, must be positive.
        temperature: If provided, must be within [0.0, 2.0].
        preferred_provider: Optional provider to try first.

    Raises:
        ValidationError: On invalid roles, empty content, out-of-range params,
            or an unknown preferred provider.
    """

    messages: List[MessageDTO] = Field(..., min_length=1)
    model: Optional[str] = Field(default=None, min_length=1)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    preferred_provider: Optional[Literal["openai", "anthropic"]] = None

    def to_request(self) -> CompletionRequest:
        """Return the frozen ``CompletionRequest`` the router consumes."""
        return CompletionRequest(
            messages=tuple(m.to_message() for m in self.messages),
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )


__all__ = [
    "MessageDTO",
    "CompletionRequestDTO",
]
