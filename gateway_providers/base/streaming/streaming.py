"""Streaming primitives for provider layer.

Keeps streaming concerns separate from request/response DTOs. A stream is an
ordered sequence of :data:`StreamChunk` values, each carrying exactly one
payload:

* :class:`ContentChunk` - incremental answer text, in emission order.
* :class:`DoneChunk` - a usage checkpoint. Zero or more intermediate
  checkpoints (``prompt == 0``) may precede exactly one terminal checkpoint.
* :class:`ErrorChunk` - terminal failure signal from an adapter or the router.

:class:`FallbackChunk` is only produced by a router constructed with
``emit_fallback_markers=True``; it marks the boundary where a failed
candidate's partial output ends and the replacement provider begins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, List, Optional, Union

from ..models import CompletionResult, TokenUsage


@dataclass(frozen=True)
class ContentChunk:
    """Incremental text fragment."""

    content: str
    type: ClassVar[str] = "content"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "content": self.content}


@dataclass(frozen=True)
class DoneChunk:
    """Usage checkpoint; the last one in a successful stream is terminal."""

    tokens_used: TokenUsage
    type: ClassVar[str] = "done"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "tokens_used": self.tokens_used.to_dict()}


@dataclass(frozen=True)
class ErrorChunk:
    """Failure signal; no further chunks follow it from the same producer."""

    error: str
    type: ClassVar[str] = "error"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "error": self.error}


@dataclass(frozen=True)
class FallbackChunk:
    """Candidate boundary marker emitted between a failed and a fresh provider."""

    provider: str
    error: str
    type: ClassVar[str] = "fallback"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "provider": self.provider, "error": self.error}


StreamChunk = Union[ContentChunk, DoneChunk, ErrorChunk]

RouterChunk = Union[ContentChunk, DoneChunk, ErrorChunk, FallbackChunk]


@dataclass(frozen=True)
class StreamOutcome:
    """Folded view of a finished stream."""

    text: str
    tokens_used: Optional[TokenUsage]
    error: Optional[str]
    chunk_count: int

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_result(self, *, model: str, provider: str) -> CompletionResult:
        """Convert a successful outcome into a :class:`CompletionResult`."""
        if self.error is not None:
            raise ValueError(f"cannot build a result from a failed stream: {self.error}")
        return CompletionResult(
            content=self.text,
            tokens_used=self.tokens_used or TokenUsage.zero(),
            model=model,
            provider=provider,
        )


def accumulate_chunks(chunks: Iterable[RouterChunk]) -> StreamOutcome:
    """Accumulate a finished chunk sequence into text, final usage and error.

    - Concatenates ``content`` payloads in order.
    - The last ``done`` chunk wins as the usage figure.
    - A ``fallback`` marker discards text and usage gathered before it, so the
      outcome reflects only the provider that finished the stream.
    - An ``error`` chunk is recorded; chunks after it are ignored.
    """
    text_parts: List[str] = []
    usage: Optional[TokenUsage] = None
    error: Optional[str] = None
    count = 0
    for chunk in chunks:
        count += 1
        if isinstance(chunk, ContentChunk):
            text_parts.append(chunk.content)
        elif isinstance(chunk, DoneChunk):
            usage = chunk.tokens_used
        elif isinstance(chunk, FallbackChunk):
            text_parts.clear()
            usage = None
        elif isinstance(chunk, ErrorChunk):
            error = chunk.error
            break
    return StreamOutcome(text="".join(text_parts), tokens_used=usage, error=error, chunk_count=count)


__all__ = [
    "ContentChunk",
    "DoneChunk",
    "ErrorChunk",
    "FallbackChunk",
    "StreamChunk",
    "RouterChunk",
    "StreamOutcome",
    "accumulate_chunks",
]
