"""Streaming package for provider layer.

Exposes the canonical chunk union and helpers under a single namespace.
"""

from .streaming import (
    ContentChunk,
    DoneChunk,
    ErrorChunk,
    FallbackChunk,
    RouterChunk,
    StreamChunk,
    StreamOutcome,
    accumulate_chunks,
)

__all__ = [
    "ContentChunk",
    "DoneChunk",
    "ErrorChunk",
    "FallbackChunk",
    "RouterChunk",
    "StreamChunk",
    "StreamOutcome",
    "accumulate_chunks",
]
