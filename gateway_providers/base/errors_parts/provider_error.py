"""
Structured provider error exception type.

Wraps vendor SDK exceptions with a normalized `ErrorCode` while preserving the
original message text verbatim, so callers can rely on a uniform ``message``
field regardless of which backend failed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Original, human-readable error text (never rewritten).
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        retryable: Hint for upstream fallback logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:
        return self.message


__all__ = ["ProviderError"]
