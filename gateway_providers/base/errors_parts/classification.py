"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, and message-based
heuristics as a fallback so both the ``openai`` and ``anthropic`` SDK
exception hierarchies land on the same taxonomy.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
    529: ErrorCode.UNAVAILABLE,
}

_RETRYABLE = frozenset(
    {
        ErrorCode.TRANSIENT,
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.UNAVAILABLE,
        ErrorCode.SERVER_ERROR,
    }
)

_PATTERN_GROUPS = (
    (ErrorCode.RATE_LIMIT, ("rate limit",)),
    (ErrorCode.RATE_LIMIT, ("too many requests",)),
    (ErrorCode.TIMEOUT, ("timeout",)),
    (ErrorCode.TIMEOUT, ("timed out",)),
    (ErrorCode.AUTH, ("auth",)),
    (ErrorCode.AUTH, ("api key",)),
    (ErrorCode.AUTH, ("unauthorized",)),
    (ErrorCode.AUTH, ("forbidden",)),
    (ErrorCode.NOT_FOUND, ("not found",)),
    (ErrorCode.NOT_FOUND, ("does not exist",)),
    (ErrorCode.UNAVAILABLE, ("unavailable",)),
    (ErrorCode.UNAVAILABLE, ("overloaded",)),
    (ErrorCode.UNAVAILABLE, (" down",)),
    (ErrorCode.TRANSIENT, ("connection",)),
    (ErrorCode.VALIDATION, ("validation",)),
    (ErrorCode.VALIDATION, ("invalid",)),
    (ErrorCode.SERVER_ERROR, ("server error",)),
    (ErrorCode.SERVER_ERROR, ("internal error",)),
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for exceptions without an HTTP status."""
    for code, patterns in _PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (sync/async).
        3. HTTP status mapping.
        4. Substring heuristics.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def is_retryable(code: ErrorCode) -> bool:
    """Return True when a failure class is worth trying on another provider."""
    return code in _RETRYABLE


def wrap_provider_exception(
    exc: BaseException, *, provider: str, model: Optional[str] = None
) -> ProviderError:
    """Normalize a vendor exception into a :class:`ProviderError`.

    The original message is preserved verbatim; only the shape changes.
    ``ProviderError`` instances are returned unchanged.
    """
    if isinstance(exc, ProviderError):
        return exc
    code = classify_exception(exc)
    return ProviderError(
        code=code,
        message=str(exc),
        provider=provider,
        model=model,
        retryable=is_retryable(code),
        raw=exc,
    )


__all__ = [
    "classify_exception",
    "is_retryable",
    "wrap_provider_exception",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
