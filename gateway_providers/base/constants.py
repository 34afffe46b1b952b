"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings.

Security
--------
This module contains only generic sentinel strings. There are no credentials
or tokens embedded. The following pragma suppresses false positives from
secret scanners that flag generic tokens like "missing_api_key".

# pragma: allowlist secret
"""
from __future__ import annotations

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Event names shared by adapters and the router
COMPLETE_START = "complete.start"
COMPLETE_END = "complete.end"
COMPLETE_ERROR = "complete.error"
STREAM_START = "stream.start"
STREAM_END = "stream.end"
STREAM_ERROR = "stream.error"
FALLBACK_ATTEMPT_FAILED = "fallback.attempt_failed"
FALLBACK_EXHAUSTED = "fallback.exhausted"
FALLBACK_CANCELLED = "fallback.cancelled"
ROUTE_SUCCESS = "route.success"

__all__ = [
    "MISSING_API_KEY_ERROR",
    "COMPLETE_START",
    "COMPLETE_END",
    "COMPLETE_ERROR",
    "STREAM_START",
    "STREAM_END",
    "STREAM_ERROR",
    "FALLBACK_ATTEMPT_FAILED",
    "FALLBACK_EXHAUSTED",
    "FALLBACK_CANCELLED",
    "ROUTE_SUCCESS",
]
