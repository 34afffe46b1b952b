"""Cancellation error type."""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinct from provider failures: the router never falls back to another
    provider after observing it.
    """

    def __init__(self, reason: str = "operation cancelled") -> None:
        super().__init__(reason)
        self.reason = reason


__all__ = ["CancelledError"]
