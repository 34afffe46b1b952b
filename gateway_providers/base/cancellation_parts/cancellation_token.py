"""Cooperative cancellation token implementation."""

from __future__ import annotations

from threading import Lock
from typing import List, Optional

from .state import State
from .cancelled_error import CancelledError

DEFAULT_REASON = "operation cancelled"


class CancellationToken:
    """A cooperative cancellation token with optional cascading semantics.

    Safe to cancel from another thread (e.g. a request-teardown hook) while the
    event loop is polling it. Child tokens inherit cancellation when the parent
    is cancelled.
    """

    def __init__(self, *, parent: Optional["CancellationToken"] = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> Optional[str]:
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Request cooperative cancellation and cascade to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or DEFAULT_REASON)

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


def raise_if_cancelled(token: Optional[CancellationToken]) -> None:
    """Null-tolerant form of :meth:`CancellationToken.raise_if_cancelled`."""
    if token is not None:
        token.raise_if_cancelled()


__all__ = ["CancellationToken", "raise_if_cancelled", "DEFAULT_REASON"]
