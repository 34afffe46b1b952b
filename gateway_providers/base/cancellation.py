"""Cooperative cancellation primitives (public API facade).

``CancellationToken`` lets a caller that abandons a request tell the router
and the active adapter to stop. The router checks it before every candidate
and between chunks; adapters check it between vendor events and release
their transport connection through scoped ``async with`` blocks when the
check fires. ``CancelledError`` is raised by operations that observe a
cancellation request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken, raise_if_cancelled

__all__ = ["CancellationToken", "CancelledError", "raise_if_cancelled"]
