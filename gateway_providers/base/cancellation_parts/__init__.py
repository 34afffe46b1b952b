"""Cancellation parts package.

Prefer importing from `gateway_providers.base.cancellation` for the stable surface.
"""

from .cancelled_error import CancelledError
from .cancellation_token import CancellationToken, raise_if_cancelled

__all__ = ["CancellationToken", "CancelledError", "raise_if_cancelled"]
