"""Small provider-agnostic helpers."""

from .messages import error_message, split_system_message
from .simple import simple

__all__ = ["error_message", "split_system_message", "simple"]
