"""
OpenAI provider package.

Exports:
- OpenAIProvider: adapter implementing ``ProviderAdapter`` for OpenAI
"""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]
