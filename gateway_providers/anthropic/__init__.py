"""
Anthropic provider package.

Exports:
- AnthropicProvider: adapter implementing ``ProviderAdapter`` for Anthropic
"""

from .client import AnthropicProvider

__all__ = ["AnthropicProvider"]
