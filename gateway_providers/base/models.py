"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``gateway_providers.base.models_parts`` so callers have a single import path.
"""

from typing import Literal, Tuple

from .models_parts.message import Message, Role, ROLES
from .models_parts.completion_request import CompletionRequest
from .models_parts.token_usage import TokenUsage
from .models_parts.completion_result import CompletionResult

# Closed set of backend identifiers; extend alongside the adapter factory.
ProviderId = Literal["openai", "anthropic"]

PROVIDER_IDS: Tuple[str, ...] = ("openai", "anthropic")

__all__ = [
    "Message",
    "Role",
    "ROLES",
    "CompletionRequest",
    "TokenUsage",
    "CompletionResult",
    "ProviderId",
    "PROVIDER_IDS",
]
