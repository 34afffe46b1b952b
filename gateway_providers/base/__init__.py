"""
Providers Base Package

Exports provider-agnostic contracts, DTOs and the provider factory for use
by the adapters and the router.

Layout:
- Interfaces: the ``ProviderAdapter`` protocol every backend satisfies
- Models (DTOs): frozen request/response dataclasses
- Streaming: canonical chunk union
- Errors: normalized error taxonomy
- Factory: lazy creation of provider adapters by canonical name
"""

from .cancellation import CancellationToken, CancelledError
from .errors import AllProvidersFailedError, ErrorCode, ProviderError
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import HasDefaultModel, ProviderAdapter
from .models import (
    PROVIDER_IDS,
    CompletionRequest,
    CompletionResult,
    Message,
    ProviderId,
    Role,
    TokenUsage,
)
from .streaming import (
    ContentChunk,
    DoneChunk,
    ErrorChunk,
    FallbackChunk,
    RouterChunk,
    StreamChunk,
    StreamOutcome,
    accumulate_chunks,
)

__all__ = [
    # Models
    "Role",
    "Message",
    "CompletionRequest",
    "CompletionResult",
    "TokenUsage",
    "ProviderId",
    "PROVIDER_IDS",
    # Streaming
    "ContentChunk",
    "DoneChunk",
    "ErrorChunk",
    "FallbackChunk",
    "StreamChunk",
    "RouterChunk",
    "StreamOutcome",
    "accumulate_chunks",
    # Interfaces
    "ProviderAdapter",
    "HasDefaultModel",
    # Errors
    "ErrorCode",
    "ProviderError",
    "AllProvidersFailedError",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    # Cancellation
    "CancellationToken",
    "CancelledError",
]
