"""gateway_providers package

Multi-provider AI completion gateway.

Purpose:
    Expose one completion surface over several vendor backends. A request is
    tried against the configured providers in priority order (optionally
    starting with a preferred one) until one succeeds; streaming requests
    yield canonical chunks.

Public API (re-exported):
    - Version: ``__version__``
    - Entry points: :func:`complete`, :func:`stream`, :func:`get_router`,
      :func:`is_ai_configured`, :func:`available_providers`,
      :func:`get_provider`
    - Router: :class:`ProviderRouter`
    - Types: :class:`Message`, :class:`CompletionRequest`,
      :class:`CompletionResult`, :class:`TokenUsage`, chunk classes
    - Exceptions: :class:`ProviderError`, :class:`AllProvidersFailedError`,
      :class:`ErrorCode`
    - Factory: :func:`create`, ``ProviderFactory``

Notes:
    - Vendor SDKs are imported only when an adapter is created, so importing
      this package is cheap.
"""

from typing import Any

from .base.cancellation import CancellationToken, CancelledError
from .base.dto import AdapterParams, CompletionRequestDTO, MessageDTO
from .base.errors import AllProvidersFailedError, ErrorCode, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import HasDefaultModel, ProviderAdapter
from .base.models import (
    CompletionRequest,
    CompletionResult,
    Message,
    ProviderId,
    TokenUsage,
)
from .base.routing import (
    ProviderRouter,
    available_providers,
    complete,
    get_provider,
    get_router,
    is_ai_configured,
    reset_router,
    stream,
)
from .base.streaming import (
    ContentChunk,
    DoneChunk,
    ErrorChunk,
    FallbackChunk,
    StreamChunk,
    accumulate_chunks,
)
from .base.utils.simple import simple

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Entry points
    "complete",
    "stream",
    "get_router",
    "reset_router",
    "get_provider",
    "is_ai_configured",
    "available_providers",
    "ProviderRouter",
    # Types
    "Message",
    "CompletionRequest",
    "CompletionResult",
    "TokenUsage",
    "ProviderId",
    "ContentChunk",
    "DoneChunk",
    "ErrorChunk",
    "FallbackChunk",
    "StreamChunk",
    "accumulate_chunks",
    # DTOs
    "MessageDTO",
    "CompletionRequestDTO",
    "AdapterParams",
    # Exceptions
    "ProviderError",
    "AllProvidersFailedError",
    "ErrorCode",
    "UnknownProviderError",
    # Cancellation
    "CancellationToken",
    "CancelledError",
    # Factory / interfaces
    "create",
    "ProviderFactory",
    "ProviderAdapter",
    "HasDefaultModel",
    # Convenience
    "simple",
]


def create(provider: str, **kwargs: Any) -> ProviderAdapter:
    """Create a provider adapter by canonical name (``"openai"``, ``"anthropic"``)."""
    return ProviderFactory.create(provider, **kwargs)
