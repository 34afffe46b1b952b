"""ProviderAdapter Protocol (single-class module).

Defines the contract every backend adapter satisfies so the router can treat
vendors interchangeably.
"""

from __future__ import annotations

from typing import AsyncIterator, Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from ..models import CompletionRequest, CompletionResult
from ..streaming import StreamChunk


@runtime_checkable
class ProviderAdapter(Protocol):
    """Uniform completion interface over one vendor SDK.

    Implementations translate ``CompletionRequest`` into the vendor call and
    normalize the response; SDK objects never leak upstream.

    Contract:
    * ``is_configured`` is pure: no I/O and it never raises.
    * ``complete`` returns a ``CompletionResult`` or raises. The result's
      ``provider`` field is filled by the router, not the adapter.
    * ``stream`` yields ``content`` chunks then ``done`` chunks on success, or
      ends with exactly one ``error`` chunk. It does not raise for vendor
      failures.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g., ``"openai"`` or ``"anthropic"``."""
        ...

    def is_configured(self) -> bool:
        """Return True when the credential needed to call the vendor is present."""
        ...

    async def complete(
        self,
        request: CompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> CompletionResult:
        """Execute a single non-streaming completion."""
        ...

    def stream(
        self,
        request: CompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> AsyncIterator[StreamChunk]:
        """Stream the completion as canonical chunks."""
        ...
