"""
Aggregate failure raised by the fallback router.

Carries the message of the last attempted candidate, or the fixed
"no providers" sentinel when no candidate could be attempted at all.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class AllProvidersFailedError(ProviderError):
    """Raised when every candidate provider failed or none were configured.

    Attributes:
        attempted: Provider names in the order they were attempted. Empty when
            the candidate list was empty from the start.
    """

    code: ErrorCode = ErrorCode.ALL_PROVIDERS_FAILED
    message: str = ""
    provider: str = "router"
    attempted: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return self.message


__all__ = ["AllProvidersFailedError"]
