"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `gateway_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .all_providers_failed_error import AllProvidersFailedError
from .classification import classify_exception, is_retryable, wrap_provider_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "AllProvidersFailedError",
    "classify_exception",
    "is_retryable",
    "wrap_provider_exception",
]
