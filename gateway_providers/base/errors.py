"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``gateway_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.all_providers_failed_error import AllProvidersFailedError
from .errors_parts.classification import (
    classify_exception,
    is_retryable,
    wrap_provider_exception,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "AllProvidersFailedError",
    "classify_exception",
    "is_retryable",
    "wrap_provider_exception",
]
