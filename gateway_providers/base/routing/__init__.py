"""Fallback routing across provider adapters."""

from .router import (
    ProviderRouter,
    available_providers,
    complete,
    get_provider,
    get_router,
    is_ai_configured,
    reset_router,
    stream,
)

__all__ = [
    "ProviderRouter",
    "get_router",
    "reset_router",
    "complete",
    "stream",
    "get_provider",
    "is_ai_configured",
    "available_providers",
]
