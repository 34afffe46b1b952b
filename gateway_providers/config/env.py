"""gateway_providers.config.env
============================

Centralized environment variable mapping and helpers for provider credentials.

Purpose
-------
- Single source of truth mapping provider identifiers to their credential
  environment variable.
- Small lookup helpers used by adapters at construction time. The credential
  variable is the only environment input an adapter reads.

Failure Modes
-------------
- Functions return ``None`` when a provider is unknown or no value is present.
  They never raise; adapters report missing credentials through
  ``is_configured() == False``.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

# Canonical provider -> env var mapping
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the credential environment variable name for a provider."""
    return ENV_MAP.get(provider.lower()) if provider else None


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)``. Presence is the only test: any non-empty
        value is returned unchanged, an unset or empty variable yields
        ``(None, name)`` and unknown providers yield ``(None, None)``.
    """
    name = get_env_var_name(provider)
    if name is None:
        return None, None
    return os.environ.get(name) or None, name


__all__ = [
    "ENV_MAP",
    "get_env_var_name",
    "resolve_provider_key",
]
