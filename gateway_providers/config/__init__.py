"""Unified configuration layer for providers.

Merge order (later wins):
    1. Built-in defaults from :mod:`gateway_providers.config.defaults`
    2. Credential from the provider's environment variable (``ENV_MAP``)
    3. In-code overrides passed to :func:`get_provider_config`

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .defaults import (
    ANTHROPIC_DEFAULT_MODEL,
    DEFAULT_MAX_TOKENS,
    OPENAI_DEFAULT_MODEL,
    OPENAI_DEFAULT_TEMPERATURE,
    SDK_MAX_RETRIES,
    SDK_TIMEOUT_SECONDS,
)
from .env import resolve_provider_key


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {
        "model": OPENAI_DEFAULT_MODEL,
        "max_tokens": DEFAULT_MAX_TOKENS,
        "temperature": OPENAI_DEFAULT_TEMPERATURE,
        "timeout": SDK_TIMEOUT_SECONDS,
        "max_retries": SDK_MAX_RETRIES,
    },
    "anthropic": {
        "model": ANTHROPIC_DEFAULT_MODEL,
        "max_tokens": DEFAULT_MAX_TOKENS,
        "temperature": None,
        "timeout": SDK_TIMEOUT_SECONDS,
        "max_retries": SDK_MAX_RETRIES,
    },
}


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> env credential -> overrides.
    ``None`` values in ``overrides`` are ignored so callers can pass optional
    constructor arguments straight through.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))

    key, env_name = resolve_provider_key(name)
    cfg["api_key"] = key
    cfg["api_key_env"] = env_name

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = [
    "get_provider_config",
    "DEFAULTS",
]
