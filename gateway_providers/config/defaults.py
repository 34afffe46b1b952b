"""gateway_providers.config.defaults
=================================

Central place for small, stable default values used across the
gateway_providers package. Adapters and the router read these instead of
scattering literals; callers override them through constructor arguments.

This module intentionally avoids importing from other provider packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Router ----
# Static fallback priority used when no preferred provider is given.
DEFAULT_PROVIDER_ORDER = ("openai", "anthropic")

# Sentinel surfaced when no candidate could be attempted.
NO_PROVIDERS_ERROR = "No AI providers configured or all providers failed"
# Failure recorded for a candidate stream that ends without a terminal done chunk.
STREAM_INCOMPLETE_ERROR = "Stream ended without usage report"

# ---- Shared completion defaults ----
DEFAULT_MAX_TOKENS = 1000

# ---- OpenAI ----
OPENAI_DEFAULT_MODEL = "gpt-4o"
OPENAI_DEFAULT_TEMPERATURE = 0.8
OPENAI_UNKNOWN_ERROR = "Unknown OpenAI error"
OPENAI_NO_CONTENT_ERROR = "No response content from OpenAI"

# ---- Anthropic ----
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
ANTHROPIC_UNKNOWN_ERROR = "Unknown Anthropic error"
ANTHROPIC_NO_TEXT_ERROR = "No text response from Anthropic"

# ---- SDK transport ----
# Per-request timeout handed to the vendor SDK clients (seconds).
SDK_TIMEOUT_SECONDS = 60.0
# Vendor SDK internal retries for transient HTTP failures. Provider-level
# fallback happens in the router, so keep this small.
SDK_MAX_RETRIES = 2


__all__ = [
    "DEFAULT_PROVIDER_ORDER",
    "NO_PROVIDERS_ERROR",
    "STREAM_INCOMPLETE_ERROR",
    "DEFAULT_MAX_TOKENS",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_TEMPERATURE",
    "OPENAI_UNKNOWN_ERROR",
    "OPENAI_NO_CONTENT_ERROR",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_UNKNOWN_ERROR",
    "ANTHROPIC_NO_TEXT_ERROR",
    "SDK_TIMEOUT_SECONDS",
    "SDK_MAX_RETRIES",
]
