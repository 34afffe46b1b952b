"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``gateway_providers.base.interfaces`` to re-export a stable API.
"""

from .provider_adapter import ProviderAdapter
from .has_default_model import HasDefaultModel

__all__ = [
    "ProviderAdapter",
    "HasDefaultModel",
]
