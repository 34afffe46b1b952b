"""HasDefaultModel Protocol (single-class module).

Capability marker for adapters that substitute a model when the request
leaves ``model`` unset.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasDefaultModel(Protocol):
    """Interface for adapters that have a default model."""

    def default_model(self) -> str:  # pragma: no cover - trivial
        """Return the model identifier used when a request names none."""
        ...
