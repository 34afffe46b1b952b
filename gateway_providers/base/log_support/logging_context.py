"""Structured logging context object for providers.

:class:`LogContext` carries the correlation fields shared by every event of a
single adapter call or router run (provider, model, request id, plus an
``extra`` mapping). ``to_dict`` merges ``extra`` and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for provider logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}

    def for_provider(self, provider: str, model: Optional[str] = None) -> "LogContext":
        """Return a copy re-targeted at another provider (router fallback)."""
        return replace(self, provider=provider, model=model, extra=dict(self.extra))


__all__ = ["LogContext"]
