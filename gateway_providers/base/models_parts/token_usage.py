"""
Normalized token usage triple.

Vendors report usage under different field names (``input_tokens`` vs
``prompt_tokens`` and so on). Adapters map them into :class:`TokenUsage`, whose
``total`` is always derived and can never disagree with its parts.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


def _coerce_count(value: Any) -> int:
    """Coerce a vendor-reported count to ``int``; ``None`` counts as zero."""
    if value is None:
        return 0
    return int(value)


@dataclass(frozen=True)
class TokenUsage:
    """Prompt/completion token counts with a derived total.

    Attributes:
        prompt: Input tokens billed for the request.
        completion: Output tokens produced so far.
    """

    prompt: int = 0
    completion: int = 0

    def __post_init__(self) -> None:
        if self.prompt < 0 or self.completion < 0:
            raise ValueError(
                f"token counts must be non-negative (prompt={self.prompt}, completion={self.completion})"
            )

    @property
    def total(self) -> int:
        """Sum of prompt and completion tokens."""
        return self.prompt + self.completion

    @classmethod
    def zero(cls) -> "TokenUsage":
        return cls(prompt=0, completion=0)

    @classmethod
    def from_counts(cls, prompt: Any, completion: Any) -> "TokenUsage":
        """Build usage from loosely-typed vendor values (``None`` -> 0)."""
        return cls(prompt=_coerce_count(prompt), completion=_coerce_count(completion))

    def to_dict(self) -> Dict[str, int]:
        return {"prompt": self.prompt, "completion": self.completion, "total": self.total}


__all__ = ["TokenUsage"]
