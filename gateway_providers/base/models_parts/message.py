"""
Message DTO used across providers.

Defines the `Message` dataclass and the `Role` literal representing the sender
role. Ordering of messages inside a request is conversation order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Tuple, get_args


# Message roles understood by every adapter.
Role = Literal["system", "user", "assistant"]

ROLES: Tuple[str, ...] = get_args(Role)


@dataclass(frozen=True)
class Message:
    """A single chat turn.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Plain text content of the turn.
    """

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        """Return the ``{"role", "content"}`` mapping vendors expect."""
        return {"role": self.role, "content": self.content}


__all__ = [
    "Message",
    "Role",
    "ROLES",
]
