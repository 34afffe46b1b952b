"""One-class-per-file DTO implementations re-exported by ``base.models``."""

from .message import Message, Role, ROLES
from .completion_request import CompletionRequest
from .token_usage import TokenUsage
from .completion_result import CompletionResult

__all__ = [
    "Message",
    "Role",
    "ROLES",
    "CompletionRequest",
    "TokenUsage",
    "CompletionResult",
]
