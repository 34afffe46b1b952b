"""DTO validation package for providers."""

from .adapter_params import AdapterParams
from .completion import CompletionRequestDTO, MessageDTO

__all__ = [
    "MessageDTO",
    "CompletionRequestDTO",
    "AdapterParams",
]
