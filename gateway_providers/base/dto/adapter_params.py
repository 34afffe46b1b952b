"""Typed parameter object for provider adapter initialization.

Purpose
-------
Provide a small, provider-agnostic DTO that captures the constructor
parameters shared by every adapter. The factory accepts it alongside plain
keyword arguments so wiring code can pass one validated object.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_dump()` convenience.

Failure modes & side effects
----------------------------
- Pure data container: no I/O side effects. Validation errors are raised by
  Pydantic if inputs are of incorrect types or out of range.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class AdapterParams(BaseModel):
    """Common provider adapter initialization parameters.

    Attributes
    ----------
    api_key:
        Explicit credential. When omitted the adapter reads its environment
        variable.
    model:
        Default model used when a request names none.
    timeout:
        Transport timeout in seconds handed to the SDK client.
    max_retries:
        SDK-level retry count for transient HTTP failures.
    """

    api_key: Optional[str] = None
    model: Optional[str] = Field(default=None, min_length=1)
    timeout: Optional[float] = Field(default=None, gt=0)
    max_retries: Optional[int] = Field(default=None, ge=0)


__all__ = ["AdapterParams"]
