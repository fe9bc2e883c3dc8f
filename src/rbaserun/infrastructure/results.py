"""
Railway-oriented result types for launcher operations.
Every step returns either Success with a value or Failure with an error payload.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar
from dataclasses import dataclass

T = TypeVar('T')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful operation result."""
    value: T
    metadata: dict[str, Any] | None = None


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed operation result."""
    error: E


# Type alias for Railway Result
Result = Success[T] | Failure[E]
