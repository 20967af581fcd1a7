"""Small value types shared across the package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Range(Generic[T]):
    """A closed interval described by its ``low`` and ``high`` ends."""

    low: T
    high: T


def to_underlying(e: Enum) -> Any:
    """Return the underlying value of an enumeration member."""
    if not isinstance(e, Enum):
        raise TypeError(f"expected an enum member, got {type(e).__name__}")
    return e.value