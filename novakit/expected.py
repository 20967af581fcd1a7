"""A value-or-error holder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Unexpected(Generic[E]):
    """Marks a value as an error when building an :class:`Expected`."""

    value: E


class Expected(Generic[T, E]):
    """Holds either a value or an error passed in as :class:`Unexpected`."""

    __slots__ = ("_payload", "_ok")

    def __init__(self, value: Any) -> None:
        if isinstance(value, Unexpected):
            self._payload = value.value
            self._ok = False
        else:
            self._payload = value
            self._ok = True

    def has_value(self) -> bool:
        return self._ok

    def __bool__(self) -> bool:
        return self._ok

    def value(self) -> T:
        """Return the value; raise ``ValueError`` if an error is held."""
        if not self._ok:
            raise ValueError(f"Expected holds an error: {self._payload!r}")
        return self._payload

    def error(self) -> E:
        """Return the error; raise ``ValueError`` if a value is held."""
        if self._ok:
            raise ValueError("Expected holds a value, not an error")
        return self._payload

    def value_or(self, default: T) -> T:
        return self._payload if self._ok else default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expected):
            return NotImplemented
        return self._ok == other._ok and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self._ok, self._payload))

    def __repr__(self) -> str:
        if self._ok:
            return f"Expected({self._payload!r})"
        return f"Expected(Unexpected({self._payload!r}))"