"""A sorted associative container backed by parallel lists."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class FlatMap(Generic[K, V]):
    """Keys kept sorted in one list, values in another, looked up by bisection."""

    def __init__(
        self,
        items: Optional[Iterable[tuple[K, V]]] = None,
        default_factory: Optional[Callable[[], V]] = None,
    ) -> None:
        self._keys: list[K] = []
        self._values: list[V] = []
        self.default_factory = default_factory
        for key, value in items or ():
            self.insert(key, value)

    def _locate(self, key: K) -> tuple[int, bool]:
        index = bisect_left(self._keys, key)
        found = index < len(self._keys) and self._keys[index] == key
        return index, found

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: Any) -> bool:
        return self._locate(key)[1]

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._keys))

    def __reversed__(self) -> Iterator[K]:
        return reversed(list(self._keys))

    def __getitem__(self, key: K) -> V:
        """Return the value for ``key``, inserting a default one if a factory is set."""
        index, found = self._locate(key)
        if found:
            return self._values[index]
        if self.default_factory is None:
            raise KeyError(key)
        value = self.default_factory()
        self._keys.insert(index, key)
        self._values.insert(index, value)
        return value

    def at(self, key: K) -> V:
        """Return the value for ``key``; raise ``KeyError`` if it is missing."""
        index, found = self._locate(key)
        if not found:
            raise KeyError("flat_map out of range")
        return self._values[index]

    def insert(self, key: K, value: V) -> tuple[V, bool]:
        """Insert without overwriting; return the stored value and whether it is new."""
        index, found = self._locate(key)
        if found:
            return self._values[index], False
        self._keys.insert(index, key)
        self._values.insert(index, value)
        return value, True

    def keys(self) -> list[K]:
        return list(self._keys)

    def values(self) -> list[V]:
        return list(self._values)

    def items(self) -> list[tuple[K, V]]:
        return list(zip(self._keys, self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlatMap):
            return NotImplemented
        return self._keys == other._keys and self._values == other._values

    def __repr__(self) -> str:
        return f"FlatMap({self.items()!r})"