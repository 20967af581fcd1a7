"""Seedable random numbers, choices and strings.

Not suitable for cryptographic use.
"""

from __future__ import annotations

import numbers
import random as _stdrandom
import secrets
import string as _string
import threading
from enum import Enum
from typing import Optional, Sequence, TypeVar, Union

from novakit.types import Range

T = TypeVar("T")

_SEED_BITS = 32
_PRINTABLE_LOW = 0x20
_PRINTABLE_HIGH = 0x7E


class Distribution(Enum):
    """Character sets that random strings are drawn from."""

    ASCII = "".join(chr(code) for code in range(_PRINTABLE_LOW, _PRINTABLE_HIGH + 1))
    ALPHANUMERIC = _string.ascii_lowercase + _string.ascii_uppercase + _string.digits
    ALPHABETIC = _string.ascii_lowercase + _string.ascii_uppercase

    @property
    def characters(self) -> str:
        return self.value


def _is_plain_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Rng:
    """A random generator that remembers its seed so results can be reproduced."""

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = secrets.randbits(_SEED_BITS)
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an integer, got {type(seed).__name__}")
        self._seed = seed
        self._gen = _stdrandom.Random(seed)

    def seed(self) -> int:
        """Return the seed the generator was started with."""
        return self._seed

    def choice(self, elements: Sequence[T]) -> T:
        """Pick one element at random; raise ``IndexError`` if there are none."""
        pool = elements if isinstance(elements, Sequence) else list(elements)
        if not pool:
            raise IndexError("cannot choose from an empty collection")
        return pool[self._gen.randint(0, len(pool) - 1)]

    def number(self, bounds: Optional[Range] = None) -> Union[int, float]:
        """Draw a number from ``bounds``.

        Integer bounds give an integer in ``[low, high]``; otherwise a float in
        ``[low, high)``. Without bounds, a float in ``[0, 1)``.
        """
        if bounds is None:
            return self._gen.random()
        low, high = bounds.low, bounds.high
        if not (_is_plain_number(low) and _is_plain_number(high)):
            raise TypeError("range bounds must be numbers other than bool")
        if not low <= high:
            raise ValueError(f"invalid range: low {low!r} is not <= high {high!r}")
        if isinstance(low, numbers.Integral) and isinstance(high, numbers.Integral):
            return self._gen.randint(int(low), int(high))
        low, high = float(low), float(high)
        return low + (high - low) * self._gen.random()

    def string(self, length: int, distribution: Distribution = Distribution.ASCII) -> str:
        """Return ``length`` characters drawn from ``distribution``."""
        if length < 0:
            raise ValueError("length must not be negative")
        pool = Distribution(distribution).characters
        return "".join(self.choice(pool) for _ in range(length))

    def __repr__(self) -> str:
        return f"Rng(seed={self._seed})"


_local = threading.local()


def random() -> Rng:
    """Return this thread's shared generator, creating it on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = Rng()
        _local.rng = rng
    return rng