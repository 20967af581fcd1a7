"""Physical quantities with a compile-free notion of dimension and scale.

A :class:`Measure` is a count expressed in a :class:`Scale`. A scale is a
dimension (data volume, length, ...), a ratio to the dimension's base unit and
an integral or floating representation. Integral arithmetic truncates toward
zero.
"""

from __future__ import annotations

import numbers
import sys
from dataclasses import dataclass, field, replace
from datetime import timedelta
from enum import Enum
from fractions import Fraction
from math import gcd, lcm
from typing import Optional, Union

Number = Union[int, float]

_LL_MIN = -(2**63)
_LL_MAX = 2**63 - 1


class Dimension(Enum):
    """What a measure quantifies."""

    DATA_VOLUME = "data_volume"
    DATA_RATE = "data_rate"
    LENGTH = "length"
    SPEED = "speed"
    DURATION = "duration"

    @property
    def rate(self) -> Optional[Dimension]:
        """The dimension obtained by dividing this one by another."""
        return _RATE_OF.get(self)

    @property
    def base(self) -> Optional[Dimension]:
        """For a rate, the dimension obtained by multiplying it back."""
        return _BASE_OF.get(self)

    @property
    def is_rate(self) -> bool:
        return self in _BASE_OF


_RATE_OF = {
    Dimension.DATA_VOLUME: Dimension.DATA_RATE,
    Dimension.LENGTH: Dimension.SPEED,
}
_BASE_OF = {rate: base for base, rate in _RATE_OF.items()}


@dataclass(frozen=True)
class Scale:
    """A unit: a dimension, a positive ratio to its base unit and a representation."""

    dimension: Dimension
    ratio: Fraction = Fraction(1)
    integral: bool = True
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        ratio = Fraction(self.ratio)
        if ratio <= 0:
            raise ValueError("Ratio must be positive")
        object.__setattr__(self, "ratio", ratio)
        object.__setattr__(self, "dimension", Dimension(self.dimension))

    def __call__(self, count: Number) -> Measure:
        return Measure(count, self)

    def zero(self) -> Measure:
        return Measure(0 if self.integral else 0.0, self)

    def min(self) -> Measure:
        """The lowest representable measure in this scale."""
        return Measure(_LL_MIN if self.integral else -sys.float_info.max, self)

    def max(self) -> Measure:
        """The highest representable measure in this scale."""
        return Measure(_LL_MAX if self.integral else sys.float_info.max, self)

    def __str__(self) -> str:
        return self.name or f"{self.dimension.value}[{self.ratio}]"


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def _merge(a: Scale, b: Scale, dimension: Dimension) -> Scale:
    ratio = Fraction(
        gcd(a.ratio.numerator, b.ratio.numerator),
        lcm(a.ratio.denominator, b.ratio.denominator),
    )
    merged = Scale(dimension, ratio, a.integral and b.integral)
    for candidate in (a, b):
        if candidate == merged:
            return candidate
    return merged


def _scale_of(value: Union[Scale, Measure]) -> Scale:
    if isinstance(value, Measure):
        return value.scale
    if isinstance(value, Scale):
        return value
    raise TypeError(f"expected a Scale or Measure, got {type(value).__name__}")


def common_scale(lhs: Union[Scale, Measure], rhs: Union[Scale, Measure]) -> Scale:
    """Return the finest scale both operands convert to without loss."""
    left, right = _scale_of(lhs), _scale_of(rhs)
    if left.dimension is not right.dimension:
        raise TypeError(
            f"no common scale for {left.dimension.value} and {right.dimension.value}"
        )
    return _merge(left, right, left.dimension)


def _converted_count(value: Measure, scale: Scale) -> Number:
    factor = value.scale.ratio / scale.ratio
    num, den = factor.numerator, factor.denominator
    if scale.integral and value.scale.integral:
        return _trunc_div(value.count * num, den)
    result = float(value.count)
    if num != 1:
        result *= num
    if den != 1:
        result /= den
    return int(result) if scale.integral else result


def measure_cast(scale: Scale, value: Measure) -> Measure:
    """Convert ``value`` to ``scale``, truncating toward zero if needed."""
    if not isinstance(value, Measure):
        raise TypeError(f"expected a Measure, got {type(value).__name__}")
    if value.dimension is not scale.dimension:
        raise TypeError(
            f"cannot cast {value.dimension.value} to {scale.dimension.value}"
        )
    return Measure(_converted_count(value, scale), scale)


def _scalar_scale(scale: Scale, scalar: numbers.Real) -> Scale:
    if isinstance(scalar, numbers.Integral) or not scale.integral:
        return scale
    return replace(scale, integral=False)


def _divide(a: Number, b: Number, integral: bool) -> Number:
    return _trunc_div(a, b) if integral else a / b


class Measure:
    """An immutable count in a given :class:`Scale`."""

    __slots__ = ("_count", "_scale")

    def __init__(self, count: Number, scale: Scale) -> None:
        if not isinstance(scale, Scale):
            raise TypeError(f"expected a Scale, got {type(scale).__name__}")
        if not isinstance(count, numbers.Real):
            raise TypeError(f"expected a number, got {type(count).__name__}")
        if scale.integral:
            if not isinstance(count, numbers.Integral):
                raise TypeError("an integral scale cannot hold a non-integral count")
            count = int(count)
        else:
            count = float(count)
        self._count = count
        self._scale = scale

    @property
    def count(self) -> Number:
        return self._count

    @property
    def scale(self) -> Scale:
        return self._scale

    @property
    def dimension(self) -> Dimension:
        return self._scale.dimension

    def to(self, scale: Scale) -> Measure:
        """Convert to ``scale``; refuse conversions that could lose precision."""
        if scale.dimension is not self.dimension:
            raise TypeError(
                f"cannot convert {self.dimension.value} to {scale.dimension.value}"
            )
        if scale.integral and (
            not self._scale.integral
            or (self._scale.ratio / scale.ratio).denominator != 1
        ):
            raise TypeError(
                f"conversion from {self._scale} to {scale} may lose precision; "
                "use measure_cast"
            )
        return measure_cast(scale, self)

    # -- relational -------------------------------------------------------

    def _counts_in_common(self, other: Measure) -> tuple[Number, Number, Scale]:
        if self.dimension is not other.dimension:
            raise TypeError(
                f"cannot combine {self.dimension.value} and {other.dimension.value}"
            )
        scale = _merge(self._scale, other._scale, self.dimension)
        return _converted_count(self, scale), _converted_count(other, scale), scale

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        if self.dimension is not other.dimension:
            return False
        left, right, _ = self._counts_in_common(other)
        return left == right

    def __hash__(self) -> int:
        # Equal measures may differ in scale and representation; only the
        # dimension is guaranteed to agree between them.
        return hash(self.dimension)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        left, right, _ = self._counts_in_common(other)
        return left < right

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        left, right, _ = self._counts_in_common(other)
        return left <= right

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        left, right, _ = self._counts_in_common(other)
        return left > right

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        left, right, _ = self._counts_in_common(other)
        return left >= right

    # -- arithmetic -------------------------------------------------------

    def __add__(self, other: object) -> Measure:
        if not isinstance(other, Measure):
            return NotImplemented
        left, right, scale = self._counts_in_common(other)
        return Measure(left + right, scale)

    def __sub__(self, other: object) -> Measure:
        if not isinstance(other, Measure):
            return NotImplemented
        left, right, scale = self._counts_in_common(other)
        return Measure(left - right, scale)

    def _scaled(self, scalar: numbers.Real, op) -> Measure:
        scale = _scalar_scale(self._scale, scalar)
        if scale.integral:
            return Measure(op(self._count, int(scalar)), scale)
        return Measure(op(float(self._count), float(scalar)), scale)

    def __mul__(self, other: object) -> Measure:
        if isinstance(other, timedelta):
            other = from_timedelta(other)
        if isinstance(other, Measure):
            base = self.dimension.base
            if base is None:
                raise TypeError(
                    f"{self.dimension.value} is not a rate and cannot be "
                    "multiplied by a measure"
                )
            scale = _merge(self._scale, other._scale, base)
            return Measure(
                _converted_count(self, scale) * _converted_count(other, scale), scale
            )
        if isinstance(other, numbers.Real):
            return self._scaled(other, lambda a, b: a * b)
        return NotImplemented

    def __rmul__(self, other: object) -> Measure:
        if isinstance(other, numbers.Real):
            return self._scaled(other, lambda a, b: a * b)
        return NotImplemented

    def __truediv__(self, other: object) -> Measure:
        if isinstance(other, timedelta):
            other = from_timedelta(other)
        if isinstance(other, Measure):
            if other.dimension is self.dimension:
                dimension = self.dimension
            else:
                rate = self.dimension.rate
                if rate is None:
                    raise TypeError(
                        f"{self.dimension.value} has no rate to divide into"
                    )
                dimension = rate
            scale = _merge(self._scale, other._scale, dimension)
            return Measure(
                _divide(
                    _converted_count(self, scale),
                    _converted_count(other, scale),
                    scale.integral,
                ),
                scale,
            )
        if isinstance(other, numbers.Real):
            scale = _scalar_scale(self._scale, other)
            return self._scaled(
                other, lambda a, b: _divide(a, b, scale.integral)
            )
        return NotImplemented

    def __mod__(self, other: object) -> Measure:
        if isinstance(other, Measure):
            left, right, scale = self._counts_in_common(other)
            if not scale.integral:
                raise TypeError("modulo requires integral measures")
            return Measure(_trunc_mod(left, right), scale)
        if isinstance(other, numbers.Real):
            if not (self._scale.integral and isinstance(other, numbers.Integral)):
                raise TypeError("modulo requires an integral measure and divisor")
            return Measure(_trunc_mod(self._count, int(other)), self._scale)
        return NotImplemented

    def __neg__(self) -> Measure:
        return Measure(-self._count, self._scale)

    def __pos__(self) -> Measure:
        return Measure(self._count, self._scale)

    def __repr__(self) -> str:
        return f"Measure({self._count!r}, {self._scale})"


def from_timedelta(value: timedelta) -> Measure:
    """Return a duration measure: whole seconds if exact, else microseconds."""
    if not isinstance(value, timedelta):
        raise TypeError(f"expected a timedelta, got {type(value).__name__}")
    seconds = value.days * 86400 + value.seconds
    if value.microseconds == 0:
        return SECONDS(seconds)
    return MICROSECONDS(seconds * 1_000_000 + value.microseconds)


BITS = Scale(Dimension.DATA_VOLUME, Fraction(1, 8), name="bits")
BYTES = Scale(Dimension.DATA_VOLUME, Fraction(1), name="bytes")
KBYTES = Scale(Dimension.DATA_VOLUME, Fraction(1024), name="kBytes")
MBYTES = Scale(Dimension.DATA_VOLUME, Fraction(1024**2), name="MBytes")
GBYTES = Scale(Dimension.DATA_VOLUME, Fraction(1024**3), name="GBytes")
TBYTES = Scale(Dimension.DATA_VOLUME, Fraction(1024**4), name="TBytes")

MILLIMETERS = Scale(Dimension.LENGTH, Fraction(1, 1000), name="millimeters")
METERS = Scale(Dimension.LENGTH, Fraction(1), name="meters")
KILOMETERS = Scale(Dimension.LENGTH, Fraction(1000), name="kilometers")
MILES = Scale(Dimension.LENGTH, Fraction(1609344, 1000), name="miles")

NANOSECONDS = Scale(Dimension.DURATION, Fraction(1, 10**9), name="nanoseconds")
MICROSECONDS = Scale(Dimension.DURATION, Fraction(1, 10**6), name="microseconds")
MILLISECONDS = Scale(Dimension.DURATION, Fraction(1, 1000), name="milliseconds")
SECONDS = Scale(Dimension.DURATION, Fraction(1), name="seconds")
MINUTES = Scale(Dimension.DURATION, Fraction(60), name="minutes")
HOURS = Scale(Dimension.DURATION, Fraction(3600), name="hours")