"""A busy-waiting loop that calls a function at a fixed interval."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Union

Duration = Union[int, timedelta]


def _to_ns(value: Duration) -> int:
    if isinstance(value, timedelta):
        return (
            (value.days * 86400 + value.seconds) * 1_000_000_000
            + value.microseconds * 1000
        )
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected nanoseconds or a timedelta, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Timings:
    """Call interval and total run time, in nanoseconds (or as timedeltas)."""

    interval: int
    limit: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "interval", _to_ns(self.interval))
        object.__setattr__(self, "limit", _to_ns(self.limit))


class EventLoop:
    """Calls ``func(delta_ns, ticks)`` whenever more than the interval has passed."""

    def __init__(self, func: Callable[[int, int], object], timings: Timings) -> None:
        self.func = func
        self.timings = timings
        self.total_elapsed = 0

    def start(self) -> None:
        """Loop until the accumulated time between calls reaches the limit.

        ``delta_ns`` is the time since the previous call (or the start);
        ``ticks`` is a monotonic high-resolution counter reading.
        """
        last = time.perf_counter_ns()
        while self.total_elapsed < self.timings.limit:
            now = time.perf_counter_ns()
            delta = now - last
            if delta > self.timings.interval:
                self.func(delta, time.perf_counter_ns())
                self.total_elapsed += delta
                last = now