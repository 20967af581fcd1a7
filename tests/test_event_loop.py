from datetime import timedelta

import pytest

from novakit.event_loop import EventLoop, Timings


def test_timings_from_timedelta():
    timings = Timings(timedelta(milliseconds=1), timedelta(seconds=2))
    assert timings.interval == 1_000_000
    assert timings.limit == 2_000_000_000


def test_timings_rejects_float():
    with pytest.raises(TypeError):
        Timings(1.5, 10)


def test_loop_calls_after_interval_until_limit():
    interval = 1_000_000
    limit = 10_000_000
    calls = []

    loop = EventLoop(lambda delta, ticks: calls.append((delta, ticks)), Timings(interval, limit))
    loop.start()

    assert calls
    assert all(delta > interval for delta, _ in calls)
    total = sum(delta for delta, _ in calls)
    assert total >= limit
    assert loop.total_elapsed == total
    assert len(calls) <= limit // interval + 1


def test_ticks_are_monotonic():
    ticks = []
    loop = EventLoop(lambda delta, tick: ticks.append(tick), Timings(500_000, 5_000_000))
    loop.start()
    assert len(ticks) >= 2
    assert ticks == sorted(ticks)


def test_zero_limit_never_calls():
    calls = []
    loop = EventLoop(lambda *args: calls.append(args), Timings(1000, 0))
    loop.start()
    assert calls == []
    assert loop.total_elapsed == 0