# novakit

A handful of small building blocks for Python 3.10 and later. It uses only the
standard library.

| Module | What it gives you |
| --- | --- |
| `novakit.types` | `Range`, a frozen low/high pair, and `to_underlying`, which returns an enum member's value |
| `novakit.expected` | `Expected` and `Unexpected`, a value-or-error result type |
| `novakit.data` | `DataView`, which reads big- or little-endian unsigned numbers and strings from bytes, with bounds checks that raise `OutOfDataBounds` |
| `novakit.flat_map` | `FlatMap`, a map kept sorted by key in two parallel lists |
| `novakit.units` | `Measure`, `Scale` and `Dimension` for data volumes, lengths, durations and their rates, with exact ratio conversions |
| `novakit.random` | `Rng`, a seedable helper for numbers, choices and strings, plus a per-thread shared instance from `random()` |
| `novakit.system` | `set_cpu_affinity` and `get_pid` |
| `novakit.event_loop` | `EventLoop` and `Timings`, which call a function at a fixed interval until a time limit is reached |

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Binary data

```python
from novakit.data import DataView, Endian

view = DataView(b"\x00\x2a\x03abc", Endian.BIG)
view.as_number(0, 2)      # 42
view.as_dyn_string(2, 1)  # "abc": one length byte, then the text
view.to_hex()             # "00 2a 03 61 62 63"
view.subview(3)           # a view over b"abc", same byte order
```

`as_number` accepts lengths of 1, 2 or 4 bytes and raises `ValueError` for any
other. Reads past the end raise `OutOfDataBounds`, a subclass of `IndexError`.

### Value or error

```python
from novakit.expected import Expected, Unexpected

ok = Expected(5)
bad = Expected(Unexpected("no such file"))
ok.value()          # 5
bad.has_value()     # False
bad.error()         # "no such file"
bad.value_or(0)     # 0
```

`value()` on an error, or `error()` on a value, raises `ValueError`.

### Sorted map

```python
from novakit.flat_map import FlatMap

m = FlatMap([("b", 2), ("a", 1)])
m.keys()              # ["a", "b"]
m.at("a")             # 1
m.insert("a", 10)     # (1, False): existing values are not overwritten

counts = FlatMap(default_factory=int)
counts["x"]           # 0, and "x" is now stored
```

`at` raises `KeyError` for a missing key; so does `m[key]` when no
`default_factory` is set.

### Measures

```python
from datetime import timedelta
from novakit.units import BITS, BYTES, KBYTES, METERS, MILES, measure_cast

BYTES(12) + BITS(2) == BITS(98)          # True
KBYTES(1) == BYTES(1024)                 # True
measure_cast(BYTES, BITS(15))            # 1 byte, truncated
measure_cast(METERS, MILES(1))           # 1609 meters
BITS(9).to(BYTES)                        # TypeError: could lose precision

rate = BYTES(10) / timedelta(seconds=2)  # a data rate of 5 bytes per second
rate * timedelta(minutes=1) == BYTES(300)  # True
```

Predefined scales: `BITS`, `BYTES`, `KBYTES`, `MBYTES`, `GBYTES`, `TBYTES`,
`MILLIMETERS`, `METERS`, `KILOMETERS`, `MILES`, `NANOSECONDS`, `MICROSECONDS`,
`MILLISECONDS`, `SECONDS`, `MINUTES`, `HOURS`. Each scale also offers `zero()`,
`min()` and `max()`. Integral arithmetic truncates toward zero, and combining
measures of unrelated dimensions raises `TypeError`.

### Random values

```python
from novakit.random import Distribution, Rng, random
from novakit.types import Range

rng = Rng(1)
rng.seed()                                # 1
rng.number(Range(1, 6))                   # an int from 1 to 6, inclusive
rng.number(Range(1.0, 6.0))               # a float in [1.0, 6.0)
rng.number()                              # a float in [0, 1)
rng.choice([3, 6, 9])                     # one of the elements
rng.string(10, Distribution.ALPHANUMERIC) # ten letters or digits

random().number()                         # this thread's shared generator
```

A range whose `low` is not `<=` its `high` (including NaN bounds) raises
`ValueError`. `Rng` is not meant for cryptography.

### Process controls and timing loops

`set_cpu_affinity(ProcessScheduling(pid, cpu, ProcessPriority.CRITICAL))` pins
a process to one CPU and sets its priority, returning an `Expected` that holds
`None` or an error message. On platforms without these controls it does nothing
and reports success. `get_pid()` returns the current process id.

`EventLoop(func, Timings(interval, limit)).start()` busy-waits, calling
`func(delta_ns, ticks)` each time more than `interval` has passed, until the
accumulated time between calls reaches `limit`. Both timings take nanoseconds
or `timedelta` values.

## What it does not do

novakit is a library only: it installs no command-line tool. Its
`EventLoop` runs a single busy-waiting loop in the calling thread; there is no
thread pool or task scheduler.