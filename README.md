# workbench

A small collection of well-known algorithms and concurrency building blocks,
plus a fewest-stops route planner for a metro network. It has no third-party
dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `workbench.sorting`

Classic comparison and distribution sorts. Every function takes an iterable,
leaves it untouched and returns a new list in ascending order:

- `bubble_sort`, `insertion_sort`, `selection_sort`, `shell_sort`
- `heap_sort`, `merge_sort`, `quick_sort`
- `counting_sort` and `radix_sort_int` for non-negative integers (a
  `TypeError` for non-integers, a `ValueError` for negative values)
- `bucket_sort_int` for integers, `bucket_sort_float` for numbers,
  `bucket_sort_char` for single characters with code points below 256
- `radix_sort_str` for strings, giving lexicographic order

```python
from workbench.sorting import heap_sort

heap_sort([9, 8, 7, 6, 5, 4, 3, 2, 1])   # [1, 2, 3, 4, 5, 6, 7, 8, 9]
```

### `workbench.hashing`

`sdbm(data)` returns the 32-bit SDBM hash of bytes, or of text as its UTF-8
encoding.

```python
from workbench.hashing import sdbm

sdbm(b"hello")
sdbm("hello")   # same value
```

### `workbench.queues`

`BlockingQueue` is a thread-safe FIFO whose `pop` waits until a value is
available; `len()` gives the number of waiting items. `shared_queue(key)`
returns one queue per key, created on first use, so threads can meet on the
same instance. `produce(queue, values, delay)` pushes values with an optional
pause after each, and `consume(queue, count)` yields `count` popped values.

A demonstration runs an integer round and then a string round between a
producer and a consumer thread, and prints the elapsed time:

```
workbench-queues --count 10 --delay 1.0
```

### `workbench.buffer`

Two fixed-capacity FIFO buffers (default capacity 10) with `put`, `get` and
`len()`:

- `BoundedBuffer`, coordinated by one condition variable;
- `SlotBuffer`, coordinated by counting semaphores for free and filled slots.

`produce_items(buffer, count, delay)` puts `0 .. count - 1` into a buffer and
`consume_items(buffer, count, delay)` takes `count` items out; both return the
items they handled.

### `workbench.timers`

`SortedTimerList` keeps `Timer` objects (an `expire` time, an optional
`callback` and its `user_data`) ordered by expiry, with equal expiries in
insertion order. It offers `add`, `adjust` (re-place a timer after its expiry
changed), `remove` (a `ValueError` for an unknown timer), iteration and
`len()`. `tick(now)` runs the callback of every timer expiring no later than
`now` (the current time by default), drops those timers and returns them.
`ClientData` holds an address, a socket number and a timer as plain data.

### `workbench.network`

Models a metro system: `Station`, `Line`, `Route`, `StationManager` and
`LineManager`. `parse_stations(text)` reads a JSON array of
`{"key": ..., "value": ...}` objects, where the first two characters of the
key give the line number (see `line_from_key`) and the value is the station
name; `build_network(records)` does the same from records already loaded.
`LineManager.get_best_route` picks the single-line ride with fewest stops, and
`stops_between` lists the stations passed on it.

### `workbench.planner`

`shortest_route(station_manager, line_manager, start, terminal, bias)` finds
the journey with fewest stops, counting `bias` extra stops (30 by default) for
every change of line; it raises `KeyError` for an unknown station.
`build_route_matrix` gives the best direct ride between every pair of stations,
`format_route` describes the rides, and `fetch_stations(url)` downloads a
station list.

The command reads the station list from a file path or a URL and asks for the
start and terminal stations on standard input unless they are given:

```
workbench-metro stations.json --from START --to END --bias 30
```

## What it does not do

The planner ships no station data and knows no fixed address to fetch it from:
a station list must be supplied as a file or URL. The timer list only keeps
and fires timers; it opens, watches and closes no connections itself.