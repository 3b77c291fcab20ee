"""Blocking FIFO queues shared between producer and consumer threads."""

from __future__ import annotations

import argparse
import threading
import time
from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"


class BlockingQueue(Generic[T]):
    """A thread-safe FIFO whose ``pop`` waits until an item is available."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._ready = threading.Condition()

    def push(self, value: T) -> None:
        """Append ``value`` and wake one waiting consumer."""
        with self._ready:
            self._items.append(value)
            self._ready.notify()

    def pop(self) -> T:
        """Remove and return the oldest item, blocking while the queue is empty."""
        with self._ready:
            self._ready.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def __len__(self) -> int:
        with self._ready:
            return len(self._items)


_registry: dict[Hashable, BlockingQueue[Any]] = {}
_registry_lock = threading.Lock()


def shared_queue(key: Hashable) -> BlockingQueue[Any]:
    """Return the one queue registered under ``key``, creating it on first use."""
    with _registry_lock:
        queue = _registry.get(key)
        if queue is None:
            queue = BlockingQueue()
            _registry[key] = queue
        return queue


def produce(queue: BlockingQueue[T], values: Iterable[T], delay: float = 0.0) -> None:
    """Push every value onto ``queue``, pausing ``delay`` seconds after each."""
    if delay < 0:
        raise ValueError(f"delay must not be negative, got {delay}")
    for value in values:
        queue.push(value)
        if delay:
            time.sleep(delay)


def _drain(queue: BlockingQueue[T], count: int) -> Iterator[T]:
    for _ in range(count):
        yield queue.pop()


def consume(queue: BlockingQueue[T], count: int) -> Iterator[T]:
    """Yield ``count`` items popped from ``queue``, waiting for each as needed."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return _drain(queue, count)


def _run_round(queue: BlockingQueue[Any], values: Iterable[Any], count: int, delay: float) -> None:
    def announced() -> Iterator[Any]:
        for value in values:
            print(f"{GREEN}Producer: {value}{RESET}", flush=True)
            yield value

    def report() -> None:
        for value in consume(queue, count):
            print(f"{RED}Consumer: {value}{RESET}", flush=True)

    threads = [
        threading.Thread(target=produce, args=(queue, announced(), delay)),
        threading.Thread(target=report),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Run an integer and then a string producer/consumer round."""
    parser = argparse.ArgumentParser(
        prog="workbench-queues",
        description="Pass values between a producer and a consumer thread.",
    )
    parser.add_argument("--count", type=int, default=10, help="items per round")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds between items")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must not be negative")
    if args.delay < 0:
        parser.error("--delay must not be negative")

    start = time.perf_counter()
    numbers = range(1, args.count + 1)
    _run_round(shared_queue(int), numbers, args.count, args.delay)
    _run_round(shared_queue(str), (f"String {i}" for i in numbers), args.count, args.delay)
    elapsed = time.perf_counter() - start
    print(f"the program duration {elapsed} seconds.")
    return 0