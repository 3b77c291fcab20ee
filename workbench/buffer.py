"""Bounded buffers for producer/consumer threads."""

from __future__ import annotations

import threading
import time
from collections import deque
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    return capacity


class BoundedBuffer(Generic[T]):
    """A fixed-capacity FIFO guarded by one lock and one condition variable."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[T] = deque()
        self._changed = threading.Condition()

    def put(self, item: T) -> None:
        """Add ``item``, waiting while the buffer is full."""
        with self._changed:
            self._changed.wait_for(lambda: len(self._items) < self.capacity)
            self._items.append(item)
            self._changed.notify_all()

    def get(self) -> T:
        """Remove and return the oldest item, waiting while the buffer is empty."""
        with self._changed:
            self._changed.wait_for(lambda: bool(self._items))
            item = self._items.popleft()
            self._changed.notify_all()
            return item

    def __len__(self) -> int:
        with self._changed:
            return len(self._items)


class SlotBuffer(Generic[T]):
    """A fixed-capacity FIFO that counts free and filled slots with semaphores."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[T] = deque()
        self._lock = threading.Lock()
        self._empty_slots = threading.Semaphore(capacity)
        self._full_slots = threading.Semaphore(0)

    def put(self, item: T) -> None:
        """Take a free slot, store ``item`` in it and signal a filled slot."""
        self._empty_slots.acquire()
        with self._lock:
            self._items.append(item)
        self._full_slots.release()

    def get(self) -> T:
        """Take a filled slot, remove its item and signal a free slot."""
        self._full_slots.acquire()
        with self._lock:
            item = self._items.popleft()
        self._empty_slots.release()
        return item

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class _Buffer(Protocol[T]):
    def put(self, item: T) -> None: ...

    def get(self) -> T: ...


def _check_delay(delay: float) -> None:
    if delay < 0:
        raise ValueError(f"delay must not be negative, got {delay}")


def produce_items(buffer: _Buffer[int], count: int, delay: float = 0.0) -> list[int]:
    """Put the numbers ``0 .. count - 1`` into ``buffer`` and return them."""
    _check_delay(delay)
    produced: list[int] = []
    for item in range(count):
        buffer.put(item)
        produced.append(item)
        if delay:
            time.sleep(delay)
    return produced


def consume_items(buffer: _Buffer[T], count: int, delay: float = 0.0) -> list[T]:
    """Take ``count`` items out of ``buffer`` and return them in order."""
    _check_delay(delay)
    consumed: list[T] = []
    for _ in range(count):
        consumed.append(buffer.get())
        if delay:
            time.sleep(delay)
    return consumed