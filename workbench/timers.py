"""Connection timers kept in ascending order of expiry time."""

from __future__ import annotations

import bisect
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ClientData:
    """A client connection and the timer that watches it."""

    address: tuple[str, int]
    sockfd: int
    timer: Timer | None = None


@dataclass(eq=False)
class Timer:
    """A deadline with a callback run on the timer's data once it passes."""

    expire: float
    callback: Callable[[Any], None] | None = None
    user_data: Any = None


def _expiry(timer: Timer) -> float:
    return timer.expire


class SortedTimerList:
    """Timers ordered by expiry; timers with equal expiry keep insertion order."""

    def __init__(self) -> None:
        self._timers: list[Timer] = []

    def add(self, timer: Timer) -> None:
        """Insert ``timer`` after every timer expiring no later than it."""
        bisect.insort_right(self._timers, timer, key=_expiry)

    def adjust(self, timer: Timer) -> None:
        """Move ``timer`` to its place after its expiry time has changed."""
        self.remove(timer)
        self.add(timer)

    def remove(self, timer: Timer) -> None:
        """Take ``timer`` out of the list."""
        try:
            self._timers.remove(timer)
        except ValueError:
            raise ValueError("timer is not in this list") from None

    def tick(self, now: float | None = None) -> list[Timer]:
        """Fire and drop every timer whose expiry is not after ``now``.

        ``now`` defaults to the current time. Returns the fired timers in order.
        """
        if now is None:
            now = time.time()
        fired: list[Timer] = []
        while self._timers and self._timers[0].expire <= now:
            timer = self._timers.pop(0)
            if timer.callback is not None:
                timer.callback(timer.user_data)
            fired.append(timer)
        return fired

    def __iter__(self) -> Iterator[Timer]:
        return iter(list(self._timers))

    def __len__(self) -> int:
        return len(self._timers)