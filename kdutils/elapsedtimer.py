"""A monotonic stopwatch that starts running on creation."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable

Clock = Callable[[], int]


class ElapsedTimer:
    """Measures time since it was created or last (re)started.

    ``clock`` returns a monotonic time in nanoseconds.
    """

    def __init__(self, clock: Clock = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start_ns = clock()

    def nsec_elapsed(self) -> int:
        return self._clock() - self._start_ns

    def msec_elapsed(self) -> int:
        return self.nsec_elapsed() // 1_000_000

    def elapsed(self) -> timedelta:
        return timedelta(microseconds=self.nsec_elapsed() / 1_000)

    def start(self) -> None:
        self._start_ns = self._clock()

    def restart(self) -> timedelta:
        """Start again and return the time elapsed before the restart."""
        now = self._clock()
        previous = now - self._start_ns
        self._start_ns = now
        return timedelta(microseconds=previous / 1_000)