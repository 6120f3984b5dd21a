"""
Clock and randomness capabilities injected into the demo procedures.

This module is private API. Import the names from ``lowperf`` instead.
"""

from __future__ import annotations

import random
import time
from typing import Callable, Protocol

RandomFactory = Callable[[], random.Random]


class Clock(Protocol):
    def millis(self) -> int: ...

    def nanos(self) -> int: ...


class SystemClock:
    """Wall-clock milliseconds and monotonic nanoseconds."""

    def millis(self) -> int:
        return time.time_ns() // 1_000_000

    def nanos(self) -> int:
        return time.perf_counter_ns()


class FixedClock:
    """
    Clock that always reports the same instant.

    Used where output must be reproducible, e.g. when asserting the exact
    length of text built from timestamps.
    """

    def __init__(self, millis: int = 1_700_000_000_000, nanos: int = 123_456_789) -> None:
        self._millis = millis
        self._nanos = nanos

    def millis(self) -> int:
        return self._millis

    def nanos(self) -> int:
        return self._nanos


def fresh_random() -> random.Random:
    """Return a new, OS-seeded generator (one throwaway object per call)."""
    return random.Random()


def seeded_random_factory(seed: int) -> RandomFactory:
    """
    Build a factory whose generators derive from a single seeded master.

    Every call still allocates a new ``random.Random``, so the allocation
    pattern matches ``fresh_random``; only the values become reproducible.
    """
    master = random.Random(seed)

    def factory() -> random.Random:
        return random.Random(master.getrandbits(64))

    return factory
