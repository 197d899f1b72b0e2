"""
Time sources for the game loop.

All times are in milliseconds. Swapping MonotonicClock for ManualClock lets
tests and the headless runner advance time without real waits.
"""

import time


class Clock:
    """
    Base class/interface for a time source.
    """

    def now(self) -> float:
        """Current time in milliseconds."""
        raise NotImplementedError

    def sleep(self, seconds: float) -> None:
        """Wait until `seconds` have passed on this clock."""
        raise NotImplementedError


class MonotonicClock(Clock):
    """Wall-clock time from time.perf_counter()."""

    def now(self) -> float:
        return time.perf_counter() * 1000.0

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


class ManualClock(Clock):
    """
    A clock that only moves when told to.

    sleep() advances the clock instead of blocking.
    """

    def __init__(self, start: float = 0.0):
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError(f"Cannot move a clock backwards ({ms} ms)")
        self._now += ms
        return self._now

    def sleep(self, seconds: float) -> None:
        self.advance(seconds * 1000.0)
