"""Clock sources used for countdown arithmetic."""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """A source of the current time, in seconds."""

    @abstractmethod
    def now(self) -> float:
        """Return the current time in seconds. Only differences are meaningful."""
        ...


class MonotonicClock(Clock):
    """Clock backed by time.monotonic(), immune to wall-clock adjustments."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock(Clock):
    """
    Clock that only moves when told to.

    Time is tracked as milliseconds elapsed since a fixed start so that
    repeated advances do not accumulate floating point drift.
    """

    def __init__(self, start: float = 0.0):
        self._start = start
        self.elapsed_ms: float = 0

    def now(self) -> float:
        return self._start + self.elapsed_ms / 1000

    def advance(self, milliseconds: float) -> None:
        """Move the clock forward."""
        if milliseconds < 0:
            raise ValueError("Cannot move a clock backwards")
        self.elapsed_ms += milliseconds

    def set_elapsed(self, milliseconds: float) -> None:
        """Jump to an absolute elapsed time (never backwards)."""
        self.advance(milliseconds - self.elapsed_ms)
