"""Second-aligned countdown ticks."""

import logging
from datetime import timedelta
from typing import Any, Callable

from .scheduler import ScheduledCall, Scheduler

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


def delay_to_next_tick(remaining: timedelta, interval_ms: int = TICK_INTERVAL_MS) -> int:
    """
    Milliseconds until the remaining time crosses its next whole interval.

    A remaining time that already sits on a boundary waits a full interval,
    so the next tick always lands strictly in the future.
    """
    remaining_ms = remaining // timedelta(milliseconds=1)
    return remaining_ms % interval_ms or interval_ms


class TickScheduler:
    """
    Keeps at most one pending one-shot tick.

    arm() always cancels the previous tick before scheduling a new one, so a
    superseded tick can never fire. The tick callback is expected to call
    arm() again while a countdown is running; passing None stops the chain.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_tick: Callable[[], Any],
        interval_ms: int = TICK_INTERVAL_MS,
    ):
        self._scheduler = scheduler
        self._on_tick = on_tick
        self.interval_ms = interval_ms
        self._pending: ScheduledCall | None = None

    @property
    def pending(self) -> ScheduledCall | None:
        """The currently armed tick, if any."""
        if self._pending is not None and not self._pending.pending:
            return None
        return self._pending

    def arm(self, remaining: timedelta | None) -> None:
        """Schedule the next tick for the given remaining time, or stop ticking."""
        self.cancel()
        if remaining is None:
            return

        delay = delay_to_next_tick(remaining, self.interval_ms)
        self._pending = self._scheduler.run_after(self._on_tick, delay)
        logger.debug("Next countdown tick in %d ms", delay)

    def cancel(self) -> None:
        """Cancel the pending tick, if there is one."""
        if self._pending is None:
            return
        self._pending.cancel()
        self._pending = None
