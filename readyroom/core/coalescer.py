"""Collapse bursts of change notifications into a single update."""

from typing import Any, Callable

from .scheduler import ScheduledCall, Scheduler


class UpdateCoalescer:
    """
    Runs an update at most once per scheduling cycle.

    notify() can be called any number of times; every call made before the
    scheduled update runs is absorbed into that one run.
    """

    def __init__(self, scheduler: Scheduler, update: Callable[[], Any]):
        self._scheduler = scheduler
        self._update = update
        self._scheduled: ScheduledCall | None = None

    @property
    def scheduled(self) -> bool:
        return self._scheduled is not None and self._scheduled.pending

    def notify(self) -> None:
        self._scheduled = self._scheduler.run_once(self._update)

    def cancel(self) -> None:
        """Drop an update that was requested but has not run yet."""
        if self._scheduled is not None:
            self._scheduled.cancel()
            self._scheduled = None
