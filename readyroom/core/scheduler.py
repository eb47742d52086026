"""Scheduling services that drive the ready button.

All schedulers run their actions on a single logical thread. Two kinds of
scheduling are offered:

- run_once(action): run the action on the next scheduling cycle. Calling it
  again for the same action before that cycle runs does not queue a second
  execution.
- run_after(action, delay_ms): run the action once after a delay.

Both return a ScheduledCall that can be cancelled.
"""

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Any, Callable

from .clock import Clock, ManualClock, MonotonicClock

Action = Callable[[], Any]


class ScheduledCall:
    """A handle to an action that has been scheduled but may not have run yet."""

    def __init__(self, action: Action, canceller: Callable[[], Any] | None = None):
        self.action = action
        self.cancelled = False
        self.completed = False
        self._canceller = canceller

    @property
    def pending(self) -> bool:
        """True while the action can still run."""
        return not (self.cancelled or self.completed)

    def bind_canceller(self, canceller: Callable[[], Any] | None) -> None:
        """Attach the backend hook that stops the underlying timer."""
        self._canceller = canceller

    def cancel(self) -> None:
        """Prevent the action from running. Safe to call more than once."""
        if not self.pending:
            return
        self.cancelled = True
        if self._canceller is not None:
            self._canceller()
            self._canceller = None

    def run(self) -> None:
        """Run the action unless it was cancelled or already ran."""
        if not self.pending:
            return
        self.completed = True
        self._canceller = None
        self.action()


class Scheduler(ABC):
    """
    Base class for scheduling services.

    Subclasses provide the two backend primitives (_call_soon and
    _call_later); coalescing and cancellation live here.
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or MonotonicClock()
        self._once: dict[Action, ScheduledCall] = {}

    def run_once(self, action: Action) -> ScheduledCall:
        """Run the action on the next cycle, at most once per cycle."""
        call = self._once.get(action)
        if call is not None and call.pending:
            return call

        call = ScheduledCall(action)
        self._once[action] = call
        call.bind_canceller(self._call_soon(lambda: self._run_once_now(call)))
        return call

    def run_after(self, action: Action, delay_ms: float) -> ScheduledCall:
        """Run the action once after delay_ms milliseconds."""
        call = ScheduledCall(action)
        call.bind_canceller(self._call_later(call.run, max(0.0, delay_ms)))
        return call

    def _run_once_now(self, call: ScheduledCall) -> None:
        # Drop the entry first so the action can schedule itself again.
        if self._once.get(call.action) is call:
            del self._once[call.action]
        call.run()

    @abstractmethod
    def _call_soon(self, callback: Action) -> Callable[[], Any] | None:
        """Queue a callback for the next cycle. Returns a canceller, if any."""
        ...

    @abstractmethod
    def _call_later(
        self, callback: Action, delay_ms: float
    ) -> Callable[[], Any] | None:
        """Queue a delayed callback. Returns a canceller, if any."""
        ...


class ManualScheduler(Scheduler):
    """
    Deterministic scheduler driven by a ManualClock.

    Nothing runs until run_pending() or advance() is called, which makes it
    suitable for tests and for offline simulation.
    """

    def __init__(self, clock: ManualClock | None = None):
        super().__init__(clock or ManualClock())
        self.clock: ManualClock
        self._queue: list[Action] = []
        self._timers: list[tuple[float, int, ScheduledCall]] = []
        self._sequence = itertools.count()

    @property
    def pending_timers(self) -> int:
        """Number of delayed calls that can still fire."""
        return sum(1 for _, _, call in self._timers if call.pending)

    @property
    def next_due_ms(self) -> float | None:
        """Elapsed time at which the next live delayed call fires."""
        due = [due_ms for due_ms, _, call in self._timers if call.pending]
        return min(due) if due else None

    def _call_soon(self, callback: Action) -> None:
        self._queue.append(callback)
        return None

    def _call_later(self, callback: Action, delay_ms: float) -> Callable[[], Any]:
        # callback is always ScheduledCall.run; keep the call so cancelled
        # timers can be skipped when they come due.
        timer = ScheduledCall(callback)
        due_ms = self.clock.elapsed_ms + delay_ms
        heapq.heappush(self._timers, (due_ms, next(self._sequence), timer))
        return timer.cancel

    def run_pending(self) -> int:
        """Run one cycle of queued callbacks. Returns how many ran."""
        queue, self._queue = self._queue, []
        for callback in queue:
            callback()
        return len(queue)

    def drain(self) -> None:
        """Run cycles until nothing is queued."""
        while self._queue:
            self.run_pending()

    def advance(self, milliseconds: float) -> None:
        """Move time forward, firing every delayed call that comes due."""
        target = self.clock.elapsed_ms + milliseconds
        self.drain()
        while self._timers and self._timers[0][0] <= target:
            due_ms, _, timer = heapq.heappop(self._timers)
            if not timer.pending:
                continue
            self.clock.set_elapsed(due_ms)
            timer.run()
            self.drain()
        self.clock.set_elapsed(target)
        self.drain()


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        super().__init__(MonotonicClock())
        self._loop = loop or asyncio.get_running_loop()

    def _call_soon(self, callback: Action) -> Callable[[], Any]:
        return self._loop.call_soon(callback).cancel

    def _call_later(self, callback: Action, delay_ms: float) -> Callable[[], Any]:
        return self._loop.call_later(delay_ms / 1000, callback).cancel
