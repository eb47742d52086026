"""Tests for the schedulers, the update coalescer and countdown ticks."""

import asyncio
from datetime import timedelta

import pytest

from readyroom.core.clock import ManualClock
from readyroom.core.coalescer import UpdateCoalescer
from readyroom.core.scheduler import AsyncioScheduler, ManualScheduler
from readyroom.core.tick import TickScheduler, delay_to_next_tick


class TestManualScheduler:
    """Tests for the deterministic scheduler."""

    def setup_method(self):
        self.scheduler = ManualScheduler()
        self.calls: list[str] = []

    def test_run_once_coalesces_within_a_cycle(self):
        def action():
            self.calls.append("run")

        for _ in range(25):
            self.scheduler.run_once(action)
        assert self.calls == []

        self.scheduler.run_pending()
        assert self.calls == ["run"]

    def test_run_once_runs_again_in_a_later_cycle(self):
        def action():
            self.calls.append("run")

        self.scheduler.run_once(action)
        self.scheduler.run_pending()
        self.scheduler.run_once(action)
        self.scheduler.run_pending()
        assert self.calls == ["run", "run"]

    def test_cancelled_run_once_does_not_run(self):
        call = self.scheduler.run_once(lambda: self.calls.append("run"))
        call.cancel()
        self.scheduler.run_pending()
        assert self.calls == []

    def test_run_after_fires_in_due_order(self):
        self.scheduler.run_after(lambda: self.calls.append("late"), 300)
        self.scheduler.run_after(lambda: self.calls.append("early"), 100)
        self.scheduler.run_after(lambda: self.calls.append("middle"), 200)

        self.scheduler.advance(150)
        assert self.calls == ["early"]
        self.scheduler.advance(150)
        assert self.calls == ["early", "middle", "late"]

    def test_clock_is_at_due_time_when_timer_fires(self):
        seen: list[float] = []
        self.scheduler.run_after(lambda: seen.append(self.scheduler.clock.elapsed_ms), 250)
        self.scheduler.advance(1000)
        assert seen == [250]
        assert self.scheduler.clock.elapsed_ms == 1000

    def test_cancelled_timer_never_fires(self):
        call = self.scheduler.run_after(lambda: self.calls.append("fired"), 100)
        call.cancel()
        call.cancel()
        self.scheduler.advance(500)
        assert self.calls == []
        assert self.scheduler.pending_timers == 0

    def test_shares_clock(self):
        clock = ManualClock(start=100.0)
        scheduler = ManualScheduler(clock)
        scheduler.advance(500)
        assert clock.now() == 100.5


class TestUpdateCoalescer:
    def test_burst_of_notifications_runs_once(self):
        scheduler = ManualScheduler()
        runs: list[int] = []
        coalescer = UpdateCoalescer(scheduler, lambda: runs.append(1))

        for _ in range(10):
            coalescer.notify()
        assert coalescer.scheduled

        scheduler.run_pending()
        assert runs == [1]
        assert not coalescer.scheduled

    def test_cancel_drops_scheduled_update(self):
        scheduler = ManualScheduler()
        runs: list[int] = []
        coalescer = UpdateCoalescer(scheduler, lambda: runs.append(1))

        coalescer.notify()
        coalescer.cancel()
        scheduler.drain()
        assert runs == []


class TestDelayToNextTick:
    @pytest.mark.parametrize(
        "remaining, expected",
        [
            (timedelta(seconds=65, milliseconds=500), 500),
            (timedelta(seconds=3, milliseconds=1), 1),
            (timedelta(milliseconds=999), 999),
            (timedelta(seconds=65), 1000),
            (timedelta(0), 1000),
        ],
    )
    def test_delay(self, remaining, expected):
        assert delay_to_next_tick(remaining) == expected

    def test_custom_interval(self):
        assert delay_to_next_tick(timedelta(milliseconds=1250), interval_ms=500) == 250


class TestTickScheduler:
    """Tests for the single pending tick."""

    def setup_method(self):
        self.scheduler = ManualScheduler()
        self.ticks: list[float] = []
        self.ticker = TickScheduler(
            self.scheduler, lambda: self.ticks.append(self.scheduler.clock.elapsed_ms)
        )

    def test_arm_schedules_at_next_boundary(self):
        self.ticker.arm(timedelta(seconds=10, milliseconds=300))
        self.scheduler.advance(1000)
        assert self.ticks == [300]

    def test_rearming_supersedes_previous_tick(self):
        self.ticker.arm(timedelta(seconds=10, milliseconds=300))
        first = self.ticker.pending
        self.ticker.arm(timedelta(seconds=10, milliseconds=700))

        assert first.cancelled
        assert self.scheduler.pending_timers == 1
        self.scheduler.advance(1000)
        assert self.ticks == [700]

    def test_arming_without_countdown_cancels(self):
        self.ticker.arm(timedelta(seconds=4))
        self.ticker.arm(None)
        assert self.ticker.pending is None
        self.scheduler.advance(5000)
        assert self.ticks == []

    def test_pending_cleared_after_fire(self):
        self.ticker.arm(timedelta(milliseconds=400))
        self.scheduler.advance(400)
        assert self.ticker.pending is None


class TestAsyncioScheduler:
    """Tests for the asyncio-backed scheduler."""

    @pytest.mark.asyncio
    async def test_run_once_coalesces(self):
        scheduler = AsyncioScheduler()
        runs: list[int] = []

        def action():
            runs.append(1)

        for _ in range(5):
            scheduler.run_once(action)

        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert runs == [1]

    @pytest.mark.asyncio
    async def test_run_after_and_cancel(self):
        scheduler = AsyncioScheduler()
        fired: list[str] = []

        scheduler.run_after(lambda: fired.append("kept"), 10)
        cancelled = scheduler.run_after(lambda: fired.append("cancelled"), 10)
        cancelled.cancel()

        await asyncio.sleep(0.05)
        assert fired == ["kept"]
