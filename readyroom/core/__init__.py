"""Scheduling primitives."""

from .clock import Clock, ManualClock, MonotonicClock
from .coalescer import UpdateCoalescer
from .scheduler import AsyncioScheduler, ManualScheduler, ScheduledCall, Scheduler
from .tick import TICK_INTERVAL_MS, TickScheduler, delay_to_next_tick

__all__ = [
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "UpdateCoalescer",
    "AsyncioScheduler",
    "ManualScheduler",
    "ScheduledCall",
    "Scheduler",
    "TICK_INTERVAL_MS",
    "TickScheduler",
    "delay_to_next_tick",
]
