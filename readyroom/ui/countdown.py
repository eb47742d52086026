"""
Local tracking of a server countdown.

The server only says how much time was left when a countdown started (or
changed). The client remembers when it first saw each countdown and works out
the remaining time from its own clock, so the display can tick down without
asking the server again.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from ..core.clock import Clock
from ..rooms.models import MultiplayerCountdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CountdownBaselineState:
    """The countdown last seen and the local time at which it was first seen."""

    countdown: MultiplayerCountdown | None = None
    changed_at: float = 0.0


def _countdown_id(countdown: MultiplayerCountdown | None) -> int | None:
    return countdown.id if countdown is not None else None


def reconcile(
    state: CountdownBaselineState,
    observed: MultiplayerCountdown | None,
    now: float,
) -> CountdownBaselineState:
    """
    Return the baseline after observing a countdown (or its absence).

    The baseline only moves when the countdown identity changes. Seeing the
    same countdown again keeps the original reference point, whatever time
    remaining it reports.
    """
    if _countdown_id(state.countdown) == _countdown_id(observed):
        return state

    logger.debug(
        "Countdown changed from %s to %s",
        _countdown_id(state.countdown),
        _countdown_id(observed),
    )
    return CountdownBaselineState(countdown=observed, changed_at=now)


def time_remaining(state: CountdownBaselineState, now: float) -> timedelta | None:
    """Remaining countdown time, never negative. None when no countdown is active."""
    if state.countdown is None:
        return None

    elapsed = timedelta(seconds=now - state.changed_at)
    if elapsed > state.countdown.time_remaining:
        return timedelta(0)
    return state.countdown.time_remaining - elapsed


class CountdownBaseline:
    """Holds a CountdownBaselineState and reads the time from a clock."""

    def __init__(self, clock: Clock):
        self._clock = clock
        self.state = CountdownBaselineState(changed_at=clock.now())

    def reconcile(self, observed: MultiplayerCountdown | None) -> timedelta | None:
        """Observe the room's countdown and return the remaining time."""
        now = self._clock.now()
        self.state = reconcile(self.state, observed, now)
        return time_remaining(self.state, now)

    @property
    def remaining(self) -> timedelta | None:
        return time_remaining(self.state, self._clock.now())
