"""The ready / start match button for a multiplayer room."""

import logging

from ..core.clock import Clock
from ..core.coalescer import UpdateCoalescer
from ..core.scheduler import Scheduler
from ..core.tick import TickScheduler
from ..options import ReadyButtonOptions
from ..rooms.client import RoomClient
from .colours import DEFAULT_PALETTE, Palette
from .countdown import CountdownBaseline
from .display import DerivedDisplay, derive_display, derive_tooltip
from .surface import ButtonSurface

logger = logging.getLogger(__name__)


class ReadyButtonController:
    """
    Keeps a button's label and colours in step with the room.

    Room notifications are coalesced so a burst of them causes one update.
    While a countdown runs, the label is refreshed on every whole second of
    the remaining time from a local timer, without further notifications.

    Lifecycle:
        on_activate() subscribes to the room and shows the current state.
        on_deactivate() unsubscribes and cancels anything still scheduled,
        after which the controller never touches the surface again.
    """

    def __init__(
        self,
        surface: ButtonSurface,
        room_client: RoomClient,
        scheduler: Scheduler,
        palette: Palette = DEFAULT_PALETTE,
        options: ReadyButtonOptions | None = None,
        clock: Clock | None = None,
    ):
        self.surface = surface
        self.room_client = room_client
        self.palette = palette
        self.options = options or ReadyButtonOptions()
        self._baseline = CountdownBaseline(clock or scheduler.clock)
        self._coalescer = UpdateCoalescer(scheduler, self._update)
        self._ticker = TickScheduler(scheduler, self._on_countdown_tick)
        self._active = False
        self.display: DerivedDisplay | None = None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def tick_pending(self) -> bool:
        """Whether a countdown tick is armed."""
        return self._ticker.pending is not None

    def on_activate(self) -> None:
        """Start following the room."""
        if self._active:
            raise RuntimeError("Ready button is already active")
        self._active = True
        self.room_client.subscribe(self._on_room_updated)
        self._update()

    def on_deactivate(self) -> None:
        """Stop following the room and cancel pending work."""
        if not self._active:
            return
        self._active = False
        self.room_client.unsubscribe(self._on_room_updated)
        self._coalescer.cancel()
        self._ticker.cancel()
        logger.debug("Ready button deactivated")

    @property
    def tooltip_text(self) -> str:
        default = self.surface.default_tooltip_text or self.options.default_tooltip
        if not self._active:
            return default
        return derive_tooltip(
            self.room_client.room,
            self.room_client.local_user,
            self.room_client.is_host,
            default,
            self.options.locale,
        )

    def _on_room_updated(self) -> None:
        self._coalescer.notify()

    def _update(self) -> None:
        room = self.room_client.room
        remaining = self._baseline.reconcile(room.countdown if room is not None else None)
        self._ticker.arm(remaining)
        self._apply(self._derive(remaining))

    def _on_countdown_tick(self) -> None:
        remaining = self._baseline.remaining
        self._apply(self._derive(remaining))
        self._ticker.arm(remaining)

    def _derive(self, remaining) -> DerivedDisplay:
        return derive_display(
            self.room_client.room,
            self.room_client.local_user,
            remaining,
            self.room_client.is_host,
            self.options.locale,
        )

    def _apply(self, display: DerivedDisplay) -> None:
        self.display = display
        colours = self.palette.for_category(display.colour)
        self.surface.text = display.text
        self.surface.background_colour = colours.background
        self.surface.accent_dark = colours.accent_dark
        self.surface.accent_light = colours.accent_light
