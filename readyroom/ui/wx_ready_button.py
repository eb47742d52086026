"""wxPython ready button."""

from typing import Any, Callable

import wx

from ..core.clock import MonotonicClock
from ..core.scheduler import Action, Scheduler
from ..options import ReadyButtonOptions
from ..rooms.client import RoomClient
from .colours import DEFAULT_PALETTE, Colour, Palette
from .ready_button import ReadyButtonController


class WxScheduler(Scheduler):
    """Scheduler that runs actions on the wx main loop."""

    def __init__(self):
        super().__init__(MonotonicClock())

    def _call_soon(self, callback: Action) -> None:
        # wx.CallAfter cannot be withdrawn; a cancelled ScheduledCall simply
        # does nothing when it runs.
        wx.CallAfter(callback)
        return None

    def _call_later(self, callback: Action, delay_ms: float) -> Callable[[], Any]:
        timer = wx.CallLater(max(1, int(delay_ms)), callback)
        return timer.Stop


class WxButtonSurface:
    """Adapts a wx.Button to the ButtonSurface protocol."""

    def __init__(self, button: wx.Button, default_tooltip_text: str = ""):
        self._button = button
        self.default_tooltip_text = default_tooltip_text
        self._background_colour: Colour | None = None
        # wx buttons have no accent layer; kept for the protocol.
        self.accent_dark: Colour | None = None
        self.accent_light: Colour | None = None

    @property
    def text(self) -> str:
        return self._button.GetLabel()

    @text.setter
    def text(self, value: str) -> None:
        if self._button.GetLabel() != value:
            self._button.SetLabel(value)

    @property
    def background_colour(self) -> Colour | None:
        return self._background_colour

    @background_colour.setter
    def background_colour(self, value: Colour | None) -> None:
        self._background_colour = value
        if value is not None:
            self._button.SetBackgroundColour(wx.Colour(value.r, value.g, value.b))
            self._button.Refresh()


class WxReadyButton(wx.Button):
    """
    A wx.Button showing the ready state of a room.

    The controller is activated on creation and deactivated when the window
    is destroyed.
    """

    def __init__(
        self,
        parent: wx.Window,
        room_client: RoomClient,
        scheduler: Scheduler | None = None,
        palette: Palette = DEFAULT_PALETTE,
        options: ReadyButtonOptions | None = None,
    ):
        super().__init__(parent, label="", size=(320, 48))
        options = options or ReadyButtonOptions()
        self.surface = WxButtonSurface(self, options.default_tooltip)
        self.controller = ReadyButtonController(
            self.surface,
            room_client,
            scheduler or WxScheduler(),
            palette=palette,
            options=options,
        )

        self.Bind(wx.EVT_ENTER_WINDOW, self._on_enter)
        self.Bind(wx.EVT_WINDOW_DESTROY, self._on_destroy)
        self.controller.on_activate()

    def _on_enter(self, event):
        self.SetToolTip(self.controller.tooltip_text)
        event.Skip()

    def _on_destroy(self, event):
        if event.GetEventObject() is self:
            self.controller.on_deactivate()
        event.Skip()
