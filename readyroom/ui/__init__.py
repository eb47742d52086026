"""Ready button logic. The wx widget lives in ui.wx_ready_button and needs wxPython."""

from .colours import DEFAULT_PALETTE, ButtonColour, ButtonColours, Colour, Palette
from .countdown import CountdownBaseline, CountdownBaselineState, reconcile, time_remaining
from .display import DerivedDisplay, derive_colour, derive_display, derive_text, derive_tooltip
from .ready_button import ReadyButtonController
from .surface import ButtonSurface, RecordingSurface

__all__ = [
    "DEFAULT_PALETTE",
    "ButtonColour",
    "ButtonColours",
    "Colour",
    "Palette",
    "CountdownBaseline",
    "CountdownBaselineState",
    "reconcile",
    "time_remaining",
    "DerivedDisplay",
    "derive_colour",
    "derive_display",
    "derive_text",
    "derive_tooltip",
    "ReadyButtonController",
    "ButtonSurface",
    "RecordingSurface",
]
