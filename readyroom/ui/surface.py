"""The control the ready button logic drives."""

from typing import Protocol

from .colours import Colour


class ButtonSurface(Protocol):
    """The parts of a button widget that the ready button logic writes to."""

    text: str
    background_colour: Colour | None
    accent_dark: Colour | None
    accent_light: Colour | None

    @property
    def default_tooltip_text(self) -> str: ...


class RecordingSurface:
    """
    In-memory ButtonSurface that remembers every label it was given.

    Used in tests and by the command line simulator.
    """

    def __init__(self, default_tooltip_text: str = ""):
        self._text = ""
        self.background_colour: Colour | None = None
        self.accent_dark: Colour | None = None
        self.accent_light: Colour | None = None
        self.default_tooltip_text = default_tooltip_text
        self.history: list[str] = []

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self.history.append(value)
