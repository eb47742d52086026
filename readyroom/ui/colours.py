"""Colours used by the ready button."""

from dataclasses import dataclass
from enum import Enum


class ButtonColour(Enum):
    """Colour category of the ready button."""

    GREEN = "green"  # Nothing to wait for
    YELLOW = "yellow"  # Waiting on others, or a countdown is running


@dataclass(frozen=True)
class Colour:
    """An RGB colour."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> "Colour":
        value = value.lstrip("#")
        if len(value) != 6:
            raise ValueError(f"Expected a 6 digit hex colour, got {value!r}")
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class ButtonColours:
    """The colours applied to the control for one colour category."""

    background: Colour
    accent_dark: Colour
    accent_light: Colour


@dataclass(frozen=True)
class Palette:
    """Named colours supplied by the application theme."""

    green: Colour
    green_light: Colour
    yellow: Colour
    yellow_dark: Colour

    def for_category(self, category: ButtonColour) -> ButtonColours:
        if category == ButtonColour.YELLOW:
            return ButtonColours(self.yellow_dark, self.yellow_dark, self.yellow)
        return ButtonColours(self.green, self.green, self.green_light)


DEFAULT_PALETTE = Palette(
    green=Colour.from_hex("#88b300"),
    green_light=Colour.from_hex("#b3d944"),
    yellow=Colour.from_hex("#ffcc22"),
    yellow_dark=Colour.from_hex("#eeaa00"),
)
