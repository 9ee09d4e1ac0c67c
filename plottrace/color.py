"""Color values accepted by color-typed attributes.

Plain strings are passed through unchanged, so any CSS color the renderer
understands (`"red"`, `"#ff0000"`, `"hsl(0, 100%, 50%)"`) is valid. The
dataclasses below format channel values for the common rgb/rgba forms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Rgb:
    """An opaque color given as 0-255 channel values."""

    r: int
    g: int
    b: int

    def to_css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"


@dataclass(frozen=True, slots=True)
class Rgba:
    """A color with an alpha channel in [0, 1]."""

    r: int
    g: int
    b: int
    a: float

    def to_css(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"


Color: TypeAlias = str | Rgb | Rgba


def encode_color(value: Color) -> str:
    """Return the wire string for a color value."""

    if isinstance(value, (Rgb, Rgba)):
        return value.to_css()
    return value
