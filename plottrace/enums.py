"""Enumerated attribute values and their wire representations.

Each member's value is exactly what the renderer expects in the document.
Members are named for readability; the wire value is often shorter
(`Orientation.vertical` is emitted as `"v"`).
"""

from __future__ import annotations

from enum import Enum, StrEnum


class PlotType(StrEnum):
    """Discriminant tag identifying a trace type."""

    bar = "bar"


class Visible(Enum):
    """Trace visibility.

    `true` and `false` serialize as JSON booleans; only `legend_only` is a
    string on the wire.
    """

    true = True
    false = False
    legend_only = "legendonly"


class HoverInfo(StrEnum):
    """Which trace information appears on hover."""

    x = "x"
    y = "y"
    z = "z"
    x_and_y = "x+y"
    x_and_z = "x+z"
    y_and_z = "y+z"
    x_and_y_and_z = "x+y+z"
    text = "text"
    name = "name"
    all = "all"
    none = "none"
    skip = "skip"


class Orientation(StrEnum):
    vertical = "v"
    horizontal = "h"


class TextPosition(StrEnum):
    inside = "inside"
    outside = "outside"
    auto = "auto"
    none = "none"


class ConstrainText(StrEnum):
    """Constrain the size of text inside or outside a bar."""

    inside = "inside"
    outside = "outside"
    both = "both"
    none = "none"


class TextAnchor(StrEnum):
    start = "start"
    middle = "middle"
    end = "end"


class Calendar(StrEnum):
    """World calendars understood by the renderer for date axes."""

    gregorian = "gregorian"
    chinese = "chinese"
    coptic = "coptic"
    discworld = "discworld"
    ethiopian = "ethiopian"
    hebrew = "hebrew"
    islamic = "islamic"
    julian = "julian"
    mayan = "mayan"
    nanakshahi = "nanakshahi"
    nepali = "nepali"
    persian = "persian"
    jalali = "jalali"
    taiwan = "taiwan"
    thai = "thai"
    ummalqura = "ummalqura"


class ErrorType(StrEnum):
    """How error bar lengths are computed."""

    percent = "percent"
    constant = "constant"
    square_root = "sqrt"
    data = "data"


class Align(StrEnum):
    left = "left"
    right = "right"
    auto = "auto"


class DashType(StrEnum):
    solid = "solid"
    dot = "dot"
    dash = "dash"
    long_dash = "longdash"
    dash_dot = "dashdot"
    long_dash_dot = "longdashdot"


class SizeMode(StrEnum):
    """Whether marker size maps to diameter or area."""

    diameter = "diameter"
    area = "area"
