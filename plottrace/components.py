"""Nested sub-configurations shared by trace types.

These serialize with the same sparse rule as traces: only attributes that were
set appear, and an instance with nothing set encodes as `{}`.
"""

from __future__ import annotations

from .configuration import Configuration
from .enums import Align, DashType, ErrorType, SizeMode
from .schema import ConfigurationSchema, attribute


class Font(Configuration):
    """Text font: `Font(family="Arial", size=12, color="#444")`."""

    __slots__ = ()

    schema = ConfigurationSchema(
        owner="Font",
        attributes=(
            attribute("family", "string"),
            attribute("size", "integer", minimum=1),
            attribute("color", "color"),
        ),
    )


class Label(Configuration):
    """Hover label styling."""

    __slots__ = ()

    schema = ConfigurationSchema(
        owner="Label",
        attributes=(
            attribute("background_color", "color", key="bgcolor"),
            attribute("border_color", "color", key="bordercolor"),
            attribute("font", Font),
            attribute("align", Align),
            # -1 shows the whole trace name.
            attribute("name_length", "integer", key="namelength", shape="dim", minimum=-1),
        ),
    )


class ErrorData(Configuration):
    """Error bars along one axis.

    The error type is required: `ErrorData(ErrorType.constant, value=2.0)`.
    """

    __slots__ = ()

    schema = ConfigurationSchema(
        owner="ErrorData",
        attributes=(
            attribute("type", ErrorType),
            attribute("array", "number", shape="sequence"),
            attribute("visible", "boolean"),
            attribute("symmetric", "boolean"),
            attribute("array_minus", "number", key="arrayminus", shape="sequence"),
            attribute("value", "number", minimum=0),
            attribute("value_minus", "number", key="valueminus", minimum=0),
            attribute("trace_ref", "integer", key="traceref", minimum=0),
            attribute("trace_ref_minus", "integer", key="tracerefminus", minimum=0),
            attribute("copy_y_style", "boolean", key="copy_ystyle"),
            attribute("color", "color"),
            attribute("thickness", "number", minimum=0),
            attribute("width", "number", minimum=0),
        ),
        positional=("type",),
        required=frozenset({"type"}),
    )


class Line(Configuration):
    """Outline drawn around markers (bars)."""

    __slots__ = ()

    schema = ConfigurationSchema(
        owner="Line",
        attributes=(
            attribute("width", "number", shape="dim", minimum=0),
            attribute("color", "color", shape="dim"),
            attribute("dash", DashType),
            attribute("cauto", "boolean"),
            attribute("cmin", "number"),
            attribute("cmax", "number"),
            attribute("cmid", "number"),
            attribute("auto_color_scale", "boolean", key="autocolorscale"),
            attribute("reverse_scale", "boolean", key="reversescale"),
        ),
    )


class Marker(Configuration):
    """Marker (bar fill) styling."""

    __slots__ = ()

    schema = ConfigurationSchema(
        owner="Marker",
        attributes=(
            attribute("color", "color", shape="dim"),
            attribute("opacity", "number", shape="dim", minimum=0, maximum=1),
            attribute("size", "integer", shape="dim", minimum=0),
            attribute("size_ref", "number", key="sizeref"),
            attribute("size_min", "number", key="sizemin", minimum=0),
            attribute("size_mode", SizeMode, key="sizemode"),
            attribute("max_displayed", "integer", key="maxdisplayed", minimum=0),
            attribute("line", Line),
            attribute("cauto", "boolean"),
            attribute("cmin", "number"),
            attribute("cmax", "number"),
            attribute("cmid", "number"),
            attribute("auto_color_scale", "boolean", key="autocolorscale"),
            attribute("reverse_scale", "boolean", key="reversescale"),
            attribute("show_scale", "boolean", key="showscale"),
        ),
    )
