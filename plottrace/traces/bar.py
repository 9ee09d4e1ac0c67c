"""Bar trace.

    >>> bar = Bar([0, 1, 2], [0, 2, 4]).set_show_legend(True).set_opacity(0.5)
    >>> bar.to_document()
    {'type': 'bar', 'x': [0, 1, 2], 'y': [0, 2, 4], 'showlegend': True, 'opacity': 0.5}
"""

from __future__ import annotations

from ..components import ErrorData, Font, Label, Marker
from ..enums import Calendar, ConstrainText, HoverInfo, Orientation, PlotType, TextAnchor, TextPosition, Visible
from ..schema import ConfigurationSchema, attribute
from .base import Trace

BAR_SCHEMA = ConfigurationSchema(
    owner="Bar",
    trace_type=PlotType.bar.value,
    positional=("x", "y"),
    attributes=(
        attribute("x", "data", shape="sequence"),
        attribute("y", "data", shape="sequence"),
        attribute("name", "string"),
        attribute("visible", Visible),
        attribute("show_legend", "boolean", key="showlegend"),
        attribute("legend_group", "string", key="legendgroup"),
        attribute("opacity", "number", minimum=0, maximum=1),
        attribute("ids", "string", shape="sequence"),
        attribute("width", "integer", minimum=0),
        attribute("offset", "integer", shape="dim", minimum=0),
        attribute("text", "string", shape="dim"),
        attribute("text_position", TextPosition, key="textposition", shape="dim"),
        attribute("text_template", "string", key="texttemplate", shape="dim"),
        attribute("hover_text", "string", key="hovertext", shape="dim"),
        attribute("hover_info", HoverInfo, key="hoverinfo"),
        attribute("hover_template", "string", key="hovertemplate", shape="dim"),
        attribute("x_axis", "string", key="xaxis"),
        attribute("y_axis", "string", key="yaxis"),
        attribute("orientation", Orientation),
        attribute("alignment_group", "string", key="alignmentgroup"),
        attribute("offset_group", "string", key="offsetgroup"),
        attribute("marker", Marker),
        attribute("text_angle", "number", key="textangle"),
        attribute("text_font", Font, key="textfont"),
        attribute("error_x", ErrorData),
        attribute("error_y", ErrorData),
        attribute("clip_on_axis", "boolean", key="cliponaxis"),
        attribute("constrain_text", ConstrainText, key="constraintext"),
        attribute("hover_label", Label, key="hoverlabel"),
        attribute("inside_text_anchor", TextAnchor, key="insidetextanchor"),
        attribute("inside_text_font", Font, key="insidetextfont"),
        attribute("outside_text_font", Font, key="outsidetextfont"),
        attribute("x_calendar", Calendar, key="xcalendar"),
        attribute("y_calendar", Calendar, key="ycalendar"),
    ),
)


class Bar(Trace):
    """Bar chart trace.

    Args:
        x: Optional x data (categories or positions).
        y: Optional y data (bar heights).
        **attributes: Any other Bar attribute by name.
    """

    __slots__ = ()

    schema = BAR_SCHEMA
