"""Document serialization tests for the Bar trace."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from plottrace import (
    Bar,
    Calendar,
    ConstrainText,
    EncoderSettings,
    ErrorData,
    ErrorType,
    Font,
    HoverInfo,
    Label,
    Marker,
    Orientation,
    TextAnchor,
    TextPosition,
    Visible,
)

pytestmark = pytest.mark.unit


def test_default_bar_serializes_to_discriminant_only() -> None:
    """An empty Bar emits only the type tag."""

    bar = Bar()
    assert bar.to_document() == {"type": "bar"}
    assert bar.to_json(settings=EncoderSettings()) == '{"type":"bar"}'


def test_mandatory_only_bar_emits_type_x_and_y() -> None:
    """Constructing with data only emits the tag and the two data arrays."""

    document = Bar([1, 2], [3, 4]).to_document()
    assert document == {"type": "bar", "x": [1, 2], "y": [3, 4]}
    assert list(document)[0] == "type"


def test_end_to_end_legend_only_bar_with_empty_marker() -> None:
    """Legend-only visibility, hidden legend and an empty marker serialize as expected."""

    bar = (
        Bar([1, 2], [3, 4])
        .set_visible(Visible.legend_only)
        .set_show_legend(False)
        .set_marker(Marker())
    )
    assert bar.to_document() == {
        "type": "bar",
        "x": [1, 2],
        "y": [3, 4],
        "visible": "legendonly",
        "showlegend": False,
        "marker": {},
    }


def test_compact_json_follows_schema_order() -> None:
    """JSON text is compact and attributes follow the schema table order."""

    bar = Bar([0, 1, 2], [0, 2, 4]).set_opacity(0.5).set_show_legend(True)
    assert bar.to_json(settings=EncoderSettings()) == (
        '{"type":"bar","x":[0,1,2],"y":[0,2,4],"showlegend":true,"opacity":0.5}'
    )


def test_every_bar_attribute_serializes_under_its_wire_key() -> None:
    """Setting every Bar attribute produces the full renamed document."""

    bar = (
        Bar([1, 2], [3, 4])
        .set_alignment_group("alignment_group")
        .set_clip_on_axis(True)
        .set_constrain_text(ConstrainText.both)
        .set_error_x(ErrorData(ErrorType.constant))
        .set_error_y(ErrorData(ErrorType.percent))
        .set_hover_info(HoverInfo.all)
        .set_hover_label(Label())
        .set_hover_template_scalar("tmpl")
        .set_hover_template_array(["tmpl1", "tmpl2"])
        .set_hover_text_scalar("hover_text")
        .set_hover_text_array(["hover_text"])
        .set_ids(["1"])
        .set_inside_text_anchor(TextAnchor.end)
        .set_inside_text_font(Font())
        .set_legend_group("legend-group")
        .set_marker(Marker())
        .set_name("Bar")
        .set_offset_scalar(5)
        .set_offset_array([5, 5])
        .set_offset_group("offset_group")
        .set_opacity(0.5)
        .set_orientation(Orientation.vertical)
        .set_outside_text_font(Font())
        .set_show_legend(False)
        .set_text_scalar("text")
        .set_text_angle(0.05)
        .set_text_array(["text"])
        .set_text_font(Font())
        .set_text_position_scalar(TextPosition.none)
        .set_text_position_array([TextPosition.none])
        .set_text_template_scalar("text_template")
        .set_text_template_array(["text_template"])
        .set_visible(Visible.legend_only)
        .set_width(999)
        .set_x_axis("xaxis")
        .set_x_calendar(Calendar.nanakshahi)
        .set_y_axis("yaxis")
        .set_y_calendar(Calendar.ummalqura)
    )

    assert bar.to_document() == {
        "type": "bar",
        "hoverinfo": "all",
        "hovertemplate": ["tmpl1", "tmpl2"],
        "x": [1, 2],
        "y": [3, 4],
        "name": "Bar",
        "visible": "legendonly",
        "showlegend": False,
        "legendgroup": "legend-group",
        "opacity": 0.5,
        "ids": ["1"],
        "width": 999,
        "offset": [5, 5],
        "text": ["text"],
        "textposition": ["none"],
        "texttemplate": ["text_template"],
        "hovertext": ["hover_text"],
        "xaxis": "xaxis",
        "yaxis": "yaxis",
        "orientation": "v",
        "alignmentgroup": "alignment_group",
        "offsetgroup": "offset_group",
        "marker": {},
        "textangle": 0.05,
        "textfont": {},
        "error_x": {"type": "constant"},
        "error_y": {"type": "percent"},
        "cliponaxis": True,
        "constraintext": "both",
        "hoverlabel": {},
        "insidetextanchor": "end",
        "insidetextfont": {},
        "outsidetextfont": {},
        "xcalendar": "nanakshahi",
        "ycalendar": "ummalqura",
    }


def test_setting_one_attribute_adds_only_its_key() -> None:
    """A single setter adds exactly one renamed key."""

    base = Bar([1], [2])
    document = base.set_hover_text_scalar("hi").to_document()
    assert set(document) - set(base.to_document()) == {"hovertext"}
    assert document["hovertext"] == "hi"


def test_serialization_is_idempotent() -> None:
    """Serializing the same configuration twice yields identical output."""

    bar = Bar(["a", "b"], [1, 2]).set_marker(Marker(opacity=0.4)).set_text_array(["x", "y"])
    assert bar.to_document() == bar.to_document()
    assert bar.to_json(settings=EncoderSettings()) == bar.to_json(settings=EncoderSettings())


def test_dates_and_decimals_in_data_arrays_encode_via_django_encoder() -> None:
    """Date and Decimal data values are encoded by the Django JSON encoder."""

    bar = Bar([date(2024, 1, 1), date(2024, 1, 2)], [Decimal("1.5"), 2])
    assert bar.to_json(settings=EncoderSettings()) == (
        '{"type":"bar","x":["2024-01-01","2024-01-02"],"y":["1.5",2]}'
    )


def test_nested_sub_configuration_is_serialized_recursively() -> None:
    """Nested configurations follow the same sparse rule."""

    bar = Bar().set_marker(Marker().set_opacity(0.2)).set_hover_label(Label(font=Font(size=10)))
    assert bar.to_document() == {
        "type": "bar",
        "marker": {"opacity": 0.2},
        "hoverlabel": {"font": {"size": 10}},
    }


def test_setters_perform_no_range_validation() -> None:
    """Out-of-range values are passed through to the document unchanged."""

    assert Bar().set_opacity(5.0).to_document() == {"type": "bar", "opacity": 5.0}
    assert Bar().set_text_angle(1000).to_document() == {"type": "bar", "textangle": 1000}
