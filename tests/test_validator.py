"""Tests for opt-in configuration validation."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from plottrace import (
    Bar,
    EncoderSettings,
    ErrorData,
    ErrorType,
    Font,
    Marker,
    TraceEncodingError,
    TraceValidationError,
    validate_configuration,
)

pytestmark = pytest.mark.unit


def test_valid_bar_has_no_errors_or_warnings() -> None:
    """A well-formed bar validates cleanly."""

    bar = Bar([1, 2], [3, 4]).set_opacity(0.5).set_text_array(["a", "b"]).set_marker(Marker(opacity=1))
    result = validate_configuration(bar)
    assert result.is_valid is True
    assert result.errors == ()
    assert result.warnings == ()


def test_opacity_outside_unit_interval_is_an_error() -> None:
    """Opacity must lie in [0, 1]."""

    result = validate_configuration(Bar().set_opacity(1.5))
    assert result.is_valid is False
    assert result.errors == ("Bar.opacity must be within [0, 1]; got 1.5.",)


def test_nested_vector_values_are_checked_per_element() -> None:
    """Per-point marker values are checked element by element with dotted paths."""

    result = validate_configuration(Bar().set_marker(Marker(opacity=[0.5, 1.2])))
    assert result.errors == ("Bar.marker.opacity[1] must be within [0, 1]; got 1.2.",)


def test_one_sided_bounds_and_nested_error_bars() -> None:
    """Lower bounds are reported for widths and error bar values."""

    bar = Bar().set_width(-1).set_error_y(ErrorData(ErrorType.constant, value=-1))
    result = validate_configuration(bar)
    assert "Bar.width must be >= 0; got -1." in result.errors
    assert "Bar.error_y.value must be >= 0; got -1." in result.errors


def test_non_finite_floats_are_errors() -> None:
    """NaN and infinities are not valid JSON numbers."""

    result = validate_configuration(Bar([1, 2], [float("nan"), float("inf")]))
    assert result.errors == (
        "Bar.y[0] must be a finite number; got nan.",
        "Bar.y[1] must be a finite number; got inf.",
    )


def test_non_finite_decimals_are_errors() -> None:
    """Decimal NaN in data arrays and on number attributes is reported."""

    result = validate_configuration(Bar([1], [Decimal("NaN")]).set_text_angle(Decimal("Infinity")))
    assert result.errors == (
        "Bar.y[0] must be a finite number; got Decimal('NaN').",
        "Bar.text_angle must be a finite number; got inf.",
    )


def test_point_count_mismatches_are_warnings() -> None:
    """Mismatched data and per-point array lengths are reported as warnings."""

    result = validate_configuration(Bar([1, 2, 3], [1, 2]).set_text_array(["a"]))
    assert result.is_valid is True
    assert result.warnings == (
        "Bar.x has 3 points but Bar.y has 2.",
        "Bar.text has 1 values for 3 data points.",
    )


def test_sub_configurations_validate_on_their_own() -> None:
    """Components can be validated directly."""

    result = validate_configuration(Font(size=0))
    assert result.errors == ("Font.size must be >= 1; got 0.",)


def test_to_json_with_validation_raises_on_errors() -> None:
    """Validation-enabled encoding refuses invalid configurations."""

    with pytest.raises(TraceValidationError) as excinfo:
        Bar().set_opacity(2.0).to_json(settings=EncoderSettings(validate=True))
    assert excinfo.value.result.errors == ("Bar.opacity must be within [0, 1]; got 2.0.",)


def test_to_json_with_validation_logs_warnings(caplog: pytest.LogCaptureFixture) -> None:
    """Validator warnings are logged and encoding proceeds."""

    with caplog.at_level(logging.WARNING, logger="plottrace"):
        text = Bar([1, 2], [1]).to_json(settings=EncoderSettings(validate=True))
    assert text == '{"type":"bar","x":[1,2],"y":[1]}'
    assert "Bar.x has 2 points but Bar.y has 1." in caplog.text


def test_non_finite_floats_fail_encoding_unless_allowed() -> None:
    """to_json rejects NaN by default and emits it when allowed."""

    bar = Bar([1], [float("nan")])
    assert bar.to_document() == {"type": "bar", "x": [1], "y": [bar.y[0]]}
    with pytest.raises(TraceEncodingError):
        bar.to_json(settings=EncoderSettings())
    assert bar.to_json(settings=EncoderSettings(allow_nan=True)) == '{"type":"bar","x":[1],"y":[NaN]}'
