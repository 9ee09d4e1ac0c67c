"""Typed trace builders that serialize to plotly.js JSON documents.

Traces are immutable configuration objects driven by schema tables. Each
setter returns a new trace; `to_document()` produces the sparse wire document
(absent attributes are omitted) and `to_json()` encodes it.
"""

from __future__ import annotations

from .codec import decode_trace, dumps_traces, load_trace, loads_trace
from .color import Rgb, Rgba
from .components import ErrorData, Font, Label, Line, Marker
from .configuration import Configuration
from .dim import Scalar, Vector
from .enums import (
    Align,
    Calendar,
    ConstrainText,
    DashType,
    ErrorType,
    HoverInfo,
    Orientation,
    PlotType,
    SizeMode,
    TextAnchor,
    TextPosition,
    Visible,
)
from .exceptions import (
    TraceEncodingError,
    TraceError,
    TraceValidationError,
    TraceValueError,
    UnknownAttributeError,
)
from .registry import TraceRegistry
from .settings import EncoderSettings, load_settings
from .traces import DEFAULT_TRACE_REGISTRY, Bar, Trace
from .validator import ValidationResult, validate_configuration

__all__ = [
    "Align",
    "Bar",
    "Calendar",
    "Configuration",
    "ConstrainText",
    "DEFAULT_TRACE_REGISTRY",
    "DashType",
    "EncoderSettings",
    "ErrorData",
    "ErrorType",
    "Font",
    "HoverInfo",
    "Label",
    "Line",
    "Marker",
    "Orientation",
    "PlotType",
    "Rgb",
    "Rgba",
    "Scalar",
    "SizeMode",
    "TextAnchor",
    "TextPosition",
    "Trace",
    "TraceEncodingError",
    "TraceError",
    "TraceRegistry",
    "TraceValidationError",
    "TraceValueError",
    "UnknownAttributeError",
    "ValidationResult",
    "Vector",
    "decode_trace",
    "dumps_traces",
    "load_settings",
    "load_trace",
    "loads_trace",
    "validate_configuration",
]
