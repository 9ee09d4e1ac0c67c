"""Per-attribute value handling: coercion, encoding and decoding.

These helpers interpret a single `AttributeSpec`. Coercion only mirrors the
declared type (booleans are bools, integers are ints, enums resolve to a
member); numeric ranges are left to the opt-in validator.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from .color import Rgb, Rgba, encode_color
from .dim import Scalar, Vector, as_dim
from .exceptions import TraceValueError
from .schema import AttributeSpec


def coerce_value(owner: str, spec: AttributeSpec, value: Any) -> Any:
    """Normalize a value for storage in a configuration.

    Args:
        owner: Configuration name used in error messages.
        spec: Attribute being set.
        value: Raw value supplied by the caller.

    Returns:
        The stored value: sequences are frozen into tuples and dims are
        wrapped as Scalar/Vector.

    Raises:
        TraceValueError: When the value does not match the declared type.
    """

    if spec.shape == "dim":
        dim = as_dim(value)
        if isinstance(dim, Scalar):
            return Scalar(_coerce_item(owner, spec, dim.value))
        return Vector(tuple(_coerce_item(owner, spec, item) for item in dim.values))
    if spec.shape == "sequence":
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise TraceValueError(f"{owner}.{spec.name} must be a sequence; got {type(value).__name__}.")
        return tuple(_coerce_item(owner, spec, item) for item in value)
    return _coerce_item(owner, spec, value)


def _coerce_item(owner: str, spec: AttributeSpec, value: Any) -> Any:
    label = f"{owner}.{spec.name}"
    value_type = spec.value_type

    if spec.is_enum:
        if isinstance(value, value_type):
            return value
        try:
            member = value_type(value)
        except ValueError:
            member = None
        # 1 == True, so boolean wire values only match real bools (Visible).
        if member is None or isinstance(member.value, bool) != isinstance(value, bool):
            allowed = [item.value for item in value_type]
            raise TraceValueError(f"{label} must be one of {allowed}; got {value!r}.") from None
        return member

    if spec.is_component:
        if not isinstance(value, value_type):
            raise TraceValueError(f"{label} must be a {value_type.__name__}; got {type(value).__name__}.")
        return value

    if value_type == "boolean":
        ok = isinstance(value, bool)
    elif value_type == "integer":
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif value_type == "number":
        if isinstance(value, Decimal):
            # DjangoJSONEncoder writes Decimal as a string; numbers go out as JSON numbers.
            return float(value)
        ok = isinstance(value, numbers.Real) and not isinstance(value, bool)
    elif value_type == "string":
        ok = isinstance(value, str)
    elif value_type == "color":
        ok = isinstance(value, (str, Rgb, Rgba))
    else:
        ok = True
    if not ok:
        raise TraceValueError(f"{label} must be of type {value_type}; got {type(value).__name__}.")
    return value


def encode_value(spec: AttributeSpec, value: Any) -> Any:
    """Encode a stored value into its document form.

    Args:
        spec: Attribute the value belongs to.
        value: Value previously produced by `coerce_value`.

    Returns:
        A JSON-compatible value (nested configurations become dicts).
    """

    if spec.shape == "dim":
        if isinstance(value, Scalar):
            return _encode_item(spec, value.value)
        return [_encode_item(spec, item) for item in value.values]
    if spec.shape == "sequence":
        return [_encode_item(spec, item) for item in value]
    return _encode_item(spec, value)


def _encode_item(spec: AttributeSpec, value: Any) -> Any:
    if spec.is_enum:
        return value.value
    if spec.is_component:
        return value.to_document()
    if spec.value_type == "color":
        return encode_color(value)
    return value


def decode_value(owner: str, spec: AttributeSpec, raw: Any) -> Any:
    """Decode a document value back into its stored form.

    Arrays decode to Vector for dim attributes; everything else decodes to
    Scalar. Nested documents are decoded by the declared component class.

    Raises:
        TraceValueError: When the raw value has the wrong shape or type.
    """

    if spec.shape == "dim":
        if isinstance(raw, list):
            return Vector(tuple(_decode_item(owner, spec, item) for item in raw))
        return Scalar(_decode_item(owner, spec, raw))
    if spec.shape == "sequence":
        if not isinstance(raw, list):
            raise TraceValueError(f"{owner}.{spec.name} must be an array; got {type(raw).__name__}.")
        return tuple(_decode_item(owner, spec, item) for item in raw)
    return _decode_item(owner, spec, raw)


def _decode_item(owner: str, spec: AttributeSpec, raw: Any) -> Any:
    if spec.is_component:
        if not isinstance(raw, dict):
            raise TraceValueError(f"{owner}.{spec.name} must be an object; got {type(raw).__name__}.")
        return spec.value_type.from_document(raw)
    return _coerce_item(owner, spec, raw)
