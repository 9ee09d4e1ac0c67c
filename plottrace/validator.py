"""Opt-in validation for configurations.

Setters never range-check values; the renderer is the final authority on what
it accepts. This validator reports the problems that are cheap to detect
before handing a document over: numeric values outside the bounds declared in
the schema, non-finite floats (which are not valid JSON), and per-point arrays
whose length does not match the trace data.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from .dim import Scalar, Vector
from .schema import AttributeSpec

if TYPE_CHECKING:
    from .configuration import Configuration


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a configuration.

    Args:
        is_valid: True when no errors exist.
        errors: Problems the renderer would reject or misrender.
        warnings: Suspicious but renderable values.
    """

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_configuration(config: Configuration) -> ValidationResult:
    """Validate a configuration and its nested sub-configurations.

    Args:
        config: Trace or sub-configuration to validate.

    Returns:
        ValidationResult containing errors and warnings. Paths in messages use
        attribute names, e.g. `Bar.marker.opacity`.
    """

    errors: list[str] = []
    warnings: list[str] = []

    _check_values(config, path=config.schema.owner, errors=errors)
    if config.schema.trace_type is not None:
        _check_point_counts(config, warnings=warnings)

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def _check_values(config: Configuration, *, path: str, errors: list[str]) -> None:
    for spec in config.schema.attributes:
        if not config.is_set(spec.name):
            continue
        label = f"{path}.{spec.name}"
        for suffix, item in _iter_items(spec, config.get(spec.name)):
            if spec.is_component:
                _check_values(item, path=f"{label}{suffix}", errors=errors)
                continue
            if _is_non_finite(item):
                errors.append(f"{label}{suffix} must be a finite number; got {item!r}.")
                continue
            if spec.is_numeric and not _within_bounds(spec, item):
                errors.append(f"{label}{suffix} must be {_describe_bounds(spec)}; got {item!r}.")


def _iter_items(spec: AttributeSpec, value: Any) -> Iterator[tuple[str, Any]]:
    """Yield (index suffix, item) pairs for scalar, dim and sequence values."""

    if isinstance(value, Scalar):
        yield "", value.value
    elif isinstance(value, Vector):
        for idx, item in enumerate(value.values):
            yield f"[{idx}]", item
    elif spec.shape == "sequence":
        for idx, item in enumerate(value):
            yield f"[{idx}]", item
    else:
        yield "", value


def _is_non_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return not value.is_finite()
    return isinstance(value, float) and not math.isfinite(value)


def _within_bounds(spec: AttributeSpec, value: Any) -> bool:
    if spec.minimum is not None and value < spec.minimum:
        return False
    if spec.maximum is not None and value > spec.maximum:
        return False
    return True


def _describe_bounds(spec: AttributeSpec) -> str:
    if spec.minimum is not None and spec.maximum is not None:
        return f"within [{spec.minimum}, {spec.maximum}]"
    if spec.minimum is not None:
        return f">= {spec.minimum}"
    return f"<= {spec.maximum}"


def _check_point_counts(config: Configuration, *, warnings: list[str]) -> None:
    owner = config.schema.owner
    x = config.get("x") if config.schema.get("x") is not None else None
    y = config.get("y") if config.schema.get("y") is not None else None
    if x is not None and y is not None and len(x) != len(y):
        warnings.append(f"{owner}.x has {len(x)} points but {owner}.y has {len(y)}.")

    data = x if x is not None else y
    if data is None:
        return
    count = len(data)
    for spec in config.schema.attributes:
        if spec.shape != "dim":
            continue
        value = config.get(spec.name)
        if isinstance(value, Vector) and len(value) != count:
            warnings.append(f"{owner}.{spec.name} has {len(value)} values for {count} data points.")
