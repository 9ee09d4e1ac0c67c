"""Exception types raised by plottrace.

Building and serializing a configuration into a document never fails; errors
only surface when a value does not match its declared attribute type, when a
document cannot be decoded, or when JSON encoding rejects a value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validator import ValidationResult


class TraceError(Exception):
    """Base class for all plottrace errors."""


class UnknownAttributeError(TraceError, AttributeError):
    """Raised when an attribute name or wire key is not part of a schema."""

    def __init__(self, owner: str, name: str) -> None:
        super().__init__(f"{owner} has no attribute {name!r}.")
        self.owner = owner
        self.name = name


class TraceValueError(TraceError, ValueError):
    """Raised when a value does not match the attribute's declared type."""


class TraceEncodingError(TraceError, ValueError):
    """Raised when a document cannot be encoded as JSON."""


class TraceValidationError(TraceError, ValueError):
    """Raised by `to_json` when validation is enabled and reports errors."""

    def __init__(self, result: ValidationResult) -> None:
        joined = "; ".join(result.errors)
        super().__init__(f"Configuration failed validation: {joined}")
        self.result = result
