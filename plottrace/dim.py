"""Dimension values: one shared scalar or one value per data point.

Some attributes (text, hover text, offsets, marker color, ...) accept either a
single value applied to every point or a sequence aligned with the data. `Dim`
is a two-variant union; the encoder branches only on the variant.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Scalar(Generic[T]):
    """A single value shared by every data point. Encoded as a bare value."""

    value: T


@dataclass(frozen=True, slots=True)
class Vector(Generic[T]):
    """One value per data point. Encoded as an array."""

    values: tuple[T, ...]

    @classmethod
    def of(cls, values: Iterable[T]) -> Vector[T]:
        """Build a Vector from any iterable, freezing it into a tuple."""

        return cls(tuple(values))

    def __len__(self) -> int:
        return len(self.values)


Dim: TypeAlias = Scalar[T] | Vector[T]


def as_dim(value: object) -> Scalar | Vector:
    """Wrap a raw value as a Dim.

    Existing Scalar/Vector values are returned unchanged, lists and tuples
    become a Vector, and anything else (including strings) becomes a Scalar.

    Args:
        value: Raw value or Dim.

    Returns:
        Scalar or Vector wrapping `value`.
    """

    if isinstance(value, (Scalar, Vector)):
        return value
    if isinstance(value, (list, tuple)):
        return Vector.of(value)
    return Scalar(value)
