"""Schema tables for configuration types.

Every configuration type (a trace such as Bar, or a nested sub-configuration
such as Marker) is described by a `ConfigurationSchema`: an ordered table of
`AttributeSpec` rows mapping the Python attribute name to its wire key and
declared value type. The fluent setters, the document encoder, the decoder and
the validator are all driven from this table, so adding an attribute is a
one-line change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, TypeAlias

DISCRIMINANT_KEY = "type"

ValueKind = Literal["string", "boolean", "integer", "number", "color", "data"]
# A ValueKind, an Enum subclass, or a Configuration subclass (nested document).
ValueType: TypeAlias = "ValueKind | type"

Shape = Literal["single", "dim", "sequence"]

VALUE_KINDS: frozenset[str] = frozenset({"string", "boolean", "integer", "number", "color", "data"})


@dataclass(frozen=True, slots=True)
class AttributeSpec:
    """Describe one attribute of a configuration type.

    Args:
        name: Python attribute name (used by setters and `get`).
        key: Wire key emitted in the document.
        value_type: Declared type of each value.
        shape: "single" for one value, "dim" for a Scalar/Vector union,
            "sequence" for an array.
        minimum: Optional inclusive lower bound checked by the validator.
        maximum: Optional inclusive upper bound checked by the validator.
    """

    name: str
    key: str
    value_type: ValueType
    shape: Shape = "single"
    minimum: float | None = None
    maximum: float | None = None

    @property
    def is_enum(self) -> bool:
        return isinstance(self.value_type, type) and issubclass(self.value_type, Enum)

    @property
    def is_component(self) -> bool:
        return isinstance(self.value_type, type) and not self.is_enum

    @property
    def is_numeric(self) -> bool:
        return self.value_type in ("integer", "number")


def attribute(
    name: str,
    value_type: ValueType,
    *,
    key: str | None = None,
    shape: Shape = "single",
    minimum: float | None = None,
    maximum: float | None = None,
) -> AttributeSpec:
    """Build an AttributeSpec whose wire key defaults to the attribute name."""

    return AttributeSpec(
        name=name,
        key=key if key is not None else name,
        value_type=value_type,
        shape=shape,
        minimum=minimum,
        maximum=maximum,
    )


@dataclass(frozen=True, slots=True)
class ConfigurationSchema:
    """Ordered attribute table for one configuration type.

    Args:
        owner: Display name used in error messages (usually the class name).
        attributes: Attribute rows in document emission order.
        positional: Attribute names accepted positionally by the constructor.
        required: Attribute names that must be supplied at construction.
        trace_type: Discriminant tag for trace types; None for sub-configurations.

    Raises:
        ValueError: When names or wire keys collide, or positional/required
            reference unknown attributes.
    """

    owner: str
    attributes: tuple[AttributeSpec, ...]
    positional: tuple[str, ...] = ()
    required: frozenset[str] = frozenset()
    trace_type: str | None = None
    _by_name: dict[str, AttributeSpec] = field(init=False, repr=False, compare=False)
    _by_key: dict[str, AttributeSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_name: dict[str, AttributeSpec] = {}
        by_key: dict[str, AttributeSpec] = {}
        for spec in self.attributes:
            if spec.name in by_name:
                raise ValueError(f"{self.owner} declares attribute {spec.name!r} twice.")
            if spec.key in by_key:
                raise ValueError(f"{self.owner} maps two attributes to wire key {spec.key!r}.")
            if self.trace_type is not None and spec.key == DISCRIMINANT_KEY:
                raise ValueError(f"{self.owner} cannot use the discriminant key {DISCRIMINANT_KEY!r}.")
            if isinstance(spec.value_type, str) and spec.value_type not in VALUE_KINDS:
                raise ValueError(f"{self.owner}.{spec.name} has unsupported value type {spec.value_type!r}.")
            by_name[spec.name] = spec
            by_key[spec.key] = spec

        unknown = (set(self.positional) | set(self.required)) - set(by_name)
        if unknown:
            raise ValueError(f"{self.owner} positional/required names are not attributes: {sorted(unknown)}.")

        object.__setattr__(self, "_by_name", by_name)
        object.__setattr__(self, "_by_key", by_key)

    def get(self, name: str) -> AttributeSpec | None:
        """Return the AttributeSpec for an attribute name, or None when missing."""

        return self._by_name.get(name)

    def get_by_key(self, key: str) -> AttributeSpec | None:
        """Return the AttributeSpec for a wire key, or None when missing."""

        return self._by_key.get(key)

    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.attributes)
