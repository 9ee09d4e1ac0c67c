"""Immutable, schema-driven configuration objects.

A `Configuration` holds a sparse mapping from attribute name to value. Every
mutation returns a new object; the receiver never changes. Subclasses declare
a `schema` table and get a fluent setter per attribute generated at class
creation:

    bar = Bar([1, 2], [3, 4]).set_opacity(0.5).set_text_array(["a", "b"])

Dimension attributes get three setters: `set_<name>` (wraps lists/tuples as a
Vector, anything else as a Scalar), `set_<name>_scalar` and `set_<name>_array`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from .dim import Scalar, Vector
from .encoder import dumps_document
from .exceptions import TraceValidationError, TraceValueError, UnknownAttributeError
from .schema import DISCRIMINANT_KEY, AttributeSpec, ConfigurationSchema
from .settings import EncoderSettings, load_settings
from .validator import validate_configuration
from .values import coerce_value, decode_value, encode_value

logger = logging.getLogger(__name__)


class Configuration:
    """Base class for traces and nested sub-configurations."""

    schema: ClassVar[ConfigurationSchema]

    __slots__ = ("_values",)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        schema = cls.__dict__.get("schema")
        if schema is None:
            return
        for spec in schema.attributes:
            _install_setters(cls, spec)

    def __init__(self, *args: Any, **attributes: Any) -> None:
        schema = self.schema
        if len(args) > len(schema.positional):
            raise TypeError(
                f"{schema.owner} takes at most {len(schema.positional)} positional arguments ({len(args)} given)."
            )
        supplied: dict[str, Any] = {}
        for name, value in zip(schema.positional, args):
            supplied[name] = value
        for name, value in attributes.items():
            if name in supplied:
                raise TypeError(f"{schema.owner} got multiple values for {name!r}.")
            supplied[name] = value

        missing = sorted(name for name in schema.required if supplied.get(name) is None)
        if missing:
            raise TypeError(f"{schema.owner} missing required attributes: {missing}.")

        values: dict[str, Any] = {}
        for name, value in supplied.items():
            spec = self._spec(name)
            if value is not None:
                values[name] = coerce_value(schema.owner, spec, value)
        object.__setattr__(self, "_values", values)

    @classmethod
    def _spec(cls, name: str) -> AttributeSpec:
        spec = cls.schema.get(name)
        if spec is None:
            raise UnknownAttributeError(cls.schema.owner, name)
        return spec

    @classmethod
    def _from_values(cls, values: dict[str, Any]) -> Configuration:
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_values", values)
        return instance

    def _replace(self, name: str, stored: Any) -> Configuration:
        values = dict(self._values)
        if stored is None:
            values.pop(name, None)
        else:
            values[name] = stored
        return self._from_values(values)

    # Mutation (each returns a new configuration).

    def set(self, name: str, value: Any) -> Configuration:
        """Return a copy with `name` set to `value`; None unsets it.

        Raises:
            UnknownAttributeError: When `name` is not in the schema.
            TraceValueError: When `value` does not match the declared type, or
                is None for a required attribute.
        """

        spec = self._spec(name)
        if value is None:
            return self.unset(name)
        return self._replace(name, coerce_value(self.schema.owner, spec, value))

    def set_dim_scalar(self, name: str, value: Any) -> Configuration:
        """Return a copy with dim attribute `name` holding one shared value."""

        self._require_dim(name)
        return self.set(name, Scalar(value))

    def set_dim_array(self, name: str, values: Iterable[Any]) -> Configuration:
        """Return a copy with dim attribute `name` holding one value per point."""

        self._require_dim(name)
        if isinstance(values, (str, bytes)):
            raise TraceValueError(f"{self.schema.owner}.{name} array must be a sequence; got {type(values).__name__}.")
        return self.set(name, Vector.of(values))

    def unset(self, name: str) -> Configuration:
        """Return a copy with `name` absent.

        Raises:
            TraceValueError: When `name` is a required attribute.
        """

        self._spec(name)
        if name in self.schema.required:
            raise TraceValueError(f"{self.schema.owner}.{name} is required and cannot be unset.")
        return self._replace(name, None)

    def _require_dim(self, name: str) -> None:
        if self._spec(name).shape != "dim":
            raise TraceValueError(f"{self.schema.owner}.{name} is not a scalar-or-array attribute.")

    # Access.

    def get(self, name: str, default: Any = None) -> Any:
        """Return the stored value for `name`, or `default` when absent."""

        self._spec(name)
        return self._values.get(name, default)

    def is_set(self, name: str) -> bool:
        self._spec(name)
        return name in self._values

    @property
    def attributes(self) -> tuple[str, ...]:
        """Names of the present attributes, in schema order."""

        return tuple(name for name in self.schema.names() if name in self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name == "schema":
            raise AttributeError(name)
        if self.schema.get(name) is None:
            raise UnknownAttributeError(self.schema.owner, name)
        return self._values.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.schema.owner} is immutable; use set_{name}() or set({name!r}, ...).")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash((type(self), tuple((name, self._values[name]) for name in self.attributes)))

    def __reduce__(self) -> tuple[Any, ...]:
        return (self._from_values, (dict(self._values),))

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={self._values[name]!r}" for name in self.attributes)
        return f"{type(self).__name__}({parts})"

    # Serialization.

    def to_document(self) -> dict[str, Any]:
        """Return the sparse wire document for this configuration.

        The discriminant tag (for traces) comes first, followed by every
        present attribute under its wire key in schema order. Absent
        attributes are omitted entirely.
        """

        document: dict[str, Any] = {}
        if self.schema.trace_type is not None:
            document[DISCRIMINANT_KEY] = self.schema.trace_type
        for spec in self.schema.attributes:
            if spec.name in self._values:
                document[spec.key] = encode_value(spec, self._values[spec.name])
        return document

    def to_json(self, *, settings: EncoderSettings | None = None) -> str:
        """Return the document encoded as JSON text.

        Args:
            settings: Encoder options; defaults to `load_settings()`.

        Raises:
            TraceValidationError: When `settings.validate` is on and the
                validator reports errors.
            TraceEncodingError: When the document cannot be encoded.
        """

        settings = settings if settings is not None else load_settings()
        if settings.validate:
            result = validate_configuration(self)
            for warning in result.warnings:
                logger.warning("%s", warning)
            if not result.is_valid:
                raise TraceValidationError(result)
        return dumps_document(self.to_document(), settings=settings)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Configuration:
        """Decode a document produced by `to_document()`.

        Args:
            document: Mapping of wire keys to encoded values.

        Returns:
            A configuration whose `to_document()` equals `document`. Colors
            decode as CSS strings, so an `Rgb` value comes back as
            `"rgb(r, g, b)"`.

        Raises:
            UnknownAttributeError: When a key is not a wire key of this type.
            TraceValueError: When the discriminant does not match, or a value
                has the wrong shape or type.
        """

        schema = cls.schema
        values: dict[str, Any] = {}
        for key, raw in document.items():
            if schema.trace_type is not None and key == DISCRIMINANT_KEY:
                if raw != schema.trace_type:
                    raise TraceValueError(f"{schema.owner} expects type {schema.trace_type!r}; got {raw!r}.")
                continue
            spec = schema.get_by_key(key)
            if spec is None:
                raise UnknownAttributeError(schema.owner, key)
            if raw is None:
                continue
            values[spec.name] = decode_value(schema.owner, spec, raw)

        missing = sorted(name for name in schema.required if name not in values)
        if missing:
            raise TraceValueError(f"{schema.owner} document is missing required attributes: {missing}.")
        return cls._from_values(values)


def _install_setters(cls: type[Configuration], spec: AttributeSpec) -> None:
    """Attach the generated fluent setters for one attribute to `cls`."""

    name = spec.name

    def setter(self: Configuration, value: Any) -> Configuration:
        return self.set(name, value)

    setter.__doc__ = f"Return a copy with `{name}` (wire key `{spec.key}`) set."
    _attach(cls, f"set_{name}", setter)

    if spec.shape != "dim":
        return

    def scalar_setter(self: Configuration, value: Any) -> Configuration:
        return self.set_dim_scalar(name, value)

    def array_setter(self: Configuration, values: Iterable[Any]) -> Configuration:
        return self.set_dim_array(name, values)

    scalar_setter.__doc__ = f"Return a copy with `{name}` set to one value shared by every point."
    array_setter.__doc__ = f"Return a copy with `{name}` set to one value per point."
    _attach(cls, f"set_{name}_scalar", scalar_setter)
    _attach(cls, f"set_{name}_array", array_setter)


def _attach(cls: type[Configuration], method_name: str, func: Any) -> None:
    if method_name in cls.__dict__:
        return
    if hasattr(Configuration, method_name):
        raise TypeError(f"{cls.__name__}: generated setter {method_name!r} would shadow Configuration.{method_name}.")
    func.__name__ = method_name
    func.__qualname__ = f"{cls.__name__}.{method_name}"
    setattr(cls, method_name, func)
