"""Common base for trace configurations."""

from __future__ import annotations

from ..configuration import Configuration


class Trace(Configuration):
    """A configuration that carries a discriminant tag.

    Subclasses set `schema.trace_type`; the tag is emitted under `"type"` as the
    first key of every document and cannot be changed through setters.
    """

    __slots__ = ()

    @classmethod
    def trace_type(cls) -> str:
        trace_type = cls.schema.trace_type
        if trace_type is None:
            raise TypeError(f"{cls.__name__} does not declare a trace_type.")
        return trace_type
