"""Registry of trace classes keyed by discriminant tag.

Decoding a document needs to find the trace class from its `"type"` key. The
registry is an explicit, immutable lookup built from a collection of trace
classes rather than an import-time side effect.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .traces.base import Trace


class TraceRegistry:
    """Lookup helpers for trace classes."""

    def __init__(self, trace_classes: Iterable[type[Trace]]) -> None:
        """Initialize a registry from a collection of trace classes."""

        self._classes: dict[str, type[Trace]] = {}
        for trace_class in trace_classes:
            trace_type = trace_class.schema.trace_type
            if trace_type is None:
                raise ValueError(f"{trace_class.__name__} has no trace_type and cannot be registered.")
            if trace_type in self._classes:
                raise ValueError(f"Duplicate trace type: {trace_type!r}")
            self._classes[trace_type] = trace_class

    def get(self, trace_type: str) -> type[Trace] | None:
        """Return the class for a trace type, or None when missing."""

        return self._classes.get(trace_type)

    def list(self) -> tuple[type[Trace], ...]:
        """Return all trace classes in a stable order."""

        return tuple(self._classes[key] for key in sorted(self._classes.keys()))

    def __contains__(self, trace_type: object) -> bool:
        return trace_type in self._classes
