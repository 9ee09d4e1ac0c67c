"""Trace types and the default trace registry."""

from __future__ import annotations

from ..registry import TraceRegistry
from .bar import BAR_SCHEMA, Bar
from .base import Trace

DEFAULT_TRACE_REGISTRY = TraceRegistry((Bar,))

__all__ = ["BAR_SCHEMA", "Bar", "DEFAULT_TRACE_REGISTRY", "Trace"]
