"""Encoding and decoding helpers for trace documents.

`to_document()` / `to_json()` on a configuration cover the single-trace case.
This module adds the multi-trace `data` array and the reverse direction:
decoding stored documents (JSON or YAML text) back into trace objects.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, cast

import yaml

from .encoder import dumps_document
from .exceptions import TraceValueError
from .schema import DISCRIMINANT_KEY
from .settings import EncoderSettings, load_settings
from .registry import TraceRegistry
from .traces import DEFAULT_TRACE_REGISTRY, Trace

logger = logging.getLogger(__name__)


def dumps_traces(traces: Iterable[Trace], *, settings: EncoderSettings | None = None) -> str:
    """Encode several traces as a JSON array (a figure's `data` list).

    Args:
        traces: Traces in drawing order.
        settings: Encoder options; defaults to `load_settings()`.

    Returns:
        JSON text of the list of trace documents.

    Raises:
        TraceEncodingError: When any document cannot be encoded.
    """

    settings = settings if settings is not None else load_settings()
    return dumps_document([trace.to_document() for trace in traces], settings=settings)


def decode_trace(document: Mapping[str, Any], *, registry: TraceRegistry = DEFAULT_TRACE_REGISTRY) -> Trace:
    """Decode a single trace document into its trace class.

    Args:
        document: Mapping previously produced by `Trace.to_document()`.
        registry: Registry used to resolve the `"type"` discriminant.

    Returns:
        Trace instance whose `to_document()` equals `document`.

    Raises:
        TraceValueError: When the document is not a mapping, has no
            discriminant, or names an unregistered trace type.
        UnknownAttributeError: When the document carries an unknown key.
    """

    if not isinstance(document, Mapping):
        raise TraceValueError(f"Trace document must be an object; got {type(document).__name__}.")
    trace_type = document.get(DISCRIMINANT_KEY)
    if trace_type is None:
        raise TraceValueError(f"Trace document is missing the {DISCRIMINANT_KEY!r} key.")
    trace_class = registry.get(str(trace_type))
    if trace_class is None:
        raise TraceValueError(f"Unknown trace type: {trace_type!r}.")

    logger.debug("Decoding %s trace with %d keys", trace_type, len(document))
    return cast(Trace, trace_class.from_document(document))


def loads_trace(text: str, *, registry: TraceRegistry = DEFAULT_TRACE_REGISTRY) -> Trace:
    """Parse JSON or YAML text and decode the trace it describes.

    Args:
        text: A JSON document or YAML mapping.
        registry: Registry used to resolve the `"type"` discriminant.

    Returns:
        Decoded trace.

    Raises:
        TraceValueError: When the text is not valid JSON/YAML or does not
            describe a trace.
    """

    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        # YAML 1.1 reads "1e-07" as a string, so JSON text never goes through it.
        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise TraceValueError(f"Could not parse trace document: {exc}") from exc
    return decode_trace(payload, registry=registry)


def load_trace(path: str | Path, *, registry: TraceRegistry = DEFAULT_TRACE_REGISTRY) -> Trace:
    """Read a UTF-8 JSON or YAML file and decode the trace it describes."""

    raw = Path(path).read_text(encoding="utf-8")
    logger.debug("Loaded trace document from %s", path)
    return loads_trace(raw, registry=registry)
