"""JSON encoding for plottrace documents."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from django.core.serializers.json import DjangoJSONEncoder

from .exceptions import TraceEncodingError
from .settings import EncoderSettings


class TraceJSONEncoder(DjangoJSONEncoder):
    """JSON encoder for trace documents.

    Extends DjangoJSONEncoder (dates, datetimes, Decimal and UUID values in
    data arrays) with configuration objects and enum members, so a list of
    traces can be passed to `json.dumps` directly.
    """

    def default(self, o: Any) -> Any:
        to_document = getattr(o, "to_document", None)
        if callable(to_document):
            return to_document()
        if isinstance(o, Enum):
            return o.value
        return super().default(o)


def dumps_document(document: Any, *, settings: EncoderSettings) -> str:
    """Encode a document (or list of documents) as JSON text.

    Args:
        document: Value produced by `to_document()`, or a list of them.
        settings: Encoder options.

    Returns:
        JSON text; compact unless `settings.indent` is set.

    Raises:
        TraceEncodingError: When a value cannot be encoded, including
            non-finite floats while `allow_nan` is off.
    """

    separators = (",", ":") if settings.indent is None else None
    try:
        return json.dumps(
            document,
            cls=TraceJSONEncoder,
            allow_nan=settings.allow_nan,
            indent=settings.indent,
            sort_keys=settings.sort_keys,
            separators=separators,
        )
    except (TypeError, ValueError) as exc:
        raise TraceEncodingError(f"Could not encode document as JSON: {exc}") from exc
