"""Encoder settings for plottrace.

Settings are read from environment variables so that applications embedding
the library can change JSON output without threading options through every
call. Explicit `EncoderSettings` instances always take precedence.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EncoderSettings:
    """Options applied when a document is encoded as JSON text.

    Args:
        allow_nan: Emit `NaN`/`Infinity` literals instead of raising.
        indent: Optional indentation for pretty-printed output.
        sort_keys: Sort object keys in the output.
        validate: Run the validator before encoding and fail on errors.
    """

    allow_nan: bool = False
    indent: int | None = None
    sort_keys: bool = False
    validate: bool = False


def _env_bool(environ: Mapping[str, str], name: str, *, default: bool) -> bool:
    """Parse a boolean environment variable.

    Args:
        environ: Environment mapping to read from.
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed boolean value.
    """

    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _env_int(environ: Mapping[str, str], name: str, *, default: int | None) -> int | None:
    """Parse an integer environment variable.

    Args:
        environ: Environment mapping to read from.
        name: Environment variable name.
        default: Value when the variable is not set or blank.

    Returns:
        Parsed integer value.

    Raises:
        ValueError: When the variable is set to a non-integer value.
    """

    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


def load_settings(environ: Mapping[str, str] | None = None) -> EncoderSettings:
    """Build EncoderSettings from environment variables.

    Args:
        environ: Optional mapping used instead of `os.environ`.

    Returns:
        EncoderSettings populated from `PLOTTRACE_*` variables.
    """

    env = os.environ if environ is None else environ
    return EncoderSettings(
        allow_nan=_env_bool(env, "PLOTTRACE_ALLOW_NAN", default=False),
        indent=_env_int(env, "PLOTTRACE_JSON_INDENT", default=None),
        sort_keys=_env_bool(env, "PLOTTRACE_SORT_KEYS", default=False),
        validate=_env_bool(env, "PLOTTRACE_VALIDATE", default=False),
    )
