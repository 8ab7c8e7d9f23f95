"""Registry serialization."""

from __future__ import annotations

import json
import math
import re
from pathlib import Path
from typing import Any

from themeindex.errors import classify_exception
from themeindex.themes.models import Registry

_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")

# Integral floats at or above this magnitude keep exponent notation.
_MAX_PLAIN_INTEGRAL = 1e21


def render_registry(registry: Registry) -> str:
    """Render the registry as 2-space indented JSON with a trailing newline.

    Non-finite numbers become ``null``, integral floats lose their ``.0`` and
    unpaired surrogates are written as ``\\uXXXX`` escapes, so the output is
    always strict JSON that encodes as UTF-8.
    """
    text = json.dumps(
        _normalize(registry.to_dict()),
        indent=2,
        ensure_ascii=False,
        allow_nan=False,
    )
    return _LONE_SURROGATE_RE.sub(_escape_surrogate, text) + "\n"


def write_registry(registry: Registry, path: Path) -> Path:
    """Overwrite ``path`` with the rendered registry and return it."""
    try:
        payload = render_registry(registry).encode("utf-8")
    except ValueError as exc:
        raise classify_exception(exc, path=path) from exc
    try:
        with open(path, "wb") as handle:
            handle.write(payload)
    except OSError as exc:
        raise classify_exception(exc, path=path) from exc
    return path


def _normalize(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _normalize(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalize(item) for item in value]
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) < _MAX_PLAIN_INTEGRAL:
            return int(value)
    return value


def _escape_surrogate(match: re.Match) -> str:
    return f"\\u{ord(match.group()):04x}"
