"""Theme file detection, parsing and palette extraction."""

from __future__ import annotations

import json
import logging
import math
import os
from pathlib import Path
from typing import Any, Mapping

from themeindex.themes.constants import COLOR_KEYS, THEME_FILE_SUFFIX
from themeindex.themes.models import Palette, RegistryEntry

logger = logging.getLogger(__name__)


def is_theme_directory(dir_path: Path) -> bool:
    """Return True when the directory holds at least one ``.json`` entry."""
    try:
        names = os.listdir(dir_path)
    except OSError:
        return False
    return any(_is_theme_file_name(name) for name in names)


def find_theme_file(dir_path: Path) -> Path | None:
    """Return the first ``.json`` entry in listing order, if any."""
    for name in os.listdir(dir_path):
        if _is_theme_file_name(name):
            return Path(dir_path) / name
    return None


def read_theme_json(dir_path: Path) -> Any | None:
    """Read and parse a directory's theme file, or None on any failure."""
    try:
        theme_file = find_theme_file(dir_path)
        if theme_file is None:
            return None
        content = theme_file.read_text(encoding="utf-8", errors="replace")
        return json.loads(content, parse_constant=_reject_constant)
    except (OSError, ValueError, RecursionError) as exc:
        logger.error("Error reading theme from %s: %s", dir_path, exc)
        return None


def extract_colors(variant: Any) -> Palette:
    """Copy the recognized color roles with truthy values, in fixed order."""
    if not isinstance(variant, Mapping):
        return {}
    palette: Palette = {}
    for key in COLOR_KEYS:
        value = variant.get(key)
        if is_truthy(value):
            palette[key] = value
    return palette


def extract_registry_entry(document: Any, dir_name: str) -> RegistryEntry:
    """Build a registry entry from a parsed theme document."""
    dark_variant = _variant(document, "dark")
    light_variant = _variant(document, "light")
    return RegistryEntry(
        name=dir_name,
        path=dir_name,
        dark=extract_colors(dark_variant),
        light=extract_colors(light_variant),
    )


def is_truthy(value: Any) -> bool:
    """JSON truthiness: null, false, 0, NaN and "" are falsy, containers never are."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    return True


def _variant(document: Any, key: str) -> Any:
    if isinstance(document, Mapping):
        candidate = document.get(key)
        if is_truthy(candidate):
            return candidate
    return document


def _is_theme_file_name(name: str) -> bool:
    return name.lower().endswith(THEME_FILE_SUFFIX)


def _reject_constant(token: str) -> float:
    raise ValueError(f"Unexpected token {token} in JSON")
