"""Theme directory discovery and registry assembly."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from PySide6.QtCore import QCollator

from themeindex.core.scanner import ThemeDirScanner
from themeindex.themes.collation import theme_sort_key
from themeindex.themes.constants import DEFAULT_IGNORED_DIR_NAMES, REGISTRY_VERSION
from themeindex.themes.loader import (
    extract_registry_entry,
    is_theme_directory,
    is_truthy,
    read_theme_json,
)
from themeindex.themes.models import Registry, RegistryEntry

logger = logging.getLogger(__name__)


def scan_themes(
    root: Path,
    ignored_names: Iterable[str] = DEFAULT_IGNORED_DIR_NAMES,
) -> list[RegistryEntry]:
    """Collect registry entries for every theme directory under ``root``.

    Entries come back in directory-listing order. Unreadable or malformed
    theme files are logged by the loader and skipped.
    """
    themes: list[RegistryEntry] = []
    for theme_dir in ThemeDirScanner(root, ignored_names).scan_iter():
        if not is_theme_directory(theme_dir):
            continue
        document = read_theme_json(theme_dir)
        if not is_truthy(document):
            continue
        themes.append(extract_registry_entry(document, theme_dir.name))
        logger.info("- Found theme: %s", theme_dir.name)
    return themes


def generate_registry(
    themes: Iterable[RegistryEntry],
    collator: QCollator | None = None,
) -> Registry:
    """Sort entries by name and wrap them with the registry version."""
    ordered = sorted(themes, key=theme_sort_key(collator))
    return Registry(version=REGISTRY_VERSION, themes=tuple(ordered))


def build_registry(
    root: Path,
    ignored_names: Iterable[str] = DEFAULT_IGNORED_DIR_NAMES,
    collator: QCollator | None = None,
) -> Registry:
    return generate_registry(scan_themes(root, ignored_names), collator)
