"""Locale-aware ordering of theme names."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable

from PySide6.QtCore import QCollator, QLocale, Qt

from themeindex.themes.constants import DEFAULT_COLLATION_LOCALE
from themeindex.themes.models import RegistryEntry


def make_collator(locale_name: str = DEFAULT_COLLATION_LOCALE) -> QCollator:
    """Return a case-sensitive collator pinned to ``locale_name``.

    The locale is fixed rather than taken from the environment so the same
    theme set always sorts the same way on every machine.
    """
    collator = QCollator(QLocale(locale_name))
    collator.setCaseSensitivity(Qt.CaseSensitivity.CaseSensitive)
    collator.setNumericMode(False)
    collator.setIgnorePunctuation(False)
    return collator


def name_sort_key(collator: QCollator | None = None) -> Callable[[str], Any]:
    active = collator if collator is not None else make_collator()
    return cmp_to_key(active.compare)


def theme_sort_key(collator: QCollator | None = None) -> Callable[[RegistryEntry], Any]:
    """Return a ``sorted`` key ordering entries by name."""
    name_key = name_sort_key(collator)
    return lambda entry: name_key(entry.name)
