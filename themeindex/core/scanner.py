"""List candidate theme directories under a repository root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from themeindex.errors import classify_exception
from themeindex.themes.constants import DEFAULT_IGNORED_DIR_NAMES


class ThemeDirScanner:
    """Scans the top level of a themes repository for theme folders."""

    def __init__(
        self,
        root: str | Path,
        ignored_names: Iterable[str] = DEFAULT_IGNORED_DIR_NAMES,
    ) -> None:
        self._root = Path(root)
        self._ignored = frozenset(ignored_names)

    def scan(self) -> list[Path]:
        """Return candidate directories in listing order."""
        return list(self.scan_iter())

    def scan_iter(self) -> Iterator[Path]:
        """Yield candidate directories one at a time.

        Only immediate children are considered. Symlinks are not followed,
        hidden names and ignored names are skipped. A root that cannot be
        listed raises a classified ``ThemeIndexError``.
        """
        try:
            with os.scandir(self._root) as it:
                entries = list(it)
        except OSError as exc:
            raise classify_exception(exc, path=self._root) from exc

        for entry in entries:
            if not self._is_candidate(entry):
                continue
            yield self._root / entry.name

    def _is_candidate(self, entry: os.DirEntry) -> bool:
        try:
            if not entry.is_dir(follow_symlinks=False):
                return False
        except OSError:
            return False
        if entry.name.startswith("."):
            return False
        return entry.name not in self._ignored


def scan_theme_dirs(
    root: str | Path,
    ignored_names: Iterable[str] = DEFAULT_IGNORED_DIR_NAMES,
) -> list[Path]:
    """Return candidate theme directories directly under ``root``."""
    return ThemeDirScanner(root, ignored_names).scan()
