"""Theme registry models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Palette = dict[str, Any]


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """One theme directory as listed in the registry."""

    name: str
    path: str
    dark: Palette = field(default_factory=dict)
    light: Palette = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "dark": dict(self.dark),
            "light": dict(self.light),
        }


@dataclass(frozen=True, slots=True)
class Registry:
    """The consolidated, sorted registry document."""

    version: int
    themes: tuple[RegistryEntry, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "themes": [entry.to_dict() for entry in self.themes],
        }
