"""Runtime path helpers anchored on the tool's own location."""

from __future__ import annotations

from pathlib import Path

from themeindex.themes.constants import CONFIG_FILENAME, REGISTRY_FILENAME


def repo_root() -> Path:
    """Return the themes repository root, two levels above this file."""
    return Path(__file__).resolve().parents[1]


def registry_path(root: Path | None = None) -> Path:
    """Resolve the registry output file under a repository root."""
    return (root or repo_root()) / REGISTRY_FILENAME


def config_path(root: Path | None = None) -> Path:
    """Resolve the optional YAML config file under a repository root."""
    return (root or repo_root()) / CONFIG_FILENAME
