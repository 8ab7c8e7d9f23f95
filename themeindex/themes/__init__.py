"""Theme registry exports."""

from themeindex.themes.constants import COLOR_KEYS, REGISTRY_VERSION
from themeindex.themes.loader import extract_colors, extract_registry_entry, read_theme_json
from themeindex.themes.models import Registry, RegistryEntry
from themeindex.themes.registry import build_registry, generate_registry, scan_themes
from themeindex.themes.writer import render_registry, write_registry

__all__ = [
    "COLOR_KEYS",
    "REGISTRY_VERSION",
    "Registry",
    "RegistryEntry",
    "build_registry",
    "extract_colors",
    "extract_registry_entry",
    "generate_registry",
    "read_theme_json",
    "render_registry",
    "scan_themes",
    "write_registry",
]
