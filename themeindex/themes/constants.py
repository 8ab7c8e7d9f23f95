"""Theme registry constants."""

from __future__ import annotations

REGISTRY_VERSION = 1
REGISTRY_FILENAME = "registry.json"
CONFIG_FILENAME = "themeindex.yaml"
THEME_FILE_SUFFIX = ".json"
DEFAULT_COLLATION_LOCALE = "en_US"

DEFAULT_IGNORED_DIR_NAMES: tuple[str, ...] = ("node_modules",)

# Output palettes keep this order.
COLOR_KEYS: tuple[str, ...] = (
    "mPrimary",
    "mOnPrimary",
    "mSecondary",
    "mOnSecondary",
    "mTertiary",
    "mOnTertiary",
    "mError",
    "mOnError",
    "mSurface",
    "mOnSurface",
    "mSurfaceVariant",
    "mOnSurfaceVariant",
    "mOutline",
    "mShadow",
    "mHover",
    "mOnHover",
)
