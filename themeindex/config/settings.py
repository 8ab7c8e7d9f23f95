"""Registry build settings from defaults, themeindex.yaml and environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from themeindex.errors import ErrorCode, ThemeIndexError
from themeindex.runtime_paths import config_path, registry_path, repo_root
from themeindex.themes.constants import DEFAULT_COLLATION_LOCALE, DEFAULT_IGNORED_DIR_NAMES

ENV_ROOT = "THEMEINDEX_ROOT"
ENV_OUTPUT = "THEMEINDEX_OUTPUT"
ENV_LOCALE = "THEMEINDEX_LOCALE"
ENV_LOG_LEVEL = "THEMEINDEX_LOG_LEVEL"

_CONFIG_KEYS = {"output", "ignore", "locale", "log_level"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class RegistrySettings:
    """Resolved settings for one registry build."""

    root_dir: Path
    registry_path: Path
    ignored_dir_names: tuple[str, ...] = DEFAULT_IGNORED_DIR_NAMES
    collation_locale: str = DEFAULT_COLLATION_LOCALE
    log_level: str = "INFO"


def default_settings(root: Path | None = None) -> RegistrySettings:
    root_dir = root or repo_root()
    return RegistrySettings(root_dir=root_dir, registry_path=registry_path(root_dir))


def load_settings(environ: Mapping[str, str] | None = None) -> RegistrySettings:
    """Resolve settings: defaults, then themeindex.yaml, then environment."""
    env = os.environ if environ is None else environ

    root_override = (env.get(ENV_ROOT) or "").strip()
    settings = default_settings(Path(root_override).resolve() if root_override else None)

    file_path = config_path(settings.root_dir)
    if file_path.is_file():
        settings = _apply_config(settings, _read_config(file_path), file_path)

    output = (env.get(ENV_OUTPUT) or "").strip()
    if output:
        settings.registry_path = _resolve_output(settings.root_dir, output)
    locale_name = (env.get(ENV_LOCALE) or "").strip()
    if locale_name:
        settings.collation_locale = locale_name
    log_level = (env.get(ENV_LOG_LEVEL) or "").strip()
    if log_level:
        settings.log_level = _normalize_log_level(log_level, source=ENV_LOG_LEVEL)
    return settings


def _read_config(path: Path) -> Mapping[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeIndexError(
            ErrorCode.CONFIG_INVALID, path=path, details={"original": str(exc)}
        ) from exc
    except yaml.YAMLError as exc:
        raise ThemeIndexError(
            ErrorCode.CONFIG_INVALID,
            message=f"Invalid YAML in {path.name}",
            path=path,
            details={"original": str(exc)},
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ThemeIndexError(
            ErrorCode.CONFIG_INVALID, message=f"Expected a mapping in {path.name}", path=path
        )
    return data


def _apply_config(
    settings: RegistrySettings, data: Mapping[str, Any], path: Path
) -> RegistrySettings:
    unknown = sorted(str(key) for key in data if key not in _CONFIG_KEYS)
    if unknown:
        raise ThemeIndexError(
            ErrorCode.CONFIG_INVALID,
            message=f"Unsupported keys in {path.name}: {', '.join(unknown)}",
            path=path,
        )

    changes: dict[str, Any] = {}
    if "output" in data:
        changes["registry_path"] = _resolve_output(
            settings.root_dir, _required_str(data, "output", path)
        )
    if "ignore" in data:
        ignore = data["ignore"]
        if not isinstance(ignore, list) or not all(
            isinstance(name, str) and name for name in ignore
        ):
            raise ThemeIndexError(
                ErrorCode.CONFIG_INVALID,
                message=f"{path.name}: 'ignore' must be a list of directory names",
                path=path,
            )
        changes["ignored_dir_names"] = tuple(ignore)
    if "locale" in data:
        changes["collation_locale"] = _required_str(data, "locale", path)
    if "log_level" in data:
        changes["log_level"] = _normalize_log_level(
            _required_str(data, "log_level", path), source=path.name
        )
    return replace(settings, **changes)


def _required_str(data: Mapping[str, Any], key: str, path: Path) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ThemeIndexError(
            ErrorCode.CONFIG_INVALID,
            message=f"{path.name}: {key!r} must be a non-empty string",
            path=path,
        )
    return value.strip()


def _resolve_output(root: Path, value: str) -> Path:
    candidate = Path(value)
    if not candidate.is_absolute():
        candidate = root / candidate
    return candidate


def _normalize_log_level(value: str, *, source: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ThemeIndexError(
            ErrorCode.CONFIG_INVALID,
            message=f"{source}: unknown log level {value!r}",
        )
    return level
