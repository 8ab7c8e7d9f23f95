"""Command-line bootstrap for the registry build."""

from __future__ import annotations

import logging
import sys

from themeindex.config.settings import RegistrySettings, load_settings
from themeindex.errors import ThemeIndexError, classify_exception, format_error_for_user
from themeindex.themes.collation import make_collator
from themeindex.themes.models import Registry
from themeindex.themes.registry import build_registry
from themeindex.themes.writer import write_registry

LOGGER_NAME = "themeindex"


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_console_logger(level: str = "INFO") -> logging.Logger:
    """Route info lines to stdout and warnings/errors to stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    formatter = logging.Formatter("%(message)s")

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.addFilter(_BelowWarning())
    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    for handler in (out_handler, err_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def update_registry(settings: RegistrySettings, logger: logging.Logger) -> Registry:
    """Scan, assemble and write the registry described by ``settings``."""
    logger.info("Scanning for themes...")
    registry = build_registry(
        settings.root_dir,
        ignored_names=settings.ignored_dir_names,
        collator=make_collator(settings.collation_locale),
    )
    if not registry.themes:
        logger.warning("No themes found. Registry will be empty.")

    output = write_registry(registry, settings.registry_path)
    logger.info("Registry updated successfully at %s", output.resolve())
    logger.info("Total Themes: %d", len(registry.themes))
    return registry


def run_app() -> int:
    """Run one registry build and return the process exit code."""
    logger = configure_console_logger()
    try:
        settings = load_settings()
        logger.setLevel(settings.log_level)
        logger.debug("settings root=%s output=%s", settings.root_dir, settings.registry_path)
        update_registry(settings, logger)
    except ThemeIndexError as exc:
        logger.error("Error updating registry: %s", format_error_for_user(exc))
        logger.debug("error detail: %s", exc.to_dict())
        return 1
    except Exception as exc:
        error = classify_exception(exc)
        logger.error("Error updating registry: %s", format_error_for_user(error))
        logger.debug("unexpected failure", exc_info=True)
        return 1
    return 0
