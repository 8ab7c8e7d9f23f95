"""Shared fixtures for themeindex tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _reset_themeindex_logger():
    yield
    logger = logging.getLogger("themeindex")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_theme():
    """Create ``root/<name>/<file_name>`` holding JSON (or raw text)."""

    def _write(root: Path, name: str, data: object, file_name: str = "theme.json") -> Path:
        theme_dir = root / name
        theme_dir.mkdir(parents=True, exist_ok=True)
        target = theme_dir / file_name
        if isinstance(data, str):
            target.write_text(data, encoding="utf-8")
        else:
            target.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return theme_dir

    return _write
