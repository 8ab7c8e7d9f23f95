"""Tests for theme file detection, parsing and palette extraction."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from themeindex.themes.constants import COLOR_KEYS
from themeindex.themes.loader import (
    extract_colors,
    extract_registry_entry,
    find_theme_file,
    is_theme_directory,
    is_truthy,
    read_theme_json,
)


def test_is_theme_directory_with_json(tmp_path: Path, write_theme) -> None:
    theme_dir = write_theme(tmp_path, "Nord", {"mPrimary": "#88c0d0"})
    assert is_theme_directory(theme_dir) is True


def test_is_theme_directory_suffix_is_case_insensitive(tmp_path: Path, write_theme) -> None:
    theme_dir = write_theme(tmp_path, "Loud", {"mPrimary": "#fff"}, file_name="LOUD.JSON")
    assert is_theme_directory(theme_dir) is True
    assert find_theme_file(theme_dir) == theme_dir / "LOUD.JSON"


def test_is_theme_directory_without_json(tmp_path: Path) -> None:
    theme_dir = tmp_path / "assets"
    theme_dir.mkdir()
    (theme_dir / "preview.png").write_bytes(b"\x89PNG")
    (theme_dir / "notes.json.bak").write_text("{}", encoding="utf-8")
    assert is_theme_directory(theme_dir) is False
    assert find_theme_file(theme_dir) is None


def test_is_theme_directory_missing_dir_is_false(tmp_path: Path) -> None:
    assert is_theme_directory(tmp_path / "gone") is False


def test_read_theme_json_parses_document(tmp_path: Path, write_theme) -> None:
    theme_dir = write_theme(tmp_path, "Nord", {"dark": {"mPrimary": "#000"}})
    assert read_theme_json(theme_dir) == {"dark": {"mPrimary": "#000"}}


def test_read_theme_json_malformed_logs_and_returns_none(
    tmp_path: Path, write_theme, caplog
) -> None:
    theme_dir = write_theme(tmp_path, "Broken", "{ not json")
    with caplog.at_level(logging.ERROR, logger="themeindex"):
        assert read_theme_json(theme_dir) is None
    assert any(
        record.levelno == logging.ERROR
        and "Error reading theme from" in record.getMessage()
        and str(theme_dir) in record.getMessage()
        for record in caplog.records
    )


def test_read_theme_json_rejects_nan_literal(tmp_path: Path, write_theme, caplog) -> None:
    theme_dir = write_theme(tmp_path, "Odd", '{"mPrimary": NaN}')
    with caplog.at_level(logging.ERROR, logger="themeindex"):
        assert read_theme_json(theme_dir) is None
    assert "NaN" in caplog.text


def test_read_theme_json_invalid_utf8_is_replaced(tmp_path: Path, caplog) -> None:
    theme_dir = tmp_path / "Bytes"
    theme_dir.mkdir()
    (theme_dir / "theme.json").write_bytes(b'{"name": "caf\xe9", "mPrimary": "#111"}')
    with caplog.at_level(logging.ERROR, logger="themeindex"):
        document = read_theme_json(theme_dir)
    assert document == {"name": "caf\ufffd", "mPrimary": "#111"}
    assert "Error reading theme from" not in caplog.text


def test_read_theme_json_deep_nesting_returns_none(tmp_path: Path, write_theme, caplog) -> None:
    theme_dir = write_theme(tmp_path, "Deep", "[" * 100000)
    with caplog.at_level(logging.ERROR, logger="themeindex"):
        assert read_theme_json(theme_dir) is None
    assert "Error reading theme from" in caplog.text


def test_read_theme_json_keeps_overflowing_number(tmp_path: Path, write_theme) -> None:
    theme_dir = write_theme(tmp_path, "Huge", '{"mPrimary": 1e400}')
    assert read_theme_json(theme_dir) == {"mPrimary": float("inf")}


def test_read_theme_json_directory_named_json(tmp_path: Path, caplog) -> None:
    theme_dir = tmp_path / "Trap"
    (theme_dir / "folder.json").mkdir(parents=True)
    assert is_theme_directory(theme_dir) is True
    with caplog.at_level(logging.ERROR, logger="themeindex"):
        assert read_theme_json(theme_dir) is None
    assert "Error reading theme from" in caplog.text


def test_read_theme_json_missing_dir_returns_none(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="themeindex"):
        assert read_theme_json(tmp_path / "gone") is None
    assert "Error reading theme from" in caplog.text


def test_extract_colors_keeps_allow_list_order() -> None:
    variant = {key: f"#{index:06x}" for index, key in reversed(list(enumerate(COLOR_KEYS)))}
    palette = extract_colors(variant)
    assert list(palette) == list(COLOR_KEYS)


def test_extract_colors_drops_unknown_keys() -> None:
    palette = extract_colors({"mPrimary": "#111", "background": "#222", "mprimary": "#333"})
    assert palette == {"mPrimary": "#111"}


@pytest.mark.parametrize("falsy", ["", 0, 0.0, False, None])
def test_extract_colors_drops_falsy_values(falsy) -> None:
    palette = extract_colors({"mPrimary": falsy, "mSurface": "#222"})
    assert "mPrimary" not in palette
    assert palette == {"mSurface": "#222"}


def test_extract_colors_drops_absent_keys() -> None:
    assert extract_colors({"mSurface": "#222"}) == {"mSurface": "#222"}


def test_extract_colors_passes_values_through() -> None:
    palette = extract_colors({"mPrimary": "not-a-color", "mShadow": 7, "mHover": True})
    assert palette == {"mPrimary": "not-a-color", "mShadow": 7, "mHover": True}


@pytest.mark.parametrize("variant", [None, "dark", 42, ["mPrimary"], True])
def test_extract_colors_non_object_is_empty(variant) -> None:
    assert extract_colors(variant) == {}


def test_entry_from_flat_document_uses_same_palette_twice() -> None:
    entry = extract_registry_entry({"mPrimary": "#111", "mSurface": "#222"}, "Alpha")
    assert entry.name == "Alpha"
    assert entry.path == "Alpha"
    assert entry.dark == {"mPrimary": "#111", "mSurface": "#222"}
    assert entry.dark == entry.light


def test_entry_from_split_document() -> None:
    document = {"dark": {"mPrimary": "#000"}, "light": {"mPrimary": "#fff"}}
    entry = extract_registry_entry(document, "beta")
    assert entry.dark == {"mPrimary": "#000"}
    assert entry.light == {"mPrimary": "#fff"}


def test_entry_with_only_dark_falls_back_to_document_for_light() -> None:
    document = {"dark": {"mPrimary": "#000"}, "mPrimary": "#abc", "mOnPrimary": "#def"}
    entry = extract_registry_entry(document, "half")
    assert entry.dark == {"mPrimary": "#000"}
    assert entry.light == {"mPrimary": "#abc", "mOnPrimary": "#def"}


def test_entry_with_empty_dark_object_does_not_fall_back() -> None:
    entry = extract_registry_entry({"dark": {}, "mPrimary": "#abc"}, "empty-dark")
    assert entry.dark == {}
    assert entry.light == {"mPrimary": "#abc"}


def test_entry_with_non_object_variant_is_empty() -> None:
    entry = extract_registry_entry({"dark": "#000", "light": ["#fff"]}, "weird")
    assert entry.dark == {}
    assert entry.light == {}


def test_entry_from_non_object_document() -> None:
    entry = extract_registry_entry(["mPrimary"], "listy")
    assert entry.dark == {}
    assert entry.light == {}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        (False, False),
        (0, False),
        (0.0, False),
        (float("nan"), False),
        ("", False),
        ("#000", True),
        (1, True),
        (True, True),
        ({}, True),
        ([], True),
    ],
)
def test_is_truthy(value, expected) -> None:
    assert is_truthy(value) is expected
