# tests/test_title_codes.py

from __future__ import annotations

from family_tree_utils.title_codes import (
    DEFAULT_TITLE_CODES_TEMPLATE,
    ensure_title_codes_file,
    load_title_codes,
    parse_title_codes,
)


def test_comments_and_blank_lines_are_ignored():
    lines = ["# Title Codes", "", "  Dr.  ", "   ", "  # indented comment", "Rev.", "dr."]
    assert parse_title_codes(lines) == ["Dr.", "Rev.", "dr."]


def test_load_missing_file_returns_empty_list(tmp_path):
    assert load_title_codes(tmp_path / "missing.txt") == []


def test_load_keeps_file_order(tmp_path):
    path = tmp_path / "codes.txt"
    path.write_text("Rev.\n# comment\nDr.\n\nSir\n", encoding="utf-8")
    assert load_title_codes(path) == ["Rev.", "Dr.", "Sir"]


def test_ensure_creates_default_file(tmp_path):
    path = tmp_path / "nested" / "TitleCodesList.txt"
    assert ensure_title_codes_file(path) == path
    assert path.read_text(encoding="utf-8") == DEFAULT_TITLE_CODES_TEMPLATE
    assert load_title_codes(path) == ["Dr.", "Mr.", "Mrs.", "Ms.", "Prof.", "Rev."]


def test_ensure_keeps_existing_file(tmp_path):
    path = tmp_path / "codes.txt"
    path.write_text("Sir\n", encoding="utf-8")
    ensure_title_codes_file(path)
    assert load_title_codes(path) == ["Sir"]


def test_project_default_codes_file():
    assert "Dr." in load_title_codes()
