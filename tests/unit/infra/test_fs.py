from __future__ import annotations

"""
Unit tests for the filesystem helpers.
"""

import os

import pytest

from rainbowtree.infra.fs import normalize_identifier, normalize_path, write_text_file


def test_normalize_path_expands_user(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))

    assert normalize_path("~/vault", "unused") == os.path.join(str(tmp_path), "vault")


def test_normalize_path_empty_uses_fallback(tmp_path) -> None:
    assert normalize_path("   ", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)


@pytest.mark.parametrize("raw, expected", [
    ("notes/a.md", "notes/a.md"),
    ("./notes/a.md", "notes/a.md"),
    ("notes//a.md", "notes/a.md"),
    ("notes\\a.md", "notes/a.md"),
    ("  notes/daily/ ", "notes/daily"),
    ("./", ""),
])
def test_normalize_identifier(raw, expected) -> None:
    assert normalize_identifier(raw) == expected


def test_write_text_file_creates_parents(tmp_path) -> None:
    target = tmp_path / "out" / "page.html"

    ok, err = write_text_file(str(target), "<html></html>")

    assert ok is True
    assert err is None
    assert target.read_text(encoding="utf-8") == "<html></html>"
