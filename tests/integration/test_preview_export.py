from __future__ import annotations

"""
Integration tests for the preview service.

Runs the scan -> document -> controller -> HTML cycle on a real directory.
"""

from unittest.mock import patch

import pytest

from rainbowtree.core.controller import TreeStyleController
from rainbowtree.core.services.preview import render_preview, save_preview
from rainbowtree.domain import constants as const
from rainbowtree.infra.document import HtmlDocument


def _make_vault(root):
    (root / "notes" / "daily").mkdir(parents=True)
    (root / "notes" / "daily" / "today.md").write_text("", encoding="utf-8")
    (root / "notes" / "ideas.md").write_text("", encoding="utf-8")
    (root / "archive").mkdir()
    (root / "archive" / "old.md").write_text("", encoding="utf-8")
    return root


def test_render_marks_active_path(tmp_path, mock_config_dict) -> None:
    vault = _make_vault(tmp_path / "vault")

    result = render_preview(str(vault), ["notes/daily/today.md"], mock_config_dict)

    assert result.ok
    assert result.focused_paths == ["notes", "notes/daily", "notes/daily/today.md"]
    assert result.focus_mode is True
    assert result.element_count == 6
    assert result.missing_paths == []
    assert f'<style id="{const.STYLE_RESOURCE_ID}">' in result.html
    assert 'class="tree-folder focused" data-path="notes"' in result.html
    assert 'class="tree-folder" data-path="archive"' in result.html
    assert "border-left: 1px dashed #111111" in result.stylesheet


def test_open_paths_are_normalized(tmp_path, mock_config_dict) -> None:
    vault = _make_vault(tmp_path / "vault")

    result = render_preview(str(vault), ["./notes//ideas.md", "nowhere.md"], mock_config_dict)

    assert "notes/ideas.md" in result.focused_paths
    assert result.missing_paths == ["nowhere.md"]


def test_focus_disabled(tmp_path, mock_config_dict) -> None:
    vault = _make_vault(tmp_path / "vault")
    mock_config_dict["enable_focus"] = False

    result = render_preview(str(vault), ["archive/old.md"], mock_config_dict)

    assert result.focus_mode is False
    assert f'<body class="{const.FOCUS_MODE_CLASS}">' not in result.html


def test_missing_directory_fails(tmp_path, mock_config_dict) -> None:
    result = render_preview(str(tmp_path / "missing"), [], mock_config_dict)
    assert not result.ok
    assert "does not exist" in result.error


def test_save_preview_writes_page(tmp_path, mock_config_dict) -> None:
    vault = _make_vault(tmp_path / "vault")
    out = tmp_path / "out" / "preview.html"

    saved = save_preview(render_preview(str(vault), [], mock_config_dict), str(out))

    assert saved.ok
    assert saved.output_path == str(out)
    assert out.read_text(encoding="utf-8") == saved.html


def test_input_path_expands_home(tmp_path, monkeypatch, mock_config_dict) -> None:
    _make_vault(tmp_path / "vault")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))

    result = render_preview("~/vault", ["notes/ideas.md"], mock_config_dict)

    assert result.ok
    assert result.input_path == str(tmp_path / "vault")
    assert result.focused_paths == ["notes", "notes/ideas.md"]


def test_controller_released_when_capture_fails(tmp_path, mock_config_dict) -> None:
    vault = _make_vault(tmp_path / "vault")

    with patch.object(HtmlDocument, "to_html", side_effect=RuntimeError("boom")), \
            patch.object(TreeStyleController, "deactivate", autospec=True) as mock_deactivate:
        with pytest.raises(RuntimeError):
            render_preview(str(vault), ["notes/ideas.md"], mock_config_dict)

    mock_deactivate.assert_called_once()
