from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies default generation, merge-over-defaults loading, resilience to
corrupted files and verbatim persistence, without touching real user data.
"""

import json
from unittest.mock import patch

import pytest

from rainbowtree.domain import constants as const
from rainbowtree.domain.config import get_default_config, load_config, save_config


@pytest.fixture
def config_path(tmp_path):
    """Redirect CONFIG_FILE into a temporary directory."""
    path = tmp_path / "RainbowTree" / "config.json"
    with patch("rainbowtree.domain.config.CONFIG_FILE", str(path)):
        yield path


def test_defaults_are_complete_and_fresh() -> None:
    first = get_default_config()
    assert set(first) == {"colors", "unfocused_color", "enable_focus", "line_style"}
    assert first["colors"] == const.DEFAULT_COLORS

    first["colors"].append("#000")
    assert get_default_config()["colors"] == const.DEFAULT_COLORS


def test_load_without_file_returns_defaults(config_path) -> None:
    assert not config_path.exists()
    assert load_config() == get_default_config()


def test_load_merges_partial_file(config_path) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text(json.dumps({"line_style": "dotted", "legacy": 1}), encoding="utf-8")

    conf = load_config()

    assert conf["line_style"] == "dotted"
    assert conf["colors"] == const.DEFAULT_COLORS
    assert conf["enable_focus"] is True
    assert "legacy" not in conf


def test_load_corrupted_file_returns_defaults(config_path) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{ incomplete json ", encoding="utf-8")
    assert load_config() == get_default_config()


def test_load_non_object_returns_defaults(config_path) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text("[1, 2]", encoding="utf-8")
    assert load_config() == get_default_config()


def test_save_then_load(config_path, mock_config_dict) -> None:
    save_config(mock_config_dict)

    stored = json.loads(config_path.read_text(encoding="utf-8"))
    assert stored == mock_config_dict
    assert load_config() == mock_config_dict
