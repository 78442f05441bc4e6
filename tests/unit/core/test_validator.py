from __future__ import annotations

"""
Unit tests for the Configuration Validator.
"""

import pytest

from rainbowtree.core.validator import is_valid_color, split_color_list, validate_config
from rainbowtree.domain import constants as const


def test_valid_config_passes_unchanged(mock_config_dict) -> None:
    clean, warnings = validate_config(mock_config_dict)
    assert clean == mock_config_dict
    assert warnings == []


def test_missing_keys_take_defaults() -> None:
    clean, warnings = validate_config({"line_style": "dotted"})
    assert clean["line_style"] == "dotted"
    assert clean["colors"] == const.DEFAULT_COLORS
    assert clean["enable_focus"] is True
    assert warnings == []


def test_unknown_keys_are_dropped(mock_config_dict) -> None:
    clean, _ = validate_config({**mock_config_dict, "theme": "dark"})
    assert "theme" not in clean


def test_non_dict_falls_back_to_defaults() -> None:
    clean, warnings = validate_config(["not", "a", "dict"])
    assert clean["colors"] == const.DEFAULT_COLORS
    assert warnings


def test_empty_palette_restored() -> None:
    clean, warnings = validate_config({"colors": []})
    assert clean["colors"] == const.DEFAULT_COLORS
    assert any("empty" in w for w in warnings)


def test_malformed_colors_discarded() -> None:
    clean, warnings = validate_config({"colors": ["#fff", 12, "red; } body {", "  ", "blue"]})
    assert clean["colors"] == ["#fff", "blue"]
    assert len(warnings) == 2


def test_csv_palette_converted() -> None:
    clean, warnings = validate_config({"colors": "#a, #b"})
    assert clean["colors"] == ["#a", "#b"]
    assert warnings


def test_bool_coercion() -> None:
    clean, warnings = validate_config({"enable_focus": "off"})
    assert clean["enable_focus"] is False
    assert warnings


def test_line_style_normalized_and_checked() -> None:
    assert validate_config({"line_style": " Dashed "})[0]["line_style"] == "dashed"

    clean, warnings = validate_config({"line_style": "wavy"})
    assert clean["line_style"] == const.DEFAULT_LINE_STYLE
    assert warnings


def test_unfocused_color_checked() -> None:
    clean, warnings = validate_config({"unfocused_color": "x}"})
    assert clean["unfocused_color"] == const.DEFAULT_UNFOCUSED_COLOR
    assert warnings


@pytest.mark.parametrize("conf, exc", [
    ("nope", TypeError),
    ({"colors": []}, ValueError),
    ({"colors": "#a,#b"}, TypeError),
    ({"line_style": "wavy"}, ValueError),
    ({"enable_focus": "yes"}, TypeError),
])
def test_strict_mode_raises(conf, exc) -> None:
    with pytest.raises(exc):
        validate_config(conf, strict=True)


def test_is_valid_color() -> None:
    assert is_valid_color("rgb(1, 2, 3)")
    assert not is_valid_color("")
    assert not is_valid_color(None)
    assert not is_valid_color("<script>")


@pytest.mark.parametrize("value", ["rgb(255", "0", "0)", "42", "-1.5", "50%", "var(--x))", ")("])
def test_is_valid_color_rejects_fragments(value) -> None:
    assert not is_valid_color(value)


def test_split_color_list_respects_parentheses() -> None:
    assert split_color_list("#f00, rgb(0, 128, 0),,hsl(1, 2%, 3%) ") == [
        "#f00",
        "rgb(0, 128, 0)",
        "hsl(1, 2%, 3%)",
    ]


def test_csv_palette_keeps_functional_colors() -> None:
    clean, warnings = validate_config({"colors": "rgb(255, 0, 0),#00f"})
    assert clean["colors"] == ["rgb(255, 0, 0)", "#00f"]
    assert warnings == ["Field 'colors' converted from CSV string to list."]
