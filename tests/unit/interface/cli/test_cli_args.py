from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of styling flags to configuration overrides.
2. CSV palette parsing.
3. Repeatable open items and tri-state focus flags.
"""

import pytest

from rainbowtree.core.validator import validate_config
from rainbowtree.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_styling_flags_mapping() -> None:
    args = parse_args([
        "--colors", "#a, #b,,#c",
        "--line-style", "dotted",
        "--unfocused-color", "#444",
        "--no-focus",
    ])

    overrides = args_to_overrides(args)

    assert overrides == {
        "colors": ["#a", "#b", "#c"],
        "line_style": "dotted",
        "unfocused_color": "#444",
        "enable_focus": False,
    }


def test_functional_colors_stay_whole() -> None:
    args = parse_args(["--colors", "rgb(255, 0, 0),#00f, hsl(120, 50%, 50%)"])

    colors = args_to_overrides(args)["colors"]
    clean, warnings = validate_config({"colors": colors})

    assert colors == ["rgb(255, 0, 0)", "#00f", "hsl(120, 50%, 50%)"]
    assert clean["colors"] == colors
    assert warnings == []


def test_no_flags_means_no_overrides() -> None:
    args = parse_args([])
    assert args.enable_focus is None
    assert args_to_overrides(args) == {}


def test_focus_flag() -> None:
    assert args_to_overrides(parse_args(["--focus"]))["enable_focus"] is True


def test_focus_flags_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--focus", "--no-focus"])


def test_open_is_repeatable() -> None:
    args = parse_args(["-i", "/vault", "--open", "a.md", "--open", "b/c.md"])
    assert args.input_path == "/vault"
    assert args.open_paths == ["a.md", "b/c.md"]


def test_invalid_line_style_rejected() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--line-style", "wavy"])
