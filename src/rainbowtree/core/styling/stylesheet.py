from __future__ import annotations

"""
Depth Stylesheet Generator.

Synthesizes the full depth-indexed ruleset: one connector-line rule per
nesting level, colored cyclically from the palette, plus the custom
property carrying the unfocused title color. The output is always the
complete sheet; callers replace the previous text wholesale.
"""

from typing import Any, Dict, List

from rainbowtree.core.styling.selectors import nesting_selector
from rainbowtree.domain.constants import MAX_NESTING_DEPTH, UNFOCUSED_COLOR_PROPERTY


def depth_color(colors: List[str], depth: int) -> str:
    """Color assigned to a nesting depth: colors[depth mod len(colors)]."""
    if not colors:
        raise ValueError("Color palette must contain at least one entry.")
    return colors[depth % len(colors)]


def build_depth_stylesheet(config: Dict[str, Any], max_depth: int = MAX_NESTING_DEPTH) -> str:
    """
    Produce the stylesheet text for a configuration.

    Deterministic: the same configuration always yields the same text.
    Containers nested deeper than max_depth get no dedicated rule.

    Args:
        config: Validated configuration ('colors', 'line_style',
                'unfocused_color').
        max_depth: Number of depth rules to emit.

    Returns:
        str: The stylesheet.

    Raises:
        ValueError: If the palette is empty.
    """
    colors = list(config["colors"])
    line_style = config["line_style"]

    rules = [f":root {{\n    {UNFOCUSED_COLOR_PROPERTY}: {config['unfocused_color']};\n}}\n"]
    for depth in range(max_depth):
        rules.append(
            f"{nesting_selector(depth)}::before {{\n"
            f"    border-left: 1px {line_style} {depth_color(colors, depth)};\n"
            f"}}\n"
        )
    return "".join(rules)
