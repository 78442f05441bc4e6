from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted settings (CLI flags, GUI widgets, the JSON
file) and the styling core. Coerces types, drops malformed colors and
guarantees the palette is never empty, so the stylesheet generator can be
invoked without further checks.
"""

import logging
import re
from typing import Any, Dict, List, Tuple

from rainbowtree.domain import constants as const
from rainbowtree.domain.config import get_default_config

logger = logging.getLogger(__name__)

# Characters that would let a color value escape its CSS declaration
_UNSAFE_COLOR_RX = re.compile(r"[;{}<>]")

# Commas outside parentheses; rgb(1, 2, 3) stays one item
_COLOR_SEPARATOR_RX = re.compile(r",(?![^()]*\))")

_BARE_NUMBER_RX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)%?$")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a styling configuration.

    Missing keys are filled from the defaults. In lenient mode every problem
    is reported as a warning and replaced by a fallback value; in strict mode
    the first problem raises.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise TypeError/ValueError instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    merged["colors"] = _as_palette(merged.get("colors"), defaults["colors"], warnings, strict)
    merged["unfocused_color"] = _as_color(
        merged.get("unfocused_color"), defaults["unfocused_color"], "unfocused_color", warnings, strict
    )
    merged["enable_focus"] = _as_bool(
        merged.get("enable_focus"), defaults["enable_focus"], "enable_focus", warnings, strict
    )
    merged["line_style"] = _as_line_style(
        merged.get("line_style"), defaults["line_style"], warnings, strict
    )

    return merged, warnings


def is_valid_color(value: Any) -> bool:
    """Check that a value can be embedded in a CSS declaration as a color."""
    if not isinstance(value, str) or not value.strip():
        return False
    if _UNSAFE_COLOR_RX.search(value) or _BARE_NUMBER_RX.match(value.strip()):
        return False
    return _parens_balanced(value)


def split_color_list(value: str) -> List[str]:
    """
    Split a comma-separated palette, keeping functional colors intact.

    Args:
        value: Raw text such as "#f00, rgb(0, 128, 0)".

    Returns:
        List[str]: Stripped, non-empty items.
    """
    return [x.strip() for x in _COLOR_SEPARATOR_RX.split(value) if x.strip()]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_palette(value: Any, fallback: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Ensure a non-empty list of safe color strings, supporting CSV input."""
    if isinstance(value, str) and not strict:
        warnings.append("Field 'colors' converted from CSV string to list.")
        value = split_color_list(value)

    if not isinstance(value, list):
        msg = f"Invalid field 'colors': expected list[str], received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using default palette.")
        return list(fallback)

    out: List[str] = []
    for i, item in enumerate(value):
        if isinstance(item, str) and not item.strip():
            continue
        if not is_valid_color(item):
            msg = f"Invalid item in 'colors[{i}]': {item!r} is not a color."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Item discarded.")
            continue
        out.append(item.strip())

    if not out:
        if strict:
            raise ValueError("Field 'colors' must contain at least one color.")
        warnings.append("Field 'colors' is empty. Using default palette.")
        return list(fallback)
    return out


def _as_color(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if is_valid_color(value):
        return value.strip()

    msg = f"Invalid field '{field}': {value!r} is not a color."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_line_style(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if isinstance(value, str) and value.strip().lower() in const.LINE_STYLES:
        return value.strip().lower()

    msg = f"Invalid field 'line_style': {value!r} is not one of {', '.join(const.LINE_STYLES)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _parens_balanced(value: str) -> bool:
    depth = 0
    for ch in value:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0
