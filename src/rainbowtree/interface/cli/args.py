from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from rainbowtree.core.validator import split_color_list
from rainbowtree.domain import constants as const

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the RainbowTree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="rainbowtree",
        description="Render a directory as a file tree with depth-colored "
                    "connector lines and active-path focus.",
    )

    # --- Tree Source ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Directory to render (default: current directory).",
    )
    p.add_argument(
        "--open",
        dest="open_paths",
        action="append",
        default=[],
        metavar="PATH",
        help="Open item, relative to the input directory. Repeatable.",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes of entry names to skip.",
    )
    p.add_argument(
        "--gitignore",
        action="store_true",
        help="Also skip names listed in the root .gitignore.",
    )

    # --- Styling ---
    p.add_argument(
        "--colors",
        default=None,
        help="Comma-separated palette, cycled by nesting depth.",
    )
    p.add_argument(
        "--line-style",
        dest="line_style",
        choices=const.LINE_STYLES,
        default=None,
        help="Connector line style.",
    )
    p.add_argument(
        "--unfocused-color",
        dest="unfocused_color",
        default=None,
        help="Title color for entries outside the active path.",
    )
    focus = p.add_mutually_exclusive_group()
    focus.add_argument("--focus", dest="enable_focus", action="store_true", default=None,
                       help="Enable focus mode.")
    focus.add_argument("--no-focus", dest="enable_focus", action="store_false",
                       default=None, help="Disable focus mode.")

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write the HTML page to this file (default: stdout).",
    )
    p.add_argument(
        "--css",
        dest="css_only",
        action="store_true",
        help="Print only the depth stylesheet.",
    )
    p.add_argument(
        "--focused",
        dest="focused_only",
        action="store_true",
        help="Print only the resolved focused paths.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print a JSON summary instead of the page.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved settings.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the resulting settings.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resulting settings and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into styling configuration overrides.

    Only options given on the command line appear in the result.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.colors:
        overrides["colors"] = split_color_list(args.colors)
    if args.line_style:
        overrides["line_style"] = args.line_style
    if args.unfocused_color:
        overrides["unfocused_color"] = args.unfocused_color
    if args.enable_focus is not None:
        overrides["enable_focus"] = args.enable_focus

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
