from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the palette defaults, the supported connector line styles,
the CSS vocabulary shared by the stylesheet generator and the document
hosts, and application versioning.
"""

from typing import List, Tuple

CURRENT_CONFIG_VERSION = "1.2.0"
APP_NAME = "RainbowTree"

# -----------------------------------------------------------------------------
# PALETTE AND LINE STYLES
# -----------------------------------------------------------------------------
DEFAULT_COLORS: List[str] = ["#ff5252", "#f99d6c", "#53c169", "#747dfb", "#f098fb"]
DEFAULT_UNFOCUSED_COLOR = "#999999"
DEFAULT_LINE_STYLE = "solid"

LINE_STYLES: Tuple[str, ...] = ("solid", "dashed", "dotted")

# Human labels for the per-level color fields of the settings panel
LEVEL_NAMES: Tuple[str, ...] = (
    "First level",
    "Second level",
    "Third level",
    "Fourth level",
    "Fifth level",
)

# -----------------------------------------------------------------------------
# HIERARCHY AND CSS VOCABULARY
# -----------------------------------------------------------------------------
PATH_SEPARATOR = "/"

# Number of depth rules emitted; deeper containers get no dedicated rule
MAX_NESTING_DEPTH = 10

CHILDREN_CONTAINER_CLASS = "tree-folder-children"
FOLDER_CLASS = "tree-folder"
FILE_CLASS = "tree-file"
TITLE_CLASS = "tree-item-title"

FOCUS_MODE_CLASS = "rainbow-tree-focus"
FOCUSED_CLASS = "focused"
PATH_ATTRIBUTE = "data-path"

STYLE_RESOURCE_ID = "rainbow-tree-styles"
UNFOCUSED_COLOR_PROPERTY = "--rainbow-tree-unfocused-color"

# -----------------------------------------------------------------------------
# HOST EVENTS
# -----------------------------------------------------------------------------
EVENT_FILE_OPEN = "file-open"
EVENT_LAYOUT_CHANGE = "layout-change"
