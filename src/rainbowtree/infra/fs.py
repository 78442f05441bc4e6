from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory that holds the persisted settings,
the diagnostic log and exported previews, and provides a safe text writer
for generated artifacts.
"""

import os
from typing import Optional, Tuple

from rainbowtree.domain.constants import PATH_SEPARATOR

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "RainbowTree"
UNIX_APP_DIR_NAME = ".rainbowtree"
PREVIEW_FILE_NAME = "preview.html"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Creates the directory if it does not exist.
    - Windows: %LOCALAPPDATA%/RainbowTree
    - Linux/Mac: ~/.rainbowtree

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def get_default_preview_path() -> str:
    """Location used by the GUI for the exported HTML preview."""
    return os.path.join(get_user_data_dir(), PREVIEW_FILE_NAME)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Expands '~' and environment variables. Empty input resolves to fallback.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip() or fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def normalize_identifier(path: str) -> str:
    """
    Turn a user-typed item path into a tree identifier.

    Backslashes and OS separators become '/'; empty and '.' segments are
    dropped, so './notes//a.md' and 'notes\\a.md' both give 'notes/a.md'.
    """
    p = path.strip().replace(os.sep, PATH_SEPARATOR).replace("\\", PATH_SEPARATOR)
    return PATH_SEPARATOR.join(s for s in p.split(PATH_SEPARATOR) if s and s != ".")

# -----------------------------------------------------------------------------
# ARTIFACT PERSISTENCE
# -----------------------------------------------------------------------------

def write_text_file(path: str, content: str) -> Tuple[bool, Optional[str]]:
    """
    Write UTF-8 text to disk, creating parent directories as needed.

    Args:
        path: Destination file path.
        content: Text to write.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return True, None
    except OSError as e:
        return False, str(e)
