from __future__ import annotations

"""
Explorer Entry Filters.

Regex-based exclusion of directory and file names from the scanned tree,
with optional .gitignore glob support.
"""

import fnmatch
import logging
import os
import re
from typing import List

logger = logging.getLogger(__name__)


def default_exclude_patterns() -> List[str]:
    """
    Get the default exclusion patterns: VCS/tooling folders and dot-files.

    Returns:
        List[str]: Regex strings matched against entry names.
    """
    return [
        r"^(__pycache__|\.git|\.idea|\.vscode|node_modules)$",
        r".*\.pyc$",
        r"^\.",
    ]


def compile_patterns(patterns: List[str]) -> List[re.Pattern]:
    """
    Compile regex strings, discarding malformed ones with a warning.

    Args:
        patterns: List of raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Discarding invalid exclusion pattern '{p}': {e}")
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """True if the name matches at least one compiled pattern."""
    return any(rx.search(name) for rx in compiled_patterns)


def load_gitignore_patterns(root_path: str) -> List[str]:
    """
    Parse a .gitignore file and translate its glob rules into regexes.

    Negations and path-anchored rules are not supported; each rule is
    matched against single entry names.

    Args:
        root_path: Directory containing the .gitignore file.

    Returns:
        List[str]: Equivalent regex strings.
    """
    gitignore_path = os.path.join(root_path, ".gitignore")
    if not os.path.exists(gitignore_path):
        return []

    regex_patterns: List[str] = []
    try:
        with open(gitignore_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith(("#", "!")):
                    continue
                regex_patterns.append(fnmatch.translate(line.strip("/")))
    except OSError as e:
        logger.warning(f"Could not read {gitignore_path}: {e}")

    return regex_patterns
