from __future__ import annotations

"""
Directory Tree Scanner.

Walks a directory into the nested Tree model rendered by the document
hosts. File identifiers are '/'-joined paths relative to the scanned root,
matching the identifiers used for open items.
"""

import logging
import os
import re
from typing import List, Optional

from rainbowtree.core.analysis.filters import (
    compile_patterns,
    default_exclude_patterns,
    load_gitignore_patterns,
    matches_any,
)
from rainbowtree.domain.constants import PATH_SEPARATOR
from rainbowtree.domain.tree_models import FileNode, Tree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan_directory(
        input_path: str,
        exclude_patterns: Optional[List[str]] = None,
        respect_gitignore: bool = False,
) -> Tree:
    """
    Build the Tree model of a directory.

    Excluded names prune whole subtrees. Empty folders are kept, as a
    file explorer shows them.

    Args:
        input_path: Root directory to scan.
        exclude_patterns: Regexes matched against entry names; defaults apply
                          when None.
        respect_gitignore: Also exclude names matching the root .gitignore.

    Returns:
        Tree: Nested folders (dicts) and FileNode leaves.
    """
    logger.info(f"Scanning directory tree: {input_path}")

    patterns = list(exclude_patterns) if exclude_patterns is not None else default_exclude_patterns()
    if respect_gitignore:
        patterns.extend(load_gitignore_patterns(os.path.abspath(input_path)))

    return _build_structure(os.path.abspath(input_path), compile_patterns(patterns))


def count_entries(tree: Tree) -> int:
    """Total number of folders and files in a Tree."""
    total = 0
    for node in tree.values():
        total += 1
        if isinstance(node, dict):
            total += count_entries(node)
    return total

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_structure(input_path: str, exclude_rx: List[re.Pattern]) -> Tree:
    tree_structure: Tree = {}

    # dirs is pruned in place so excluded folders are never descended into
    for root, dirs, files in os.walk(input_path):
        dirs[:] = sorted(d for d in dirs if not matches_any(d, exclude_rx))

        rel_root = os.path.relpath(root, input_path)
        segments = [] if rel_root == "." else rel_root.split(os.sep)

        level: Tree = tree_structure
        for segment in segments:
            next_level = level.setdefault(segment, {})
            if isinstance(next_level, dict):
                level = next_level

        for d in dirs:
            level.setdefault(d, {})

        for file_name in sorted(files):
            if matches_any(file_name, exclude_rx):
                continue
            level[file_name] = FileNode(path=PATH_SEPARATOR.join(segments + [file_name]))

    return tree_structure
