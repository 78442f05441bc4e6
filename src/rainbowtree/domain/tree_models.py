from __future__ import annotations

"""
Directory Tree Structure Data Models.

Recursive type definitions used by the scanner and the HTML document host.
Folders are plain dictionaries keyed by entry name; files are leaves.
"""

from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class FileNode:
    """
    Leaf entry (file) in the directory tree.

    Attributes:
        path: Identifier of the file relative to the scanned root,
              segments joined by '/'.
    """
    path: str


Tree = Dict[str, Union["Tree", FileNode]]
