from __future__ import annotations

"""
Preview Domain Data Models.

Result object exchanged between the preview service and the CLI/GUI.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PreviewResult:
    """
    Outcome of rendering a styled tree preview.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Normalized root directory rendered.
        html: Standalone HTML page of the styled tree.
        stylesheet: Depth stylesheet embedded in the page.
        focused_paths: Sorted focused identifiers.
        missing_paths: Open identifiers with no element in the tree.
        element_count: Number of path-marked elements in the document.
        focus_mode: Whether the focus-mode class was applied.
        output_path: File the page was written to, if saved.
    """
    ok: bool
    error: str = ""
    input_path: str = ""
    html: str = ""
    stylesheet: str = ""
    focused_paths: List[str] = field(default_factory=list)
    missing_paths: List[str] = field(default_factory=list)
    element_count: int = 0
    focus_mode: bool = False
    output_path: str = ""
