from __future__ import annotations

"""
Focus Marking.

Projects a focused set onto the live document: the global focus-mode class
on the root, and a per-element 'focused' class driven by path membership.
"""

import logging
from typing import Any, Dict, Set

from rainbowtree.core.surface import DocumentSurface
from rainbowtree.domain.constants import FOCUS_MODE_CLASS, FOCUSED_CLASS

logger = logging.getLogger(__name__)


def apply_focus(focused_paths: Set[str], config: Dict[str, Any], document: DocumentSurface) -> int:
    """
    Mark the document according to the focused set.

    The root class follows 'enable_focus'; element markers are set either
    way, the dimming itself being gated by the root class in CSS.

    Args:
        focused_paths: Output of the focus resolver.
        config: Active styling configuration.
        document: Target document surface.

    Returns:
        int: Number of elements marked as focused.
    """
    document.toggle_root_class(FOCUS_MODE_CLASS, bool(config.get("enable_focus")))

    marked = 0
    for element in document.query_path_elements():
        is_focused = (element.path or "") in focused_paths
        element.toggle_class(FOCUSED_CLASS, is_focused)
        if is_focused:
            marked += 1

    logger.debug(f"Focus applied: {marked} element(s) marked out of {len(focused_paths)} path(s).")
    return marked
