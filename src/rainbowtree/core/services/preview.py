from __future__ import annotations

"""
Styled Tree Preview Service.

Runs the full host cycle headlessly: scan a directory, build the HTML
document, activate the style controller against a workspace holding the
requested open items, and capture the resulting page.
"""

import dataclasses
import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from rainbowtree.core.analysis.tree_generator import scan_directory
from rainbowtree.core.controller import TreeStyleController
from rainbowtree.domain.constants import FOCUS_MODE_CLASS
from rainbowtree.domain.preview_models import PreviewResult
from rainbowtree.infra.document import HtmlDocument
from rainbowtree.infra.fs import normalize_identifier, normalize_path, write_text_file
from rainbowtree.infra.workspace import StaticWorkspace

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_preview(
        input_path: str,
        open_paths: Iterable[str],
        config: Dict[str, Any],
        exclude_patterns: Optional[List[str]] = None,
        respect_gitignore: bool = False,
) -> PreviewResult:
    """
    Render a directory as a styled, focus-marked HTML page.

    Args:
        input_path: Directory to render.
        open_paths: Identifiers of the open items, relative to input_path.
        config: Styling configuration (validated by the controller).
        exclude_patterns: Entry-name regexes to skip.
        respect_gitignore: Honor the root .gitignore.

    Returns:
        PreviewResult: The page and focus metadata, or ok=False on failure.
    """
    abs_input = normalize_path(input_path, os.getcwd())
    if not os.path.isdir(abs_input):
        msg = f"Input directory does not exist: {abs_input}"
        logger.error(msg)
        return PreviewResult(ok=False, error=msg, input_path=abs_input)

    tree = scan_directory(abs_input, exclude_patterns, respect_gitignore)
    document = HtmlDocument.from_tree(tree, title=os.path.basename(abs_input) or abs_input)

    opened = [normalize_identifier(p) for p in open_paths]
    workspace = StaticWorkspace(p for p in opened if p)

    controller = TreeStyleController(document, workspace, config, persist=None)
    controller.activate()
    try:
        known = {el.path for el in document.query_path_elements()}
        missing = sorted(p for p in workspace.get_open_paths() if p not in known)
        for p in missing:
            logger.warning(f"Open item not found in tree: {p}")

        result = PreviewResult(
            ok=True,
            input_path=abs_input,
            html=document.to_html(),
            stylesheet=controller.stylesheet,
            focused_paths=sorted(controller.focused_paths),
            missing_paths=missing,
            element_count=len(known),
            focus_mode=document.has_root_class(FOCUS_MODE_CLASS),
        )
    finally:
        controller.deactivate()

    logger.info(
        f"Preview rendered: {result.element_count} entries, "
        f"{len(result.focused_paths)} focused."
    )
    return result


def save_preview(result: PreviewResult, output_path: str) -> PreviewResult:
    """
    Write a rendered preview to disk.

    Returns:
        PreviewResult: Copy of the result carrying output_path, or ok=False
                       with the I/O error.
    """
    if not result.ok:
        return result

    ok, err = write_text_file(output_path, result.html)
    if not ok:
        msg = f"Failed to write preview to '{output_path}': {err}"
        logger.error(msg)
        return dataclasses.replace(result, ok=False, error=msg)

    logger.info(f"Preview saved to: {output_path}")
    return dataclasses.replace(result, output_path=os.path.abspath(output_path))

