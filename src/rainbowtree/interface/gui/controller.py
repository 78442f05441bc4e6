from __future__ import annotations

"""
GUI Application Controller.

Bridges the settings panel with the styling core. Widget edits are
scraped into a configuration, saved, and pushed to the live preview
controller so the exported page never lags the settings.
"""

import logging
import os
import webbrowser
from tkinter import colorchooser
from tkinter import messagebox as mb
from typing import Any, Dict, List, Optional

from rainbowtree.core.analysis.tree_generator import scan_directory
from rainbowtree.core.controller import TreeStyleController
from rainbowtree.core.validator import is_valid_color, validate_config
from rainbowtree.domain import constants as const
from rainbowtree.domain.config import get_default_config, save_config
from rainbowtree.infra.document import HtmlDocument
from rainbowtree.infra.fs import (
    get_default_preview_path,
    normalize_identifier,
    normalize_path,
    write_text_file,
)
from rainbowtree.infra.workspace import StaticWorkspace

logger = logging.getLogger(__name__)


def parse_list_from_string(value: Optional[str]) -> List[str]:
    """Split a comma-separated widget value into stripped, non-empty items."""
    if not value:
        return []
    return [x.strip() for x in value.split(",") if x.strip()]


class AppController:
    """
    Owns the session configuration and the live preview.
    """

    def __init__(self, app: Any, config: Dict[str, Any], preview_path: Optional[str] = None):
        self.app = app
        self.config = config
        self.preview_path = preview_path or get_default_preview_path()
        self.settings_view: Any = None

        self.document: Optional[HtmlDocument] = None
        self.workspace: Optional[StaticWorkspace] = None
        self.style_controller: Optional[TreeStyleController] = None

    def register_view(self, settings_view: Any) -> None:
        self.settings_view = settings_view

    # -------------------------------------------------------------------------
    # VIEW <-> CONFIG SYNCHRONIZATION
    # -------------------------------------------------------------------------

    def sync_view_from_config(self) -> None:
        """Push the configuration into the widgets."""
        view = self.settings_view
        if not view:
            return

        colors = self.config.get("colors", [])
        for i, entry in enumerate(view.entry_colors):
            _set_entry(entry, colors[i] if i < len(colors) else "")

        view.combo_line_style.set(self.config.get("line_style", const.DEFAULT_LINE_STYLE))
        _set_entry(view.entry_unfocused, self.config.get("unfocused_color", ""))
        if self.config.get("enable_focus"):
            view.sw_focus.select()
        else:
            view.sw_focus.deselect()

    def sync_config_from_view(self) -> Dict[str, Any]:
        """
        Scrape the widgets into a new configuration.

        Palette entries beyond the panel's fields are preserved; an empty
        field keeps the current color of its level.

        Returns:
            Dict[str, Any]: Raw (unvalidated) configuration.
        """
        view = self.settings_view
        colors = list(self.config.get("colors", []))
        for i, entry in enumerate(view.entry_colors):
            value = entry.get().strip()
            if not value:
                continue
            if i < len(colors):
                colors[i] = value
            else:
                colors.append(value)

        return {
            "colors": colors,
            "line_style": view.combo_line_style.get(),
            "unfocused_color": view.entry_unfocused.get().strip(),
            "enable_focus": bool(view.sw_focus.get()),
        }

    # -------------------------------------------------------------------------
    # SETTINGS EVENTS
    # -------------------------------------------------------------------------

    def on_settings_changed(self, *_: Any) -> None:
        """Save the scraped settings and re-apply them to the preview."""
        raw = self.sync_config_from_view()

        if self.style_controller is not None:
            self.style_controller.update_settings(raw)
            self.config = self.style_controller.config
            self._write_preview()
        else:
            self.config, warnings = validate_config(raw)
            for w in warnings:
                logger.warning(f"Configuration Constraint: {w}")
            save_config(self.config)

    def pick_color(self, level: int) -> None:
        """Open the system color chooser for one palette level."""
        entry = self.settings_view.entry_colors[level]
        self._pick_into(entry, f"{const.LEVEL_NAMES[level]} color")

    def pick_unfocused_color(self) -> None:
        self._pick_into(self.settings_view.entry_unfocused, "Unfocused title color")

    def reset_config(self) -> None:
        if not mb.askyesno("Reset settings", "Restore the default colors and options?"):
            return
        self.config = get_default_config()
        self.sync_view_from_config()
        self.on_settings_changed()

    # -------------------------------------------------------------------------
    # PREVIEW LIFECYCLE
    # -------------------------------------------------------------------------

    def export_preview(self, open_browser: bool = True) -> bool:
        """
        (Re)build the preview document for the selected directory.

        Returns:
            bool: True if the page was written.
        """
        view = self.settings_view
        raw_input = view.entry_input.get().strip()
        input_path = normalize_path(raw_input, os.curdir) if raw_input else ""
        if not input_path or not os.path.isdir(input_path):
            logger.warning(f"UI Action: Preview requested for invalid directory: {raw_input!r}")
            mb.showerror("Preview", f"Directory not found:\n{raw_input}")
            return False

        self.shutdown()
        self.config = self.sync_config_from_view()
        tree = scan_directory(input_path)
        self.document = HtmlDocument.from_tree(tree, title=os.path.basename(input_path))
        self.workspace = StaticWorkspace(self._open_items())
        self.style_controller = TreeStyleController(
            self.document, self.workspace, self.config, persist=save_config
        )
        self.style_controller.activate()
        self.config = self.style_controller.config

        if not self._write_preview():
            return False
        if open_browser:
            webbrowser.open(f"file://{os.path.abspath(self.preview_path)}")
        return True

    def on_open_items_changed(self, *_: Any) -> None:
        """Forward the edited open-items list to the workspace."""
        if self.workspace is None:
            return
        self.workspace.set_open_items(self._open_items())
        self._write_preview()

    def shutdown(self) -> None:
        """Deactivate the live preview controller, if any."""
        if self.style_controller is not None:
            self.style_controller.deactivate()
        self.style_controller = None
        self.document = None
        self.workspace = None

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _open_items(self) -> List[str]:
        """Open-items field as tree identifiers."""
        raw = parse_list_from_string(self.settings_view.entry_open.get())
        items = (normalize_identifier(p) for p in raw)
        return [p for p in items if p]

    def _write_preview(self) -> bool:
        if self.document is None:
            return False
        ok, err = write_text_file(self.preview_path, self.document.to_html())
        if not ok:
            logger.error(f"Failed to write preview: {err}")
            mb.showerror("Preview", f"Could not write preview:\n{err}")
        return ok

    def _pick_into(self, entry: Any, title: str) -> None:
        current = entry.get().strip()
        initial = current if is_valid_color(current) else None
        _, hex_color = colorchooser.askcolor(color=initial, title=title, parent=self.app)
        if hex_color:
            _set_entry(entry, hex_color)
            self.on_settings_changed()


def _set_entry(entry: Any, text: str) -> None:
    entry.delete(0, "end")
    entry.insert(0, text)
