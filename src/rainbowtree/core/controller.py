from __future__ import annotations

"""
Tree Style Lifecycle Controller.

Owns the single style resource and the current focused set. Wires the
workspace notifications to the focus resolver, regenerates the depth
stylesheet on configuration changes, and restores the document to its
pre-activation state on shutdown.
"""

import logging
from typing import Any, Callable, Dict, FrozenSet, List, Optional

from rainbowtree.core.focus.applier import apply_focus
from rainbowtree.core.focus.resolver import resolve_focused_paths
from rainbowtree.core.styling.stylesheet import build_depth_stylesheet
from rainbowtree.core.surface import DocumentSurface, StyleResource, Unsubscribe, Workspace
from rainbowtree.core.validator import validate_config
from rainbowtree.domain import constants as const
from rainbowtree.domain.config import save_config

logger = logging.getLogger(__name__)


class TreeStyleController:
    """
    Top-level controller binding the styling core to a host.

    All entry points run synchronously on the host's event thread.
    """

    def __init__(
            self,
            document: DocumentSurface,
            workspace: Workspace,
            config: Dict[str, Any],
            persist: Optional[Callable[[Dict[str, Any]], None]] = save_config,
    ) -> None:
        """
        Args:
            document: Surface receiving the style resource and focus marks.
            workspace: Source of open items and change notifications.
            config: Initial configuration; normalized on construction.
            persist: Called with the new configuration by update_settings.
                     None disables persistence.
        """
        self.document = document
        self.workspace = workspace
        self.config, warnings = validate_config(config)
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")
        self._persist = persist

        self._style: Optional[StyleResource] = None
        self._subscriptions: List[Unsubscribe] = []
        self._focused: FrozenSet[str] = frozenset()

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    @property
    def active(self) -> bool:
        return self._style is not None

    @property
    def focused_paths(self) -> FrozenSet[str]:
        return self._focused

    @property
    def stylesheet(self) -> str:
        return self._style.text if self._style is not None else ""

    def activate(self) -> None:
        """Attach the style resource, subscribe to the workspace and paint."""
        if self.active:
            logger.warning("Activation requested while already active. Ignoring.")
            return

        self._style = self.document.attach_style(const.STYLE_RESOURCE_ID)
        self.refresh_styles()

        self._subscriptions = [
            self.workspace.subscribe(const.EVENT_FILE_OPEN, self._on_file_open),
            self.workspace.subscribe(const.EVENT_LAYOUT_CHANGE, self._on_layout_change),
        ]
        self.refresh_focus()
        logger.info("Tree styling activated.")

    def deactivate(self) -> None:
        """Release the style resource and clear the global focus-mode class."""
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions = []

        if self._style is not None:
            self._style.remove()
            self._style = None

        self.document.toggle_root_class(const.FOCUS_MODE_CLASS, False)
        self._focused = frozenset()
        logger.info("Tree styling deactivated.")

    # -------------------------------------------------------------------------
    # REGENERATION
    # -------------------------------------------------------------------------

    def refresh_styles(self) -> None:
        """Replace the owned stylesheet text with a freshly built one."""
        if self._style is None:
            return
        self._style.text = build_depth_stylesheet(self.config)
        logger.debug(
            f"Depth stylesheet rebuilt ({len(self.config['colors'])} colors, "
            f"{self.config['line_style']} lines)."
        )

    def refresh_focus(self) -> None:
        """Resolve the focused set from the open items and mark the document."""
        if not self.active:
            return
        self._focused = frozenset(resolve_focused_paths(self.workspace.get_open_paths()))
        apply_focus(self._focused, self.config, self.document)

    def update_settings(self, config: Dict[str, Any]) -> List[str]:
        """
        Adopt a new configuration, persist it and re-apply both visual layers.

        Args:
            config: Raw configuration from the settings surface.

        Returns:
            List[str]: Validation warnings.
        """
        self.config, warnings = validate_config(config)
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        if self._persist is not None:
            self._persist(self.config)

        self.refresh_styles()
        self.refresh_focus()
        return warnings

    # -------------------------------------------------------------------------
    # EVENT HANDLERS
    # -------------------------------------------------------------------------

    def _on_file_open(self, path: Optional[str] = None) -> None:
        if path:
            self.refresh_focus()

    def _on_layout_change(self, *_: Any) -> None:
        self.refresh_focus()
