from __future__ import annotations

"""
Static Workspace Host.

A self-contained workspace holding the list of open items and dispatching
'file-open' / 'layout-change' notifications to subscribers, serialized on
the caller's thread.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from rainbowtree.core.surface import Unsubscribe, Workspace
from rainbowtree.domain import constants as const

logger = logging.getLogger(__name__)


class StaticWorkspace(Workspace):
    """
    In-process workspace driven explicitly by its owner (CLI, GUI, tests).
    """

    def __init__(self, open_paths: Optional[Iterable[str]] = None) -> None:
        self._open: List[str] = list(open_paths or [])
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

    # --- Workspace ---

    def get_open_paths(self) -> List[str]:
        return list(self._open)

    def subscribe(self, event: str, callback: Callable[..., Any]) -> Unsubscribe:
        self._listeners.setdefault(event, []).append(callback)

        def unsubscribe() -> None:
            listeners = self._listeners.get(event, [])
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    # --- Mutations ---

    def open_item(self, path: str) -> None:
        """Open a leaf item (no-op for the list if already open) and notify."""
        if path not in self._open:
            self._open.append(path)
        self.emit(const.EVENT_FILE_OPEN, path)

    def close_item(self, path: str) -> None:
        if path in self._open:
            self._open.remove(path)
            self.emit(const.EVENT_LAYOUT_CHANGE)

    def set_open_items(self, paths: Iterable[str]) -> None:
        self._open = list(paths)
        self.emit(const.EVENT_LAYOUT_CHANGE)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))

    def emit(self, event: str, *args: Any) -> None:
        listeners = list(self._listeners.get(event, []))
        logger.debug(f"Workspace event '{event}' -> {len(listeners)} listener(s).")
        for callback in listeners:
            callback(*args)
