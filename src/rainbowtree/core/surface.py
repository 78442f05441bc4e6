from __future__ import annotations

"""
Host Surface Abstractions.

Defines the interfaces the styling core consumes from its host: a document
that can own a style resource and expose path-marked elements, and a
workspace that reports the open items and delivers change notifications.
Concrete hosts live in 'rainbowtree.infra'; tests inject their own.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional

Unsubscribe = Callable[[], None]


class StyleResource(ABC):
    """
    Handle to the single style sheet owned by the controller.
    """

    @property
    @abstractmethod
    def text(self) -> str:
        pass

    @text.setter
    @abstractmethod
    def text(self, value: str) -> None:
        pass

    @property
    @abstractmethod
    def attached(self) -> bool:
        """Whether the resource is still part of its document."""
        pass

    @abstractmethod
    def remove(self) -> None:
        """Detach the resource from its document. Safe to call twice."""
        pass


class PathElement(ABC):
    """
    Element of the rendered hierarchy carrying an identifying path marker.
    """

    @property
    @abstractmethod
    def path(self) -> Optional[str]:
        pass

    @abstractmethod
    def toggle_class(self, name: str, force: bool) -> None:
        """Add the class when force is True, remove it otherwise."""
        pass

    @abstractmethod
    def has_class(self, name: str) -> bool:
        pass


class DocumentSurface(ABC):
    """
    Live element surface the styling core writes to.
    """

    @abstractmethod
    def attach_style(self, resource_id: str) -> StyleResource:
        """
        Create an empty style resource and attach it to the document.

        Args:
            resource_id: Identifier of the resource within the document.

        Returns:
            StyleResource: Handle owned by the caller.
        """
        pass

    @abstractmethod
    def toggle_root_class(self, name: str, force: bool) -> None:
        pass

    @abstractmethod
    def has_root_class(self, name: str) -> bool:
        pass

    @abstractmethod
    def query_path_elements(self) -> Iterable[PathElement]:
        """Enumerate every element that carries a path marker."""
        pass


class EventSource(ABC):
    """
    Anything able to deliver named event notifications.
    """

    @abstractmethod
    def subscribe(self, event: str, callback: Callable[..., Any]) -> Unsubscribe:
        """
        Register a callback for an event.

        Returns:
            Unsubscribe: Callable removing the registration.
        """
        pass


class Workspace(EventSource):
    """
    Host workspace: knows which leaf items are currently open.
    """

    @abstractmethod
    def get_open_paths(self) -> List[str]:
        pass
