from __future__ import annotations

"""
In-Memory HTML Document Host.

Implements the document surface over a small element tree mirroring a
file-explorer layout: folders and files carry a 'data-path' marker, folder
contents sit in a children container. The document can be serialized to a
standalone HTML page that embeds the host base styles and every attached
style resource.
"""

import html
from typing import Dict, Iterator, List, Optional

from rainbowtree.core.surface import DocumentSurface, PathElement, StyleResource
from rainbowtree.domain import constants as const
from rainbowtree.domain.tree_models import FileNode, Tree

# Layout and focus-mode dimming supplied by the host; depth colors come
# from the generated style resource.
HOST_BASE_CSS = f"""
body {{
    font-family: system-ui, sans-serif;
    font-size: 14px;
}}
.{const.TITLE_CLASS} {{
    padding: 2px 6px;
}}
.{const.CHILDREN_CONTAINER_CLASS} {{
    position: relative;
    padding-left: 16px;
}}
.{const.CHILDREN_CONTAINER_CLASS}::before {{
    content: "";
    position: absolute;
    top: 0;
    bottom: 0;
    left: 8px;
}}
body.{const.FOCUS_MODE_CLASS} [{const.PATH_ATTRIBUTE}]:not(.{const.FOCUSED_CLASS}) > .{const.TITLE_CLASS} {{
    color: var({const.UNFOCUSED_COLOR_PROPERTY});
}}
"""


# -----------------------------------------------------------------------------
# ELEMENT MODEL
# -----------------------------------------------------------------------------

class HtmlElement(PathElement):
    """
    Minimal element: tag, attributes, ordered class list, text and children.
    """

    def __init__(
            self,
            tag: str,
            classes: Optional[List[str]] = None,
            attrs: Optional[Dict[str, str]] = None,
            text: str = "",
    ) -> None:
        self.tag = tag
        self.classes: List[str] = list(classes or [])
        self.attrs: Dict[str, str] = dict(attrs or {})
        self.text = text
        self.children: List[HtmlElement] = []

    @property
    def path(self) -> Optional[str]:
        return self.attrs.get(const.PATH_ATTRIBUTE)

    def toggle_class(self, name: str, force: bool) -> None:
        if force and name not in self.classes:
            self.classes.append(name)
        elif not force and name in self.classes:
            self.classes.remove(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def append(self, child: HtmlElement) -> HtmlElement:
        self.children.append(child)
        return child

    def iter(self) -> Iterator[HtmlElement]:
        """Depth-first traversal including this element."""
        yield self
        for child in self.children:
            yield from child.iter()

    def render(self, indent: int = 0) -> str:
        pad = "  " * indent
        attrs = dict(self.attrs)
        if self.classes:
            attrs = {"class": " ".join(self.classes), **attrs}
        attr_text = "".join(f' {k}="{html.escape(v, quote=True)}"' for k, v in attrs.items())
        open_tag = f"{pad}<{self.tag}{attr_text}>"

        if not self.children:
            return f"{open_tag}{html.escape(self.text)}</{self.tag}>"

        lines = [open_tag + html.escape(self.text)]
        lines.extend(child.render(indent + 1) for child in self.children)
        lines.append(f"{pad}</{self.tag}>")
        return "\n".join(lines)


class HtmlStyleResource(StyleResource):
    """
    A <style> element owned by exactly one controller.
    """

    def __init__(self, document: HtmlDocument, resource_id: str) -> None:
        self._document = document
        self.resource_id = resource_id
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value

    @property
    def attached(self) -> bool:
        return self in self._document.styles

    def remove(self) -> None:
        if self.attached:
            self._document.styles.remove(self)


# -----------------------------------------------------------------------------
# DOCUMENT
# -----------------------------------------------------------------------------

class HtmlDocument(DocumentSurface):
    """
    Document surface backed by an in-memory element tree.
    """

    def __init__(self, title: str = const.APP_NAME) -> None:
        self.title = title
        self.body = HtmlElement("body")
        self.styles: List[HtmlStyleResource] = []

    @classmethod
    def from_tree(cls, tree: Tree, title: str = const.APP_NAME) -> HtmlDocument:
        """
        Build an explorer-like document from a directory Tree.

        Args:
            tree: Nested Tree model; folder paths are derived from the keys.
            title: Page title.

        Returns:
            HtmlDocument: Document with one element per folder and file.
        """
        doc = cls(title=title)
        container = doc.body.append(HtmlElement("div", ["tree-root"]))
        _append_entries(container, tree, "")
        return doc

    # --- DocumentSurface ---

    def attach_style(self, resource_id: str) -> HtmlStyleResource:
        resource = HtmlStyleResource(self, resource_id)
        self.styles.append(resource)
        return resource

    def toggle_root_class(self, name: str, force: bool) -> None:
        self.body.toggle_class(name, force)

    def has_root_class(self, name: str) -> bool:
        return self.body.has_class(name)

    def query_path_elements(self) -> List[HtmlElement]:
        return [el for el in self.body.iter() if el.path is not None]

    # --- Lookup & Serialization ---

    def find_by_path(self, path: str) -> Optional[HtmlElement]:
        for el in self.body.iter():
            if el.path == path:
                return el
        return None

    def to_html(self) -> str:
        """Serialize the document into a standalone HTML page."""
        head = [
            "<head>",
            '  <meta charset="utf-8">',
            f"  <title>{html.escape(self.title)}</title>",
            f"  <style>{HOST_BASE_CSS}</style>",
        ]
        for style in self.styles:
            head.append(f'  <style id="{html.escape(style.resource_id, quote=True)}">\n{style.text}</style>')
        head.append("</head>")

        return "\n".join(["<!DOCTYPE html>", "<html>", *head, self.body.render(), "</html>"]) + "\n"


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _append_entries(container: HtmlElement, tree: Tree, parent_path: str) -> None:
    """Folders first, then files, each group in name order."""
    folders = sorted(k for k, v in tree.items() if isinstance(v, dict))
    files = sorted(k for k, v in tree.items() if not isinstance(v, dict))

    for name in folders:
        path = f"{parent_path}{const.PATH_SEPARATOR}{name}" if parent_path else name
        folder = container.append(
            HtmlElement("div", [const.FOLDER_CLASS], {const.PATH_ATTRIBUTE: path})
        )
        folder.append(HtmlElement("div", [const.TITLE_CLASS], text=name))
        children = folder.append(HtmlElement("div", [const.CHILDREN_CONTAINER_CLASS]))
        subtree = tree[name]
        if isinstance(subtree, dict):
            _append_entries(children, subtree, path)

    for name in files:
        node = tree[name]
        if isinstance(node, FileNode):
            path = node.path
        else:
            path = f"{parent_path}{const.PATH_SEPARATOR}{name}" if parent_path else name
        leaf = container.append(
            HtmlElement("div", [const.FILE_CLASS], {const.PATH_ATTRIBUTE: path})
        )
        leaf.append(HtmlElement("div", [const.TITLE_CLASS], text=name))
