from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Puts 'src' on the import path and provides the shared configuration and
document fixtures used across the unit tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from rainbowtree.infra.document import HtmlDocument  # noqa: E402
from rainbowtree.infra.workspace import StaticWorkspace  # noqa: E402


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """A complete, valid styling configuration."""
    return {
        "colors": ["#111111", "#222222", "#333333"],
        "unfocused_color": "#777777",
        "enable_focus": True,
        "line_style": "dashed",
    }


@pytest.fixture
def sample_tree() -> Dict[str, Any]:
    """
    Tree model of:

    A/
      B/
        C.md
      D.md
    E/
    root.md
    """
    from rainbowtree.domain.tree_models import FileNode

    return {
        "A": {
            "B": {"C.md": FileNode("A/B/C.md")},
            "D.md": FileNode("A/D.md"),
        },
        "E": {},
        "root.md": FileNode("root.md"),
    }


@pytest.fixture
def sample_document(sample_tree) -> HtmlDocument:
    return HtmlDocument.from_tree(sample_tree)


@pytest.fixture
def workspace() -> StaticWorkspace:
    return StaticWorkspace()


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "gui: tests exercising the customtkinter controller layer")
