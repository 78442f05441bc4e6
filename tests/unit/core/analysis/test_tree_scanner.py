from __future__ import annotations

"""
Unit tests for the Directory Tree Scanner.
"""

import pytest

from rainbowtree.core.analysis.filters import compile_patterns, matches_any
from rainbowtree.core.analysis.tree_generator import count_entries, scan_directory
from rainbowtree.domain.tree_models import FileNode


@pytest.fixture
def project_structure(tmp_path):
    """
    /root
      /src
        /pkg
          core.py
        main.py
      /docs
      /__pycache__
        main.cpython.pyc
      .hidden
      README.md
    """
    root = tmp_path / "root"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "pkg" / "core.py").write_text("x = 1", encoding="utf-8")
    (root / "src" / "main.py").write_text("print()", encoding="utf-8")
    (root / "docs").mkdir()
    (root / "__pycache__").mkdir()
    (root / "__pycache__" / "main.cpython.pyc").write_bytes(b"\x00")
    (root / ".hidden").write_text("", encoding="utf-8")
    (root / "README.md").write_text("# Docs", encoding="utf-8")
    return root


def test_scan_builds_nested_tree(project_structure) -> None:
    tree = scan_directory(str(project_structure))

    assert set(tree) == {"src", "docs", "README.md"}
    assert tree["src"]["pkg"]["core.py"] == FileNode("src/pkg/core.py")
    assert tree["src"]["main.py"] == FileNode("src/main.py")
    assert tree["docs"] == {}
    assert count_entries(tree) == 6


def test_custom_exclusions_replace_defaults(project_structure) -> None:
    tree = scan_directory(str(project_structure), exclude_patterns=[r"^src$"])

    assert "src" not in tree
    assert "__pycache__" in tree
    assert ".hidden" in tree


def test_gitignore_rules_are_honored(project_structure) -> None:
    (project_structure / ".gitignore").write_text("# comment\ndocs/\n*.md\n", encoding="utf-8")

    tree = scan_directory(str(project_structure), respect_gitignore=True)

    assert "docs" not in tree
    assert "README.md" not in tree
    assert "src" in tree


def test_invalid_patterns_are_discarded() -> None:
    compiled = compile_patterns(["(unclosed", r"^ok$"])
    assert len(compiled) == 1
    assert matches_any("ok", compiled)
