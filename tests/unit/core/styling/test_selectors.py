from __future__ import annotations

"""
Unit tests for the nesting selector helper.
"""

import pytest

from rainbowtree.core.styling.selectors import nesting_selector


def test_depth_zero_is_base_selector() -> None:
    assert nesting_selector(0) == ".tree-folder-children"


def test_each_level_prefixes_one_fragment() -> None:
    assert nesting_selector(1) == ".tree-folder-children .tree-folder-children"
    assert nesting_selector(3).count(".tree-folder-children") == 4


def test_custom_container_class() -> None:
    assert nesting_selector(2, "nav-folder-children") == (
        ".nav-folder-children .nav-folder-children .nav-folder-children"
    )


def test_negative_depth_rejected() -> None:
    with pytest.raises(ValueError):
        nesting_selector(-1)
