from __future__ import annotations

"""
Nesting selector construction.
"""

from rainbowtree.domain.constants import CHILDREN_CONTAINER_CLASS


def nesting_selector(depth: int, container_class: str = CHILDREN_CONTAINER_CLASS) -> str:
    """
    Build the selector matching a children container nested 'depth' levels deep.

    Depth 0 is the base container selector; every extra level prefixes one
    more descendant container fragment.

    Args:
        depth: Nesting level, 0 for the root's direct children.
        container_class: CSS class of a children container.

    Returns:
        str: The selector, e.g. '.c .c .c' for depth 2.
    """
    if depth < 0:
        raise ValueError(f"Nesting depth must be >= 0, got {depth}.")
    fragment = f".{container_class}"
    return f"{fragment} " * depth + fragment
