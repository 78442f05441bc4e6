from __future__ import annotations

"""
Focus-Set Resolver.

Computes the closure of identifiers that belong to the active path: every
open leaf plus each of its proper ancestor prefixes.
"""

from typing import Iterable, Set

from rainbowtree.domain.constants import PATH_SEPARATOR


def resolve_focused_paths(open_paths: Iterable[str], separator: str = PATH_SEPARATOR) -> Set[str]:
    """
    Build the focused set for the given open items.

    'A/B/C' contributes 'A/B/C', 'A' and 'A/B'. An identifier without a
    separator contributes only itself. The result is always a new set.

    Args:
        open_paths: Identifiers of the currently open leaf items.
        separator: Segment separator of the identifiers.

    Returns:
        Set[str]: Open identifiers and all their ancestors.
    """
    focused: Set[str] = set()

    for path in open_paths:
        if path in focused:
            continue
        focused.add(path)

        segments = path.split(separator)
        current = ""
        for i, segment in enumerate(segments[:-1]):
            current = segment if i == 0 else current + separator + segment
            focused.add(current)

    return focused
