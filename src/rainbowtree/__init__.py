from __future__ import annotations

"""
RainbowTree: depth-colored connector lines and active-path focus for file trees.
"""

from rainbowtree.domain.constants import CURRENT_CONFIG_VERSION

__version__ = CURRENT_CONFIG_VERSION
