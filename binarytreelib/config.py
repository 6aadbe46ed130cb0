"""Configuration system for BinaryTreeLib.

This module defines how users pick a traversal order and shape the
output of the high-level API.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

logger = logging.getLogger(__name__)


class TraversalOrder(Enum):
    """Order in which a traversal iterator yields values."""
    IN_ORDER = "in_order"          # Left, node, right (ascending for a BST)
    PRE_ORDER = "pre_order"        # Node before children
    POST_ORDER = "post_order"      # Children before node
    LEVEL_ORDER = "level_order"    # Breadth-first, level by level

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``In-Order``."""
        return "-".join(part.capitalize() for part in self.value.split("_"))

    @classmethod
    def parse(cls, order: Union['TraversalOrder', str]) -> 'TraversalOrder':
        """Convert an enum member, value, name or alias into a TraversalOrder.

        Args:
            order: TraversalOrder instance or a string such as ``"in_order"``,
                ``"PRE_ORDER"``, ``"bfs"`` or ``"dfs_post"``

        Returns:
            Matching TraversalOrder

        Raises:
            ValueError: If the name is not recognized
        """
        if isinstance(order, cls):
            return order

        key = str(order).strip().lower().replace("-", "_")
        if key not in _ORDER_ALIASES:
            raise ValueError(
                f"Unknown traversal order: {order}. "
                f"Choose from: {', '.join(sorted(_ORDER_ALIASES))}"
            )
        return _ORDER_ALIASES[key]


_ORDER_ALIASES = {
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'sorted': TraversalOrder.IN_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'dfs_pre': TraversalOrder.PRE_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'dfs_post': TraversalOrder.POST_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'levelorder': TraversalOrder.LEVEL_ORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
}


@dataclass
class TraversalConfig:
    """Configuration for a high-level traversal.

    The API functions build one of these from their keyword arguments and
    validate it before creating an iterator.
    """

    order: TraversalOrder = TraversalOrder.IN_ORDER
    limit: Optional[int] = None     # Max values to yield (None = all)
    separator: str = " -> "         # Used when formatting a traversal

    def __post_init__(self):
        self.order = TraversalOrder.parse(self.order)

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Config yielding every value in ascending order."""
        return cls(order=TraversalOrder.IN_ORDER)

    @classmethod
    def breadth_first(cls, limit: Optional[int] = None) -> 'TraversalConfig':
        """Config for a level-order walk, optionally cut off after ``limit`` values.

        Args:
            limit: Maximum number of values to yield

        Returns:
            TraversalConfig for breadth-first traversal
        """
        return cls(order=TraversalOrder.LEVEL_ORDER, limit=limit)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                errors.append("limit must be an integer or None")
            elif self.limit < 0:
                errors.append("limit cannot be negative")

        if not isinstance(self.separator, str) or not self.separator:
            errors.append("separator must be a non-empty string")

        logger.debug("Validated %r: %d problem(s)", self, len(errors))
        return errors
