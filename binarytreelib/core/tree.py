"""BinaryTree container for BinaryTreeLib.

The tree owns the node graph and hands out traversal iterators. It never
shares a cursor with them: each factory call builds a fresh iterator that
keeps its own stack or queue.
"""

import logging
from collections import deque
from typing import Any, Iterable, Iterator, List, Optional, Union

from .node import TreeNode
from .iterator import (
    TreeIterator,
    InOrderIterator,
    PreOrderIterator,
    PostOrderIterator,
    LevelOrderIterator,
    create_iterator,
)
from ..config import TraversalOrder

logger = logging.getLogger(__name__)


class BinaryTree:
    """Binary search tree with insertion and traversal iterator factories.

    Trees built through ``insert`` keep the binary-search-tree invariant:
    every key in a left subtree is strictly smaller than its ancestor,
    every key in a right subtree strictly larger. Duplicates are dropped.

    A tree may also wrap a hand-assembled node graph passed as ``root``;
    such a graph is traversed as-is and need not be ordered. ``insert``,
    ``__contains__`` and ``depth_of`` assume BST order.

    Example:
        >>> tree = BinaryTree()
        >>> tree.insert_all([50, 30, 70])
        3
        >>> list(tree.pre_order_iterator())
        [50, 30, 70]
    """

    def __init__(self, root: Optional[TreeNode] = None):
        self._root = root

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    @root.setter
    def root(self, node: Optional[TreeNode]) -> None:
        self._root = node

    def is_empty(self) -> bool:
        return self._root is None

    def insert(self, value: Any) -> bool:
        """Insert a value using standard BST comparison.

        Never rebalances. Equal values are silently ignored.

        Args:
            value: Value to insert; must be comparable with existing values

        Returns:
            True if a node was added, False if the value was already present
        """
        if self._root is None:
            self._root = TreeNode(value)
            return True

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return True
                node = node.right
            else:
                logger.debug("Ignoring duplicate value %r", value)
                return False

    def insert_all(self, values: Iterable[Any]) -> int:
        """Insert each value in order.

        Returns:
            Number of nodes actually added (duplicates excluded)
        """
        return sum(1 for value in values if self.insert(value))

    # Iterator factories

    def in_order_iterator(self) -> InOrderIterator:
        return InOrderIterator(self._root)

    def pre_order_iterator(self) -> PreOrderIterator:
        return PreOrderIterator(self._root)

    def post_order_iterator(self) -> PostOrderIterator:
        return PostOrderIterator(self._root)

    def level_order_iterator(self) -> LevelOrderIterator:
        return LevelOrderIterator(self._root)

    def iterator(self, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> TreeIterator:
        """Create an iterator for the given traversal order.

        Args:
            order: TraversalOrder or its name

        Returns:
            Fresh, independent TreeIterator over the current tree shape
        """
        return create_iterator(order, self._root)

    def __iter__(self) -> Iterator[Any]:
        return self.in_order_iterator()

    # Structural queries

    def __len__(self) -> int:
        return sum(1 for _ in self.pre_order_iterator())

    def __contains__(self, value: Any) -> bool:
        return self.depth_of(value) is not None

    def depth_of(self, value: Any) -> Optional[int]:
        """Find the depth of a value by BST search.

        Returns:
            Depth where root = 0, or None if the value is absent
        """
        node = self._root
        depth = 0
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return depth
            depth += 1
        return None

    def levels(self) -> List[List[Any]]:
        """Group values by depth, each level left to right.

        Returns:
            One list of values per depth, root level first
        """
        result: List[List[Any]] = []
        current = deque([self._root]) if self._root is not None else deque()

        while current:
            result.append([node.value for node in current])
            next_level: deque = deque()
            for node in current:
                next_level.extend(node.children())
            current = next_level

        return result

    def height(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        return len(self.levels())

    def __repr__(self) -> str:
        root = self._root.value if self._root is not None else None
        return f"{self.__class__.__name__}(root={root!r})"
