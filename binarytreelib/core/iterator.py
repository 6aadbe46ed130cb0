"""Traversal iterators for BinaryTreeLib.

Each iterator walks the node graph with an explicit stack or queue instead
of recursion, so a traversal can be paused after any element and resumed
later. Every iterator owns its cursor privately: any number of them can be
active over one tree without interfering with each other.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, List, Optional, Union

from .node import TreeNode
from ..config import TraversalOrder
from ..errors import IteratorExhaustedError, UnsupportedOperationError

logger = logging.getLogger(__name__)


class TreeIterator(ABC):
    """Abstract base class for single-pass tree traversal iterators.

    Subclasses seed their cursor from ``root`` in ``__init__`` and implement
    ``has_next`` and ``_advance``. The base class supplies the Python
    iterator protocol and the exhausted/unsupported error behaviour.

    There is no reset: ask the tree for a new iterator to start over.
    Mutating the tree while an iterator is active is undefined behaviour.
    """

    order: TraversalOrder

    def __init__(self, root: Optional[TreeNode]):
        logger.debug("Created %s (empty=%s)", self.__class__.__name__, root is None)

    @abstractmethod
    def has_next(self) -> bool:
        """Check whether another element remains. Never advances."""
        pass

    @abstractmethod
    def _advance(self) -> TreeNode:
        """Pop the next node off the cursor. Only called when has_next() is True."""
        pass

    def __iter__(self) -> 'TreeIterator':
        return self

    def __next__(self) -> Any:
        """Return the next value and advance.

        Raises:
            IteratorExhaustedError: If no elements remain
        """
        if not self.has_next():
            raise IteratorExhaustedError(
                f"No more elements in {self.order.label.lower()} traversal"
            )
        return self._advance().value

    def remove(self) -> None:
        """Removal through a traversal iterator is not supported.

        Raises:
            UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError("Remove not supported for tree traversal")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(has_next={self.has_next()})"


class InOrderIterator(TreeIterator):
    """In-order traversal (left, node, right).

    Yields ascending values for a valid binary search tree. The stack holds
    the unvisited left spine; after each pop the left spine of the popped
    node's right child is pushed.
    """

    order = TraversalOrder.IN_ORDER

    def __init__(self, root: Optional[TreeNode]):
        super().__init__(root)
        self._stack: List[TreeNode] = []
        self._push_left_spine(root)

    def _push_left_spine(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def has_next(self) -> bool:
        return bool(self._stack)

    def _advance(self) -> TreeNode:
        node = self._stack.pop()
        self._push_left_spine(node.right)
        return node


class PreOrderIterator(TreeIterator):
    """Pre-order traversal (node, left, right).

    Right is pushed before left so the LIFO stack processes left first.
    """

    order = TraversalOrder.PRE_ORDER

    def __init__(self, root: Optional[TreeNode]):
        super().__init__(root)
        self._stack: List[TreeNode] = [root] if root is not None else []

    def has_next(self) -> bool:
        return bool(self._stack)

    def _advance(self) -> TreeNode:
        node = self._stack.pop()
        if node.right is not None:
            self._stack.append(node.right)
        if node.left is not None:
            self._stack.append(node.left)
        return node


class PostOrderIterator(TreeIterator):
    """Post-order traversal (left, right, node).

    Uses the two-stack transform at construction time: nodes popped from a
    work stack are pushed onto an output stack while their children are
    pushed left then right. Draining the output stack gives post-order.
    """

    order = TraversalOrder.POST_ORDER

    def __init__(self, root: Optional[TreeNode]):
        super().__init__(root)
        self._output: List[TreeNode] = []

        work: List[TreeNode] = [root] if root is not None else []
        while work:
            node = work.pop()
            self._output.append(node)
            if node.left is not None:
                work.append(node.left)
            if node.right is not None:
                work.append(node.right)

    def has_next(self) -> bool:
        return bool(self._output)

    def _advance(self) -> TreeNode:
        return self._output.pop()


class LevelOrderIterator(TreeIterator):
    """Level-order (breadth-first) traversal.

    Visits all nodes at depth N, left to right, before any at depth N+1.
    """

    order = TraversalOrder.LEVEL_ORDER

    def __init__(self, root: Optional[TreeNode]):
        super().__init__(root)
        self._queue: Deque[TreeNode] = deque()
        if root is not None:
            self._queue.append(root)

    def has_next(self) -> bool:
        return bool(self._queue)

    def _advance(self) -> TreeNode:
        node = self._queue.popleft()
        self._queue.extend(node.children())
        return node


_ITERATORS = {
    TraversalOrder.IN_ORDER: InOrderIterator,
    TraversalOrder.PRE_ORDER: PreOrderIterator,
    TraversalOrder.POST_ORDER: PostOrderIterator,
    TraversalOrder.LEVEL_ORDER: LevelOrderIterator,
}


def create_iterator(order: Union[TraversalOrder, str], root: Optional[TreeNode]) -> TreeIterator:
    """Create a traversal iterator by order.

    Args:
        order: TraversalOrder or its name (in_order, pre_order, bfs, ...)
        root: Root of the node graph to traverse (None for an empty tree)

    Returns:
        Fresh TreeIterator positioned before the first element

    Raises:
        ValueError: If the order name is not recognized
    """
    return _ITERATORS[TraversalOrder.parse(order)](root)
