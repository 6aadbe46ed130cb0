"""TreeNode for BinaryTreeLib.

The node is a plain data container: a value and two child links. The
owning BinaryTree handles insertion; iterators only read the links.
"""

from typing import Any, Iterator, Optional


class TreeNode:
    """A binary tree node holding a comparable value.

    A node is exclusively owned by its parent (or by the tree, for the
    root). There are no parent references, so the graph is always a
    strict tree.
    """

    def __init__(self,
                 value: Any,
                 left: Optional['TreeNode'] = None,
                 right: Optional['TreeNode'] = None):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['TreeNode']:
        """Yield the existing children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"
