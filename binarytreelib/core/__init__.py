"""Core abstractions for BinaryTreeLib.

This module contains the node, the traversal iterator family and the
binary search tree container that creates them.
"""

from .node import TreeNode
from .iterator import (
    TreeIterator,
    InOrderIterator,
    PreOrderIterator,
    PostOrderIterator,
    LevelOrderIterator,
    create_iterator,
)
from .tree import BinaryTree

__all__ = [
    "TreeNode",
    "TreeIterator",
    "InOrderIterator",
    "PreOrderIterator",
    "PostOrderIterator",
    "LevelOrderIterator",
    "create_iterator",
    "BinaryTree",
]
