"""BinaryTreeLib - Binary Search Tree Traversal Iterators.

BinaryTreeLib provides a binary search tree container and four traversal
iterators (in-order, pre-order, post-order, level-order). Each iterator
keeps its own explicit stack or queue, so traversals can be paused after
any element and any number of them can run over one tree at once.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from binarytreelib import build_tree, traverse

    tree = build_tree([50, 30, 70, 20, 40, 60, 80])
    list(traverse(tree, "pre_order"))   # [50, 30, 20, 40, 70, 60, 80]
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import TreeNode
from .core.tree import BinaryTree
from .core.iterator import (
    TreeIterator,
    InOrderIterator,
    PreOrderIterator,
    PostOrderIterator,
    LevelOrderIterator,
    create_iterator,
)

# Configuration and errors
from .config import TraversalConfig, TraversalOrder
from .errors import (
    BinaryTreeError,
    IteratorExhaustedError,
    UnsupportedOperationError,
    ConfigurationError,
)

# High-level API
from .api import (
    build_tree,
    traverse,
    collect_values,
    format_traversal,
    print_traversal,
    interleave,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'TreeNode',
    'BinaryTree',
    'TreeIterator',
    'InOrderIterator',
    'PreOrderIterator',
    'PostOrderIterator',
    'LevelOrderIterator',
    'create_iterator',
    # Config and errors
    'TraversalConfig',
    'TraversalOrder',
    'BinaryTreeError',
    'IteratorExhaustedError',
    'UnsupportedOperationError',
    'ConfigurationError',
    # API
    'build_tree',
    'traverse',
    'collect_values',
    'format_traversal',
    'print_traversal',
    'interleave',
    'get_tree_stats',
]
