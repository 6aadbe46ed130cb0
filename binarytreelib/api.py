"""High-level API for BinaryTreeLib.

This module provides simple, functional interfaces for common tasks:
building a tree, walking it in a chosen order, and formatting the result.
These functions wrap the object-oriented API for ease of use in simple cases.
"""

import logging
import sys
from itertools import islice
from typing import Any, Dict, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from .config import TraversalConfig, TraversalOrder
from .core.iterator import TreeIterator
from .core.tree import BinaryTree
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def build_tree(values: Iterable[Any]) -> BinaryTree:
    """Create a binary search tree from values, in insertion order.

    Example:
        >>> tree = build_tree([50, 30, 70, 20, 40, 60, 80])
        >>> list(tree)
        [20, 30, 40, 50, 60, 70, 80]
    """
    tree = BinaryTree()
    added = tree.insert_all(values)
    logger.debug("Built tree with %d node(s)", added)
    return tree


def traverse(
    tree: BinaryTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    limit: Optional[int] = None,
) -> Iterator[Any]:
    """Simple interface for walking a tree.

    Args:
        tree: Tree to traverse
        order: Traversal order (in_order, pre_order, post_order, level_order)
        limit: Maximum number of values to yield (None = all)

    Yields:
        Values in the requested order

    Raises:
        ConfigurationError: If ``limit`` is invalid
        ValueError: If ``order`` is not a known traversal order

    Example:
        >>> tree = build_tree([2, 1, 3])
        >>> list(traverse(tree, "level_order"))
        [2, 1, 3]
    """
    config = TraversalConfig(order=order, limit=limit)
    _check_config(config)

    iterator = tree.iterator(config.order)
    yield from islice(iterator, config.limit)


def collect_values(
    tree: BinaryTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> List[Any]:
    """Return every value of the tree as a list in the requested order."""
    return list(traverse(tree, order))


def format_traversal(label: str, iterator: Iterable[Any], separator: str = " -> ") -> str:
    """Drain an iterator into a one-line report.

    Args:
        label: Prefix naming the traversal
        iterator: Iterator (or iterable) of values; consumed completely
        separator: Text placed between values

    Returns:
        ``"label: v1 -> v2 -> ..."``; ``"label: "`` when there are no values
    """
    config = TraversalConfig(separator=separator)
    _check_config(config)
    return f"{label}: " + config.separator.join(str(value) for value in iterator)


def print_traversal(
    label: str,
    iterator: Iterable[Any],
    separator: str = " -> ",
    file: Optional[TextIO] = None,
) -> None:
    """Print the result of ``format_traversal`` to ``file`` (stdout by default)."""
    print(format_traversal(label, iterator, separator), file=file or sys.stdout)


def interleave(*iterators: TreeIterator) -> Iterator[Tuple[Optional[Any], ...]]:
    """Advance several iterators in lock step.

    Each row holds one value per iterator, or None for an iterator that
    has already run out. Stops once every iterator is exhausted.

    Example:
        >>> tree = build_tree([2, 1, 3])
        >>> list(interleave(tree.in_order_iterator(), tree.pre_order_iterator()))
        [(1, 2), (2, 1), (3, 3)]
    """
    while any(it.has_next() for it in iterators):
        yield tuple(next(it) if it.has_next() else None for it in iterators)


def get_tree_stats(tree: BinaryTree) -> Dict[str, Any]:
    """Get summary statistics about a tree.

    Returns:
        Dictionary with node_count, height, leaf_count, min and max.
        min and max are None for an empty tree.
    """
    values = list(tree.in_order_iterator())
    leaf_count = 0
    if tree.root is not None:
        stack = [tree.root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                leaf_count += 1
            stack.extend(node.children())

    return {
        'node_count': len(values),
        'height': tree.height(),
        'leaf_count': leaf_count,
        'min': min(values) if values else None,
        'max': max(values) if values else None,
    }


def _check_config(config: TraversalConfig) -> None:
    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
