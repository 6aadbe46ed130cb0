"""
Binary Tree Iterator Demo
=========================

Builds a binary search tree and prints its traversals, then shows that
several iterators over one tree advance independently.

Usage:
    python -m binarytreelib                      # Default 11-value tree
    python -m binarytreelib --values 5 3 8 1     # Custom values
    python -m binarytreelib --order level_order  # Only one traversal
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .api import build_tree, interleave, print_traversal
from .config import TraversalOrder
from .core.node import TreeNode
from .core.tree import BinaryTree
from .errors import BinaryTreeError

logger = logging.getLogger(__name__)

DEFAULT_VALUES = [50, 30, 70, 20, 40, 60, 80, 10, 25, 35, 45]


def show_traversals(tree: BinaryTree,
                    orders: List[TraversalOrder],
                    separator: str = " -> ",
                    out: Optional[TextIO] = None) -> None:
    """Print one line per traversal order."""
    for order in orders:
        print_traversal(f"{order.label} Traversal", tree.iterator(order), separator, file=out)


def show_interleaved(tree: BinaryTree, out: Optional[TextIO] = None) -> None:
    """Print in-order and pre-order advancing side by side."""
    out = out or sys.stdout
    print("Interleaving in-order and pre-order traversals:", file=out)
    for in_value, pre_value in interleave(tree.in_order_iterator(), tree.pre_order_iterator()):
        cells = []
        if in_value is not None:
            cells.append(f"InOrder: {in_value}")
        if pre_value is not None:
            cells.append(f"PreOrder: {pre_value}")
        print(" ".join(cells), file=out)


def show_independence(tree: BinaryTree, take: int = 5, out: Optional[TextIO] = None) -> None:
    """Partially drain one iterator, fully drain another, then finish the first."""
    out = out or sys.stdout
    first = tree.in_order_iterator()
    second = tree.in_order_iterator()

    head = []
    while len(head) < take and first.has_next():
        head.append(next(first))

    print(f"First iterator (first {take} elements): " + " ".join(map(str, head)), file=out)
    print("Second iterator (all elements): " + " ".join(map(str, second)), file=out)
    print("First iterator (remaining elements): " + " ".join(map(str, first)), file=out)


def build_custom_tree() -> BinaryTree:
    """Hand-assemble the complete tree 1..7 (not a search tree)."""
    root = TreeNode(1,
                    TreeNode(2, TreeNode(4), TreeNode(5)),
                    TreeNode(3, TreeNode(6), TreeNode(7)))
    return BinaryTree(root)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Binary tree traversal iterator demo")
    parser.add_argument("--values", type=int, nargs="+", default=DEFAULT_VALUES,
                        help="Values to insert, in order")
    parser.add_argument("--order", type=TraversalOrder.parse, default=None,
                        help="Show only this traversal (in_order, pre_order, post_order, level_order)")
    parser.add_argument("--separator", default=" -> ",
                        help="Text between values")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demo and return the exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    orders = [args.order] if args.order else list(TraversalOrder)

    try:
        tree = build_tree(args.values)
        print("=== Binary Tree Iterator Demo ===")
        print(f"Binary Search Tree created with values: {args.values}")
        print()
        show_traversals(tree, orders, args.separator)

        if args.order is None:
            print()
            show_interleaved(tree)
            print()
            show_independence(tree)

            print()
            print("=== Custom Tree Example ===")
            show_traversals(build_custom_tree(), orders, args.separator)
    except BinaryTreeError as e:
        logger.error("Demo failed: %s", e)
        return 1

    return 0
