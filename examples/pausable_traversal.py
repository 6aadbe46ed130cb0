#!/usr/bin/env python3
"""
Pausable traversal example for BinaryTreeLib.

This example demonstrates:
- Building a search tree from command line values
- Pausing one traversal while another runs to completion
- Summary statistics for the tree
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from binarytreelib import build_tree, get_tree_stats, print_traversal


def main():
    """Walk a tree breadth-first in two halves around a full in-order walk."""
    values = [int(v) for v in sys.argv[1:]] or [8, 4, 12, 2, 6, 10, 14, 1, 3]
    tree = build_tree(values)

    stats = get_tree_stats(tree)
    print(f"Tree with {stats['node_count']} nodes, height {stats['height']}, "
          f"{stats['leaf_count']} leaves ({stats['min']}..{stats['max']})")
    print("-" * 50)

    levels = tree.level_order_iterator()
    first_half = [next(levels) for _ in range(stats['node_count'] // 2)]
    print(f"Level-order, paused after {len(first_half)}: {first_half}")

    print_traversal("In-order meanwhile", tree.in_order_iterator())

    print_traversal("Level-order resumed", levels)

    for depth, level in enumerate(tree.levels()):
        print(f"  depth {depth}: {level}")


if __name__ == "__main__":
    main()
