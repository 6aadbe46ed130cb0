"""Shared fixtures for the BinaryTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from binarytreelib import BinaryTree, TreeNode, build_tree

# Tree used throughout the suite:
#
#          50
#        /    \
#      30      70
#     /  \    /  \
#   20   40  60   80
SAMPLE_VALUES = [50, 30, 70, 20, 40, 60, 80]

EXPECTED = {
    'in_order': [20, 30, 40, 50, 60, 70, 80],
    'pre_order': [50, 30, 20, 40, 70, 60, 80],
    'post_order': [20, 40, 30, 60, 80, 70, 50],
    'level_order': [50, 30, 70, 20, 40, 60, 80],
}


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")


@pytest.fixture
def sample_tree() -> BinaryTree:
    return build_tree(SAMPLE_VALUES)


@pytest.fixture
def custom_tree() -> BinaryTree:
    """Hand-built complete tree 1..7, not in search order."""
    root = TreeNode(1,
                    TreeNode(2, TreeNode(4), TreeNode(5)),
                    TreeNode(3, TreeNode(6), TreeNode(7)))
    return BinaryTree(root)


@pytest.fixture
def expected():
    """Expected value sequences for ``sample_tree``, keyed by order name."""
    return {order: list(values) for order, values in EXPECTED.items()}


@pytest.fixture
def sample_values():
    return list(SAMPLE_VALUES)
