"""Unit tests for TraversalOrder and TraversalConfig."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from binarytreelib import TraversalConfig, TraversalOrder


class TestTraversalOrder(unittest.TestCase):
    """Test order parsing and labels."""

    def test_parse_accepts_members_values_names_and_aliases(self):
        self.assertIs(TraversalOrder.parse(TraversalOrder.IN_ORDER), TraversalOrder.IN_ORDER)
        self.assertIs(TraversalOrder.parse("pre_order"), TraversalOrder.PRE_ORDER)
        self.assertIs(TraversalOrder.parse("POST_ORDER"), TraversalOrder.POST_ORDER)
        self.assertIs(TraversalOrder.parse(" Level-Order "), TraversalOrder.LEVEL_ORDER)
        self.assertIs(TraversalOrder.parse("bfs"), TraversalOrder.LEVEL_ORDER)
        self.assertIs(TraversalOrder.parse("breadth_first"), TraversalOrder.LEVEL_ORDER)
        self.assertIs(TraversalOrder.parse("sorted"), TraversalOrder.IN_ORDER)

    def test_parse_unknown(self):
        with self.assertRaises(ValueError) as ctx:
            TraversalOrder.parse("spiral")
        self.assertIn("Unknown traversal order: spiral", str(ctx.exception))
        self.assertIn("in_order", str(ctx.exception))

    def test_labels(self):
        self.assertEqual(TraversalOrder.IN_ORDER.label, "In-Order")
        self.assertEqual(TraversalOrder.PRE_ORDER.label, "Pre-Order")
        self.assertEqual(TraversalOrder.POST_ORDER.label, "Post-Order")
        self.assertEqual(TraversalOrder.LEVEL_ORDER.label, "Level-Order")


class TestTraversalConfig(unittest.TestCase):
    """Test configuration defaults, constructors and validation."""

    def test_defaults(self):
        config = TraversalConfig()
        self.assertIs(config.order, TraversalOrder.IN_ORDER)
        self.assertIsNone(config.limit)
        self.assertEqual(config.separator, " -> ")
        self.assertEqual(config.validate(), [])

    def test_order_string_is_normalized(self):
        self.assertIs(TraversalConfig(order="dfs_post").order, TraversalOrder.POST_ORDER)

    def test_convenience_constructors(self):
        self.assertIs(TraversalConfig.sorted_values().order, TraversalOrder.IN_ORDER)

        config = TraversalConfig.breadth_first(limit=3)
        self.assertIs(config.order, TraversalOrder.LEVEL_ORDER)
        self.assertEqual(config.limit, 3)

    def test_validate_limit(self):
        self.assertEqual(TraversalConfig(limit=0).validate(), [])
        self.assertEqual(TraversalConfig(limit=-1).validate(), ["limit cannot be negative"])
        self.assertEqual(TraversalConfig(limit=2.5).validate(),
                         ["limit must be an integer or None"])
        self.assertEqual(TraversalConfig(limit=True).validate(),
                         ["limit must be an integer or None"])

    def test_validate_separator(self):
        errors = TraversalConfig(separator="").validate()
        self.assertEqual(errors, ["separator must be a non-empty string"])

    def test_validate_collects_all_problems(self):
        errors = TraversalConfig(limit=-5, separator="").validate()
        self.assertEqual(len(errors), 2)


if __name__ == "__main__":
    unittest.main()
