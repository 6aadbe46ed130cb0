"""Exception hierarchy for BinaryTreeLib.

Each library error also derives from the built-in exception a caller would
expect for that situation, so ``except StopIteration`` or
``except NotImplementedError`` keep working.
"""


class BinaryTreeError(Exception):
    """Base class for all BinaryTreeLib errors."""
    pass


class IteratorExhaustedError(BinaryTreeError, StopIteration):
    """Raised when ``next()`` is called on an iterator with no elements left.

    This is a caller-contract violation, recoverable by checking
    ``has_next()`` first. Being a StopIteration, it also ends ``for`` loops.
    """
    pass


class UnsupportedOperationError(BinaryTreeError, NotImplementedError):
    """Raised by operations the traversal iterators deliberately lack."""
    pass


class ConfigurationError(BinaryTreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass
