"""Unit tests for the exception hierarchy."""

import pytest

from binarytreelib import (
    BinaryTreeError,
    ConfigurationError,
    IteratorExhaustedError,
    UnsupportedOperationError,
)


@pytest.mark.parametrize("error_class, builtin", [
    (IteratorExhaustedError, StopIteration),
    (UnsupportedOperationError, NotImplementedError),
    (ConfigurationError, ValueError),
])
def test_errors_share_library_base_and_builtin(error_class, builtin):
    """Every error is catchable as the library base and as its built-in category."""
    assert issubclass(error_class, BinaryTreeError)
    assert issubclass(error_class, builtin)

    with pytest.raises(builtin):
        raise error_class("boom")


def test_exhausted_error_keeps_message():
    error = IteratorExhaustedError("No more elements in in-order traversal")
    assert str(error) == "No more elements in in-order traversal"
