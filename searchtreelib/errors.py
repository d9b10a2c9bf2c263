"""Error taxonomy for SearchTreeLib.

Lookups (``has_value``, ``get_value``) never raise: a missing value is a
normal outcome. Operations that need something to act on raise one of the
errors below instead of silently doing nothing.
"""

from typing import Any, Optional


class BSTError(Exception):
    """Base class for all search tree errors."""
    pass


class UnfoundValueError(BSTError):
    """Raised when a value expected to be in the tree is not present.

    Attributes:
        reason: Human readable explanation of what was looked for
        value: The value that could not be found
    """

    def __init__(self, reason: str, value: Optional[Any] = None):
        super().__init__(reason)
        self.reason = reason
        self.value = value


class EmptyTreeError(BSTError):
    """Raised when an operation needs a non-empty tree."""

    def __init__(self, message: str = "BST Tree is empty"):
        super().__init__(message)
