"""Test fixtures for SearchTreeLib consumers.

These helpers give test suites a known tree to start from and a way to
verify the search invariant without reaching into tree internals.
"""

from typing import Any, List, Optional, Tuple

from ..core.tree import BinarySearchTree

SAMPLE_VALUES = (5, 3, 8, 1, 4, 7, 9)


def sample_tree() -> BinarySearchTree:
    """Return the tree built by inserting 5, 3, 8, 1, 4, 7, 9.

    Structure:
            5
          /   \\
         3     8
        / \\   / \\
       1   4 7   9
    """
    return BinarySearchTree.from_iterable(SAMPLE_VALUES)


def check_bst_invariant(tree: BinarySearchTree) -> List[str]:
    """Check that every node respects the search ordering.

    Each node is checked against the open interval inherited from its
    ancestors, which also catches duplicates.

    Args:
        tree: Tree to verify

    Returns:
        List of violation descriptions (empty if valid)
    """
    violations = []
    # Entries are (subtree, lower bound, upper bound); None means unbounded
    pending: List[Tuple[BinarySearchTree, Optional[Any], Optional[Any]]] = [
        (tree, None, None)
    ]

    while pending:
        node, low, high = pending.pop()
        if node.is_empty():
            continue

        value = node.get_data()
        if low is not None and not low < value:
            violations.append(f"{value!r} is not greater than ancestor {low!r}")
        if high is not None and not value < high:
            violations.append(f"{value!r} is not less than ancestor {high!r}")

        pending.append((node.get_left(), low, value))
        pending.append((node.get_right(), value, high))

    return violations


def assert_bst_invariant(tree: BinarySearchTree) -> None:
    """Raise AssertionError listing every violation of the search ordering."""
    violations = check_bst_invariant(tree)
    if violations:
        raise AssertionError(
            f"Search tree invariant violated: {'; '.join(violations)}"
        )
