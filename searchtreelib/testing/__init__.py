"""Testing utilities for SearchTreeLib consumers."""

from .fixtures import sample_tree, check_bst_invariant, assert_bst_invariant

__all__ = ['sample_tree', 'check_bst_invariant', 'assert_bst_invariant']
