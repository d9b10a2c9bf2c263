#!/usr/bin/env python3
"""
Basic example showing how to build, query and walk a search tree.

This example demonstrates:
- Building a tree from values
- Lookup and deletion, including the error raised for missing values
- Each traversal order, with and without depth limits
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import (
    UnfoundValueError,
    build_tree,
    get_tree_stats,
    traverse_tree,
)


def main():
    """Demonstrate basic tree usage."""
    # Pass --debug to see which deletion case is applied
    if "--debug" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = build_tree([5, 3, 8, 1, 4, 7, 9])
    print(f"Tree: {tree}")
    print("-" * 50)

    for order in ("pre_order", "in_order", "post_order", "level_order"):
        values = ", ".join(str(v) for v in traverse_tree(tree, order=order))
        print(f"  {order:<12} {values}")

    print("\nTop two levels:")
    for value, depth in traverse_tree(tree, order="level", max_depth=1, with_depth=True):
        print(f"  {'  ' * depth}{value}")

    print(f"\nContains 4? {4 in tree}")
    tree.delete(5)
    print(f"After deleting 5: root={tree.get_data()}, values={list(tree)}")

    try:
        tree.delete(42)
    except UnfoundValueError as e:
        print(f"Delete failed: {e.reason}")

    print(f"\nStats: {get_tree_stats(tree)}")


if __name__ == "__main__":
    main()
