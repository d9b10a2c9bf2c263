"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from .config import DepthConfig, TraversalConfig, TraversalOrder
from .core.tree import BinarySearchTree
from .core.traverser import create_traverser


def build_tree(values: Iterable[Any]) -> BinarySearchTree:
    """Build a search tree from values, inserted in iteration order.

    Example:
        >>> tree = build_tree([5, 3, 8])
        >>> list(tree)
        [3, 5, 8]
    """
    return BinarySearchTree.from_iterable(values)


def traverse_tree(
    tree: BinarySearchTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    config: Optional[TraversalConfig] = None,
    with_depth: bool = False,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        order: Visiting order (pre_order, in_order, post_order, level_order)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding values
        config: Full configuration; overrides order and depth arguments
        with_depth: Yield (value, depth) tuples instead of bare values

    Returns:
        Lazy iterator over the visited values

    Raises:
        ValueError: If the configuration is invalid or the order is unknown

    Example:
        >>> tree = build_tree([5, 3, 8])
        >>> list(traverse_tree(tree, order="pre_order"))
        [5, 3, 8]
    """
    if config is None:
        if isinstance(order, str):
            traverser = create_traverser(order)
            order = traverser.order
        config = TraversalConfig(
            order=order,
            depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        )

    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    walk = tree.traverse(
        config.order,
        max_depth=config.depth.max_depth,
        min_depth=config.depth.min_depth,
    )
    if with_depth:
        return walk
    return (value for value, _ in walk)


def count_nodes(tree: BinarySearchTree) -> int:
    """Count the values stored in a tree."""
    return len(tree)


def get_leaf_values(tree: BinarySearchTree) -> List[Any]:
    """Return the values held by leaf nodes, in ascending order."""
    leaves = []
    stack = [tree]
    # Leaves are reached left to right, i.e. in ascending order
    while stack:
        node = stack.pop()
        if node.is_empty():
            continue
        if node.is_leaf():
            leaves.append(node.get_data())
            continue
        stack.append(node.get_right())
        stack.append(node.get_left())
    return leaves


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get summary statistics about a tree.

    Returns:
        Dictionary with size, height, leaves, min and max. min and max are
        None for an empty tree.
    """
    empty = tree.is_empty()
    return {
        'size': len(tree),
        'height': tree.height(),
        'leaves': len(get_leaf_values(tree)),
        'min': None if empty else tree.get_min(),
        'max': None if empty else tree.get_max(),
    }
