"""SearchTreeLib - Unbalanced binary search tree for Python.

SearchTreeLib provides an ordered binary search tree over any totally
ordered value type, with lazy, restartable traversals in every classic
order and an explicit error taxonomy for operations that can fail.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from searchtreelib import BinarySearchTree

    tree = BinarySearchTree.from_iterable([5, 3, 8, 1, 4, 7, 9])
    tree.delete(5)
    list(tree.in_order())   # [1, 3, 4, 7, 8, 9]
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core.tree import BinarySearchTree
from .core.traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .config import TraversalOrder, DepthConfig, TraversalConfig
from .errors import BSTError, UnfoundValueError, EmptyTreeError
from .api import (
    build_tree,
    traverse_tree,
    count_nodes,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'BinarySearchTree',
    'TreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    # Config
    'TraversalOrder',
    'DepthConfig',
    'TraversalConfig',
    # Errors
    'BSTError',
    'UnfoundValueError',
    'EmptyTreeError',
    # API
    'build_tree',
    'traverse_tree',
    'count_nodes',
    'get_leaf_values',
    'get_tree_stats',
]
