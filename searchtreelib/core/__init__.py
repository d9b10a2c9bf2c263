"""Core tree structure and traversal strategies."""

from .tree import BinarySearchTree
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    'BinarySearchTree',
    'TreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
]
