"""Tree traversal strategies for SearchTreeLib.

Traversers implement the different orders for walking a binary search
tree. Each call to ``traverse`` returns a fresh, lazy generator, so a tree
can be walked any number of times. All traversers use explicit stacks or
queues rather than recursion, so very deep trees are safe to walk.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Iterator, List, Optional, Tuple, Union

from ..config import DepthConfig, TraversalOrder

if TYPE_CHECKING:
    from .tree import BinarySearchTree


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    order: TraversalOrder

    @abstractmethod
    def traverse(self,
                 tree: 'BinarySearchTree',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from its root.

        Args:
            tree: Tree to walk (an empty tree yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding values

        Yields:
            Tuples of (value, depth) where depth is relative to the root
        """
        pass

    @staticmethod
    def _depth_config(max_depth: Optional[int], min_depth: int) -> DepthConfig:
        return DepthConfig(min_depth=min_depth, max_depth=max_depth)


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a node before its left and right subtrees. Re-inserting values
    in this order rebuilds a tree with the same shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self, tree, max_depth=None, min_depth=0):
        depth_config = self._depth_config(max_depth, min_depth)
        stack: List[Tuple['BinarySearchTree', int]] = [(tree, 0)]

        while stack:
            node, depth = stack.pop()
            if node.is_empty():
                continue

            if depth_config.should_yield(depth):
                yield (node.get_data(), depth)

            if depth_config.should_explore(depth):
                # Right first so the left subtree is popped first
                stack.append((node.get_right(), depth + 1))
                stack.append((node.get_left(), depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal.

    Visits the left subtree, then the node, then the right subtree, which
    yields the values of a search tree in ascending order.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self, tree, max_depth=None, min_depth=0):
        depth_config = self._depth_config(max_depth, min_depth)
        stack: List[Tuple['BinarySearchTree', int]] = []
        current: Optional[Tuple['BinarySearchTree', int]] = (tree, 0)

        while True:
            # Walk down the left spine, remembering each node
            while current is not None and not current[0].is_empty():
                node, depth = current
                stack.append(current)
                if depth_config.should_explore(depth):
                    current = (node.get_left(), depth + 1)
                else:
                    current = None

            if not stack:
                return

            node, depth = stack.pop()
            if depth_config.should_yield(depth):
                yield (node.get_data(), depth)

            if depth_config.should_explore(depth):
                current = (node.get_right(), depth + 1)
            else:
                current = None


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits both subtrees before the node. Good for tear-down or for
    aggregating values bottom-up.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self, tree, max_depth=None, min_depth=0):
        depth_config = self._depth_config(max_depth, min_depth)
        # Entries are (node, depth, children_already_pushed)
        stack: List[Tuple['BinarySearchTree', int, bool]] = [(tree, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if node.is_empty():
                continue

            if expanded or not depth_config.should_explore(depth):
                if depth_config.should_yield(depth):
                    yield (node.get_data(), depth)
                continue

            stack.append((node, depth, True))
            stack.append((node.get_right(), depth + 1, False))
            stack.append((node.get_left(), depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N, left to right, before any node at
    depth N+1.
    """

    order = TraversalOrder.LEVEL_ORDER

    def traverse(self, tree, max_depth=None, min_depth=0):
        depth_config = self._depth_config(max_depth, min_depth)
        queue: Deque[Tuple['BinarySearchTree', int]] = deque([(tree, 0)])

        while queue:
            node, depth = queue.popleft()
            if node.is_empty():
                continue

            if depth_config.should_yield(depth):
                yield (node.get_data(), depth)

            if depth_config.should_explore(depth):
                queue.append((node.get_left(), depth + 1))
                queue.append((node.get_right(), depth + 1))


_STRATEGIES = {
    'pre': PreOrderTraverser,
    'pre_order': PreOrderTraverser,
    'preorder': PreOrderTraverser,
    'in': InOrderTraverser,
    'in_order': InOrderTraverser,
    'inorder': InOrderTraverser,
    'post': PostOrderTraverser,
    'post_order': PostOrderTraverser,
    'postorder': PostOrderTraverser,
    'level': LevelOrderTraverser,
    'level_order': LevelOrderTraverser,
    'bfs': LevelOrderTraverser,
}


def create_traverser(strategy: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by order or name.

    Args:
        strategy: A TraversalOrder, or one of its names/aliases
            (pre, in, post, level, bfs, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalOrder):
        strategy = strategy.value

    strategy_lower = str(strategy).lower()
    if strategy_lower not in _STRATEGIES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGIES.keys())}"
        )

    return _STRATEGIES[strategy_lower]()
