"""Binary search tree for SearchTreeLib.

A ``BinarySearchTree`` is either *Empty* or a *Node* holding one value and
two child subtrees, each of which is itself a ``BinarySearchTree``. Every
subtree is a full tree object, so the same queries work at any level::

    >>> tree = BinarySearchTree.from_iterable([5, 3, 8])
    >>> tree.get_left().get_data()
    3

Subtree handles are read-only: ``insert`` and ``delete`` only run on the
root tree, and raise ValueError on a handle returned by ``get_left`` or
``get_right``.

The tree is not self-balancing. Lookups, insertion and deletion walk the
tree iteratively so that degenerate (list shaped) trees do not run into
Python's recursion limit.
"""

import logging
from typing import Any, Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union

from ..config import TraversalOrder
from ..errors import EmptyTreeError, UnfoundValueError
from .traverser import (
    InOrderTraverser,
    LevelOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    create_traverser,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree over a totally ordered value type.

    Invariant: every value in the left subtree of a node compares strictly
    less than the node's value, every value in the right subtree strictly
    greater. Values are unique.

    Equality (``==``) is deep and structural. The shallow, root-only
    comparison is available separately through ``compare_root`` and
    ``root_equals``. No ordering operators are defined on trees.
    """

    __slots__ = ('_data', '_left', '_right', '_is_subtree')

    def __init__(self):
        """Create an empty tree."""
        # A node always has two child trees; an empty tree has none.
        self._data: Optional[T] = None
        self._left: Optional['BinarySearchTree[T]'] = None
        self._right: Optional['BinarySearchTree[T]'] = None
        # Set on child trees owned by a parent node
        self._is_subtree = False

    # Construction

    @classmethod
    def new(cls) -> 'BinarySearchTree[T]':
        """Return a new empty tree."""
        return cls()

    @classmethod
    def from_value(cls, value: T) -> 'BinarySearchTree[T]':
        """Return a single-node tree holding ``value``."""
        tree = cls()
        tree._set_node(value)
        return tree

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> 'BinarySearchTree[T]':
        """Build a tree by inserting ``values`` in iteration order.

        Duplicates are dropped, exactly as repeated ``insert`` calls would.
        """
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def copy(self) -> 'BinarySearchTree[T]':
        """Return an independent tree with the same shape and values.

        The tree structure is copied; the stored values themselves are shared.
        Copying a subtree handle gives a new, independent root tree.
        """
        clone = type(self)()
        pending = [(self, clone)]
        while pending:
            source, target = pending.pop()
            if source.is_empty():
                continue
            target._set_node(source._data)
            pending.append((source._left, target._left))
            pending.append((source._right, target._right))
        return clone

    # Structural queries

    def is_empty(self) -> bool:
        return self._left is None

    def is_leaf(self) -> bool:
        """A node with two empty children. An empty tree is not a leaf."""
        if self.is_empty():
            return False
        return self._left.is_empty() and self._right.is_empty()

    def has_left(self) -> bool:
        return not self.is_empty() and not self._left.is_empty()

    def has_right(self) -> bool:
        return not self.is_empty() and not self._right.is_empty()

    def get_left(self) -> Optional['BinarySearchTree[T]']:
        """Left subtree (possibly empty), or None on an empty tree.

        The returned handle is a read-only view into this tree: ``insert``
        and ``delete`` on it raise ValueError. A handle is only valid until
        the next mutation of the tree it came from.
        """
        return self._left

    def get_right(self) -> Optional['BinarySearchTree[T]']:
        """Right subtree (possibly empty), or None on an empty tree.

        Read-only, like ``get_left``.
        """
        return self._right

    def is_subtree(self) -> bool:
        """True for a child handle owned by a parent node."""
        return self._is_subtree

    def get_data(self) -> Optional[T]:
        """Value held by this node, or None on an empty tree."""
        return self._data

    def get_min(self) -> T:
        """Smallest value in the tree.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self.is_empty():
            raise EmptyTreeError("Cannot find the minimum of an empty tree")
        return self._min_subtree()._data

    def get_max(self) -> T:
        """Largest value in the tree.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self.is_empty():
            raise EmptyTreeError("Cannot find the maximum of an empty tree")
        node = self
        while node.has_right():
            node = node._right
        return node._data

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        deepest = -1
        for _, depth in LevelOrderTraverser().traverse(self):
            deepest = depth
        return deepest + 1

    # Lookup

    def has_value(self, query: T) -> bool:
        """Check whether a value equal to ``query`` is stored. O(depth)."""
        return not self._descend(query).is_empty()

    def get_value(self, query: T) -> Optional[T]:
        """Return the stored value equal to ``query``, or None if absent."""
        return self._descend(query)._data

    # Mutation

    def insert(self, value: T) -> bool:
        """Insert ``value`` if it is not already present.

        Duplicates are silently ignored, so inserting the same value twice
        leaves the tree exactly as inserting it once.

        Returns:
            True if a node was added, False if the value was already present

        Raises:
            ValueError: If called on a subtree handle
        """
        self._check_mutable("insert into")
        slot = self._descend(value)
        if not slot.is_empty():
            logger.debug("Ignoring duplicate insert of %r", value)
            return False
        slot._set_node(value)
        return True

    def delete(self, value: T) -> bool:
        """Remove the node holding ``value``, keeping the search invariant.

        The root is handled like any other node: deleting the only value of
        a single-node tree leaves an empty tree. On failure the tree is left
        unchanged.

        Returns:
            True once the node has been removed

        Raises:
            EmptyTreeError: If the tree is empty
            UnfoundValueError: If ``value`` is not in the tree
            ValueError: If called on a subtree handle
        """
        self._check_mutable("delete from")
        if self.is_empty():
            raise EmptyTreeError("Cannot delete from an empty tree")

        target = self._descend(value)
        if target.is_empty():
            raise UnfoundValueError(f"Value {value!r} is not in the tree", value)

        target._remove_node()
        return True

    # Traversal

    def pre_order(self) -> Iterator[T]:
        """Values in node, left, right order."""
        return (value for value, _ in PreOrderTraverser().traverse(self))

    def in_order(self) -> Iterator[T]:
        """Values in ascending order."""
        return (value for value, _ in InOrderTraverser().traverse(self))

    def post_order(self) -> Iterator[T]:
        """Values in left, right, node order."""
        return (value for value, _ in PostOrderTraverser().traverse(self))

    def level_order(self) -> Iterator[T]:
        """Values level by level, left to right."""
        return (value for value, _ in LevelOrderTraverser().traverse(self))

    def traverse(self,
                 order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[T, int]]:
        """Walk the tree yielding ``(value, depth)`` tuples.

        Args:
            order: Visiting order, as a TraversalOrder or its name
            max_depth: Deepest level to visit (None = unlimited)
            min_depth: Shallowest level to yield

        Yields:
            Tuples of (value, depth) where the root has depth 0
        """
        traverser = create_traverser(order)
        return traverser.traverse(self, max_depth=max_depth, min_depth=min_depth)

    # Comparison

    def compare_root(self, other: 'BinarySearchTree[T]') -> int:
        """Shallow comparison of the two root values only.

        An empty tree sorts before any node, two empty trees compare equal,
        and two nodes compare by their root data alone, ignoring everything
        below the root.

        Returns:
            -1, 0 or 1
        """
        if self.is_empty():
            return 0 if other.is_empty() else -1
        if other.is_empty():
            return 1
        if self._data < other._data:
            return -1
        if other._data < self._data:
            return 1
        return 0

    def root_equals(self, other: 'BinarySearchTree[T]') -> bool:
        """True when both roots are empty or hold equal values."""
        return self.compare_root(other) == 0

    def __eq__(self, other: object) -> bool:
        """Trees are equal if they have the same shape and values."""
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a.is_empty() or b.is_empty():
                if a.is_empty() != b.is_empty():
                    return False
                continue
            if a._data != b._data:
                return False
            pending.append((a._left, b._left))
            pending.append((a._right, b._right))
        return True

    # Mutable containers are unhashable
    __hash__ = None

    # Container protocol

    def __contains__(self, query: Any) -> bool:
        return self.has_value(query)

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __len__(self) -> int:
        return sum(1 for _ in self.pre_order())

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __str__(self) -> str:
        """Recursive rendering, e.g. ``Node(data: 1, left: Empty, right: Empty)``."""
        parts = []
        pending: list = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item.is_empty():
                parts.append("Empty")
            else:
                parts.append(f"Node(data: {item._data}")
                pending.extend([")", item._right, ", right: ", item._left, ", left: "])
        return "".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.pre_order())!r})"

    # Internals

    def _descend(self, value: T) -> 'BinarySearchTree[T]':
        """Return the subtree holding ``value``, or the empty slot where it
        would be inserted."""
        node = self
        while not node.is_empty():
            if value < node._data:
                node = node._left
            elif node._data < value:
                node = node._right
            else:
                break
        return node

    def _min_subtree(self) -> 'BinarySearchTree[T]':
        node = self
        while node.has_left():
            node = node._left
        return node

    def _check_mutable(self, action: str) -> None:
        if self._is_subtree:
            raise ValueError(
                f"Cannot {action} a subtree handle; mutate the root tree instead"
            )

    def _set_node(self, value: T) -> None:
        cls = type(self)
        self._data = value
        self._left = cls()
        self._right = cls()
        self._left._is_subtree = True
        self._right._is_subtree = True

    def _clear(self) -> None:
        self._data = None
        self._left = None
        self._right = None

    def _adopt(self, other: 'BinarySearchTree[T]') -> None:
        """Take over the contents of ``other`` in place, leaving it empty."""
        self._data = other._data
        self._left = other._left
        self._right = other._right
        other._clear()

    def _remove_node(self) -> None:
        """Remove the value held by this (non-empty) subtree."""
        if self.is_leaf():
            logger.debug("Deleting leaf %r", self._data)
            self._clear()
        elif not self.has_left():
            logger.debug("Deleting %r, splicing in its right subtree", self._data)
            self._adopt(self._right)
        elif not self.has_right():
            logger.debug("Deleting %r, splicing in its left subtree", self._data)
            self._adopt(self._left)
        else:
            successor = self._right._min_subtree()
            logger.debug(
                "Deleting %r, replacing it with in-order successor %r",
                self._data, successor._data
            )
            self._data = successor._data
            # The successor has no left child, so this is a leaf or splice.
            successor._remove_node()
