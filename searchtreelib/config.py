"""Configuration system for SearchTreeLib.

This module defines how callers specify a traversal: which visiting order
to use and which depths to report.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TraversalOrder(Enum):
    """Order in which tree values are visited."""
    PRE_ORDER = "pre_order"       # Node before its subtrees
    IN_ORDER = "in_order"         # Left subtree, node, right subtree (sorted)
    POST_ORDER = "post_order"     # Subtrees before the node
    LEVEL_ORDER = "level_order"   # Level by level, left to right


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if values at this depth should be yielded.

        Args:
            depth: Current depth (root is 0)

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be explored.

        Args:
            depth: Current depth

        Returns:
            True if we should go deeper
        """
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal."""

    order: TraversalOrder = TraversalOrder.IN_ORDER
    depth: DepthConfig = field(default_factory=DepthConfig)

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Create config that yields every value in ascending order."""
        return cls(order=TraversalOrder.IN_ORDER)

    @classmethod
    def top_levels(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for looking at the upper levels of a tree only.

        Args:
            max_depth: Deepest level to report (default 1 = root and children)

        Returns:
            TraversalConfig walking level by level down to max_depth
        """
        return cls(
            order=TraversalOrder.LEVEL_ORDER,
            depth=DepthConfig(max_depth=max_depth),
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors
