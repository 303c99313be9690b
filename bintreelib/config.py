"""Configuration system for BinTreeLib.

This module defines how users tune a tree's advisory behaviour: when to
warn about degenerate (list-like) growth and how the tree renders itself.
None of these settings change the ordering or multiset semantics.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TraversalOrder(Enum):
    """Order in which a traversal visits the nodes of a tree."""
    PRE_ORDER = "pre_order"       # Node, left, right
    IN_ORDER = "in_order"         # Left, node, right (sorted)
    POST_ORDER = "post_order"     # Left, right, node
    LEVEL_ORDER = "level_order"   # Breadth-first, left to right


class TreeConfigError(ValueError):
    """Raised when a TreeConfig fails validation."""
    pass


class DegenerateTreeWarning(RuntimeWarning):
    """Issued when insertions push the tree past the configured depth.

    Every tree operation recurses once per level, so a tree this deep is
    heading for the interpreter's recursion limit.
    """
    pass


@dataclass
class TreeConfig:
    """Complete configuration for a binary search tree.

    The defaults reproduce the plain behaviour: level-order rendering and
    a depth warning well below the default recursion limit.
    """

    # Depth at which a new leaf triggers DegenerateTreeWarning (None = never)
    depth_warning_threshold: Optional[int] = 512

    # Rendering used by str(tree)
    display_order: TraversalOrder = TraversalOrder.LEVEL_ORDER
    display_label: str = "Tree:"

    @classmethod
    def quiet(cls) -> 'TreeConfig':
        """Create config that never warns about tree depth.

        Returns:
            TreeConfig with depth warnings disabled
        """
        return cls(depth_warning_threshold=None)

    @classmethod
    def sorted_display(cls) -> 'TreeConfig':
        """Create config that renders values in sorted order.

        Returns:
            TreeConfig using in-order rendering
        """
        return cls(display_order=TraversalOrder.IN_ORDER)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        threshold = self.depth_warning_threshold
        if threshold is not None:
            if isinstance(threshold, bool) or not isinstance(threshold, int):
                errors.append("depth_warning_threshold must be an integer or None")
            elif threshold <= 0:
                errors.append("depth_warning_threshold must be positive")

        if not isinstance(self.display_order, TraversalOrder):
            errors.append("display_order must be a TraversalOrder")

        if not isinstance(self.display_label, str):
            errors.append("display_label must be a string")

        return errors

    def check(self) -> None:
        """Raise TreeConfigError if the configuration is invalid."""
        errors = self.validate()
        if errors:
            raise TreeConfigError(
                f"Invalid configuration: {'; '.join(errors)}"
            )
