"""Test fixtures for BinTreeLib consumers.

These fixtures provide controlled access to tree structure for testing
purposes without making node layout part of the public API.
"""

from typing import Any, Dict, List, Optional

from ..core.node import Node
from ..core.tree import BinaryTree


class TreeTestHelper:
    """Public test fixture for search tree verification.

    This class provides a stable testing interface for checking the
    ordering invariant and inspecting shape. It's designed for use in
    test suites of projects that build on BinTreeLib.

    Example:
        tree = build_tree([10, 5, 15, 10])
        helper = TreeTestHelper(tree)

        assert helper.is_ordered()
        assert helper.shape() == (10, (5, None, None), (15, (10, None, None), None))
    """

    def __init__(self, tree: BinaryTree):
        """Initialize with a tree.

        Args:
            tree: The tree to inspect
        """
        self._tree = tree

    def violations(self) -> List[str]:
        """Describe every node that breaks the search tree property.

        Left subtree values must be strictly less than a node's value and
        right subtree values must not be less than it.

        Returns:
            List of violation messages (empty if the tree is ordered)
        """
        problems: List[str] = []
        self._check(self._tree.root, None, None, problems)
        return problems

    def is_ordered(self) -> bool:
        """Check that the tree satisfies the search tree property."""
        return not self.violations()

    def shape(self) -> Any:
        """Nested (value, left, right) tuples describing the tree.

        Returns:
            None for an empty tree, otherwise the root's tuple
        """
        return self._shape(self._tree.root)

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - size: Number of nodes
            - height: Tree height (-1 when empty)
            - empty: Whether the tree has no root
            - ordered: Whether the search tree property holds
        """
        return {
            'size': self._tree.size(),
            'height': self._tree.height(),
            'empty': self._tree.empty(),
            'ordered': self.is_ordered(),
        }

    def _check(self, node: Optional[Node], low: Any, high: Any,
               problems: List[str]) -> None:
        # low is an inclusive lower bound, high an exclusive upper bound;
        # the tree never stores None, so None means unbounded
        if node is None:
            return
        if low is not None and node.value < low:
            problems.append(f"{node.value!r} is less than ancestor {low!r}")
        if high is not None and not node.value < high:
            problems.append(f"{node.value!r} is not less than ancestor {high!r}")
        self._check(node.left, low, node.value, problems)
        self._check(node.right, node.value, high, problems)

    def _shape(self, node: Optional[Node]) -> Any:
        if node is None:
            return None
        return (node.value, self._shape(node.left), self._shape(node.right))
