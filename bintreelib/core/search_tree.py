"""Binary search tree implementation for BinTreeLib.

A BinarySearchTree is a BinaryTree with the additional properties that
all values in a left subtree are less than the value in a parent node,
and all values in a right subtree are greater than or equal to it.
Duplicates are kept, so the tree behaves as a sorted multiset.

The tree never rebalances. Every operation walks recursively from the
root, so recursion depth equals tree height; a degenerate (list-like)
tree deeper than the interpreter's recursion limit raises RecursionError.
DegenerateTreeWarning is issued well before that point.
"""

import logging
import warnings
from typing import Optional, TypeVar

from ..config import DegenerateTreeWarning
from .node import Node
from .tree import BinaryTree

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BinarySearchTree(BinaryTree[T]):
    """Unbalanced, duplicate-permitting binary search tree.

    Values must support ``<`` for ordering and ``==`` for matching, and
    the two should agree: values that are neither less nor greater than
    each other are expected to compare equal.

    Example:
        >>> tree = BinarySearchTree()
        >>> for value in (5, 4, 6):
        ...     tree.add(value)
        >>> tree.in_order()
        [4, 5, 6]
        >>> str(tree)
        'Tree: 5 4 6'
    """

    def add(self, value: Optional[T]) -> None:
        """Add a value to the tree.

        Values less than a node go left; equal or greater values go right.

        Args:
            value: Value to add, None is silently ignored
        """
        if value is None:
            return

        if self._root is None:
            self._root = Node(value)
        else:
            self._add(self._root, value, 1)

    def _add(self, parent: Node[T], value: T, depth: int) -> None:
        """Add a value to the subtree whose root is parent.

        Args:
            parent: Root of a subtree, must not be None
            value: Value to add to subtree
            depth: Depth a new child of parent would have
        """
        if value < parent.value:
            if parent.has_left():
                self._add(parent.left, value, depth + 1)
            else:
                parent.left = Node(value)
                self._check_depth(depth)
        else:  # Greater than or equal to parent
            if parent.has_right():
                self._add(parent.right, value, depth + 1)
            else:
                parent.right = Node(value)
                self._check_depth(depth)

    def _check_depth(self, depth: int) -> None:
        threshold = self.config.depth_warning_threshold
        if threshold is not None and depth == threshold:
            warnings.warn(
                f"{self.__class__.__name__} reached depth {depth}; the tree "
                f"does not rebalance and recursive operations may exceed "
                f"the recursion limit",
                DegenerateTreeWarning,
                stacklevel=2,
            )

    def remove(self, value: Optional[T]) -> None:
        """Remove every occurrence of a value from the tree.

        Removing a value that is not present leaves the tree unchanged.

        Args:
            value: Value to remove, None is silently ignored
        """
        if value is None or self._root is None:
            return

        if logger.isEnabledFor(logging.DEBUG):
            before = self.size()
            self._root = self._remove(self._root, value)
            logger.debug("Removed %d node(s) holding %r",
                         before - self.size(), value)
        else:
            self._root = self._remove(self._root, value)

    def _remove(self, parent: Optional[Node[T]], value: T) -> Optional[Node[T]]:
        """Remove all occurrences of value from the subtree at parent.

        Children are cleaned first, so by the time parent is examined
        neither subtree holds the value.

        Args:
            parent: Root of a subtree, may be None
            value: Value to remove

        Returns:
            The new root of the subtree, None if it became empty
        """
        if parent is None:
            return None

        parent.left = self._remove(parent.left, value)
        parent.right = self._remove(parent.right, value)

        if parent.value != value:
            return parent

        if parent.is_leaf():
            return None
        if not parent.has_left():
            return parent.right
        if not parent.has_right():
            return parent.left

        # Two children: take the in-order successor's value and splice
        # the successor's own slot out of the right subtree.
        parent.value = self._minimum(parent.right).value
        parent.right = self._remove_minimum(parent.right)
        return parent

    def _minimum(self, parent: Node[T]) -> Node[T]:
        """Leftmost node of the subtree at parent."""
        while parent.has_left():
            parent = parent.left
        return parent

    def _remove_minimum(self, parent: Node[T]) -> Optional[Node[T]]:
        """Detach the leftmost node of a subtree.

        The leftmost node has no left child, so its right subtree takes
        its place. Equal values stored to its right stay where they are.

        Returns:
            The new root of the subtree
        """
        if not parent.has_left():
            return parent.right
        parent.left = self._remove_minimum(parent.left)
        return parent

    def count(self, value: Optional[T]) -> int:
        """Count the stored values equal to value.

        Args:
            value: Value to count, None always counts 0

        Returns:
            Number of nodes holding a value equal to value
        """
        if value is None:
            return 0
        return self._count(self._root, value)

    def _count(self, parent: Optional[Node[T]], value: T) -> int:
        if parent is None:
            return 0
        match = 1 if parent.value == value else 0
        return match + self._count(parent.left, value) + self._count(parent.right, value)

    def height(self) -> int:
        return self._height(self._root)

    def _height(self, parent: Optional[Node[T]]) -> int:
        """Gets the height of the subtree whose root is parent.

        An absent subtree has height -1, so it never outweighs a present
        sibling.
        """
        if parent is None:
            return -1
        return 1 + max(self._height(parent.left), self._height(parent.right))

    def size(self) -> int:
        return self._size(self._root)

    def _size(self, parent: Optional[Node[T]]) -> int:
        if parent is None:
            return 0
        return 1 + self._size(parent.left) + self._size(parent.right)
