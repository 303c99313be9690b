"""Node abstraction for BinTreeLib.

The Node is intentionally kept simple - it's a value holder with two
owned child slots. Ordering is the tree's responsibility, so nothing here
validates where a node is attached.
"""

from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A value plus optional left and right subtrees.

    Equality and hashing look at the stored value only. Two nodes holding
    equal values compare equal whatever their children are, but they are
    still distinct slots in a tree.
    """

    __slots__ = ("_value", "_left", "_right")

    def __init__(self,
                 value: T,
                 left: Optional["Node[T]"] = None,
                 right: Optional["Node[T]"] = None):
        """Initialize a node.

        Args:
            value: Value to store in the node
            left: Left subtree, None if absent
            right: Right subtree, None if absent
        """
        self._value = value
        self._left = left
        self._right = right

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    @property
    def left(self) -> Optional["Node[T]"]:
        return self._left

    @left.setter
    def left(self, node: Optional["Node[T]"]) -> None:
        self._left = node

    @property
    def right(self) -> Optional["Node[T]"]:
        return self._right

    @right.setter
    def right(self, node: Optional["Node[T]"]) -> None:
        self._right = node

    def has_left(self) -> bool:
        return self._left is not None

    def has_right(self) -> bool:
        return self._right is not None

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Returns:
            bool: True if both child slots are empty
        """
        return self._left is None and self._right is None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self._value!r})"

    def __eq__(self, other: Any) -> bool:
        """Nodes are equal if they are the same type and hold equal values."""
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        """Hash based on value, consistent with __eq__."""
        return hash(self._value)
