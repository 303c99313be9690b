"""BinaryTree abstraction for BinTreeLib.

A binary tree is an assembly of zero or more nodes, where each node stores
a value and may have a child to its left and right. This module defines
the contract every tree implementation provides, plus the dunder methods
and rendering that follow from that contract.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar, Union

from ..config import TraversalOrder, TreeConfig
from .node import Node
from .traverser import create_traverser, parse_order

T = TypeVar("T")


class BinaryTree(ABC, Generic[T]):
    """Abstract base class for binary trees.

    Subclasses own the root node and decide where values go. Everything
    here is expressed through the abstract operations, so any subclass
    gets traversal dispatch, rendering and structural equality for free.
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Initialize an empty tree.

        Args:
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            TreeConfigError: If the configuration is invalid
        """
        self.config = config or TreeConfig()
        self.config.check()
        self._root: Optional[Node[T]] = None

    @property
    def root(self) -> Optional[Node[T]]:
        """Root node of the tree, None when empty."""
        return self._root

    @abstractmethod
    def add(self, value: Optional[T]) -> None:
        """Add a value to the tree. None is ignored."""
        pass

    @abstractmethod
    def remove(self, value: Optional[T]) -> None:
        """Remove every occurrence of a value. None is ignored."""
        pass

    @abstractmethod
    def count(self, value: Optional[T]) -> int:
        """Number of stored values equal to value."""
        pass

    def contains(self, value: Optional[T]) -> bool:
        """Check whether at least one stored value equals value."""
        return self.count(value) > 0

    @abstractmethod
    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single node."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Number of nodes in the tree."""
        pass

    def empty(self) -> bool:
        """Determine whether the tree has no nodes."""
        return self._root is None

    def pre_order(self) -> List[T]:
        """Values with each node before its left and right subtrees."""
        return self.traverse(TraversalOrder.PRE_ORDER)

    def in_order(self) -> List[T]:
        """Values with each node between its left and right subtrees."""
        return self.traverse(TraversalOrder.IN_ORDER)

    def post_order(self) -> List[T]:
        """Values with each node after its left and right subtrees."""
        return self.traverse(TraversalOrder.POST_ORDER)

    def level_order(self) -> List[T]:
        """Values level by level, left to right within a level."""
        return self.traverse(TraversalOrder.LEVEL_ORDER)

    def traverse(self, order: Union[TraversalOrder, str]) -> List[T]:
        """Traverse the tree in the given order.

        Args:
            order: TraversalOrder or one of its string aliases

        Returns:
            A fresh list of values in traversal order

        Raises:
            ValueError: If order name is not recognized
        """
        return create_traverser(order).values(self._root)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __eq__(self, other: Any) -> bool:
        """Trees are equal if they have the same shape and equal values."""
        if not isinstance(other, BinaryTree):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return _same_structure(self._root, other._root)

    # Trees are mutable containers
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        order = parse_order(self.config.display_order)
        parts = [self.config.display_label]
        parts.extend(str(value) for value in self.traverse(order))
        return " ".join(parts)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.in_order()!r})"


def _same_structure(a: Optional[Node], b: Optional[Node]) -> bool:
    """Compare two subtrees position by position.

    Node equality ignores children, so the children are compared here
    explicitly.
    """
    if a is None or b is None:
        return a is b
    return (a == b
            and _same_structure(a.left, b.left)
            and _same_structure(a.right, b.right))
