"""Tree traversal strategies for BinTreeLib.

Traversers implement the different algorithms for walking a binary tree.
They only look at a node's value and child slots, so they work on any
subtree rooted at a Node.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Dict, Iterator, Optional, Type, Union

from ..config import TraversalOrder
from .node import Node


class NodeTraverser(ABC):
    """Abstract base class for binary tree traversal strategies.

    Each traverser yields nodes lazily. Callers that need a stable
    snapshot materialize the iterator into a list.
    """

    order: TraversalOrder

    @abstractmethod
    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting node for traversal, None for an empty tree

        Yields:
            Nodes in this traverser's order
        """
        pass

    def values(self, root: Optional[Node]) -> list:
        """Collect the values of a traversal into a fresh list."""
        return [node.value for node in self.traverse(root)]


class PreOrderTraverser(NodeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before its left and then its right subtree. Replaying
    the values into an empty search tree rebuilds the same shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield root
        yield from self.traverse(root.left)
        yield from self.traverse(root.right)


class InOrderTraverser(NodeTraverser):
    """Depth-first in-order traversal strategy.

    Visits the left subtree, the node, then the right subtree. On a search
    tree this yields values in non-decreasing order.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield from self.traverse(root.left)
        yield root
        yield from self.traverse(root.right)


class PostOrderTraverser(NodeTraverser):
    """Depth-first post-order traversal strategy.

    Visits both subtrees before the node itself. Good for deletion or
    aggregating values bottom-up.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield from self.traverse(root.left)
        yield from self.traverse(root.right)
        yield root


class LevelOrderTraverser(NodeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N, left to right, before any node at depth
    N+1. Uses an explicit queue rather than recursion.
    """

    order = TraversalOrder.LEVEL_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return

        queue: Deque[Node] = deque([root])
        while queue:
            node = queue.popleft()
            yield node

            if node.has_left():
                queue.append(node.left)
            if node.has_right():
                queue.append(node.right)

    def traverse_with_depth(self, root: Optional[Node]) -> Iterator[tuple]:
        """Traverse level by level, yielding (node, depth) tuples."""
        if root is None:
            return

        queue: Deque[tuple] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            yield (node, depth)

            if node.has_left():
                queue.append((node.left, depth + 1))
            if node.has_right():
                queue.append((node.right, depth + 1))


_TRAVERSERS: Dict[TraversalOrder, Type[NodeTraverser]] = {
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}

_ORDER_ALIASES: Dict[str, TraversalOrder] = {
    'pre': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'in': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from string or enum.

    Args:
        order: Order as enum or one of its string aliases

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If order name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower not in _ORDER_ALIASES:
        raise ValueError(
            f"Unknown traversal order: {order}. "
            f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
        )
    return _ORDER_ALIASES[order_lower]


# Factory function for creating traversers by name
def create_traverser(order: Union[TraversalOrder, str]) -> NodeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder or name (pre, in, post, level, ...)

    Returns:
        NodeTraverser instance

    Raises:
        ValueError: If order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)]()
