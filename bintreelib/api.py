"""High-level API for BinTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from .config import TraversalOrder, TreeConfig
from .core.search_tree import BinarySearchTree
from .core.traverser import LevelOrderTraverser, create_traverser
from .core.tree import BinaryTree


def build_tree(values: Iterable[Any],
               config: Optional[TreeConfig] = None) -> BinarySearchTree:
    """Build a search tree by adding values in iteration order.

    Insertion order decides the shape, so the same values in a different
    order can produce a different (but equally sorted) tree.

    Args:
        values: Values to add; None entries are skipped
        config: Optional tree configuration

    Returns:
        A new BinarySearchTree holding every non-None value

    Example:
        >>> tree = build_tree([10, 5, 15, 10])
        >>> tree.count(10)
        2
    """
    tree = BinarySearchTree(config)
    for value in values:
        tree.add(value)
    return tree


def traverse_tree(tree: BinaryTree,
                  order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> List[Any]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to traverse
        order: Traversal order (pre, in, post, level) as enum or name

    Returns:
        A fresh list of values in the requested order

    Example:
        >>> traverse_tree(build_tree([5, 4, 6]), "pre")
        [5, 4, 6]
    """
    return tree.traverse(order)


def get_leaf_values(tree: BinaryTree,
                    order: Union[TraversalOrder, str] = TraversalOrder.PRE_ORDER) -> List[Any]:
    """Get the values stored in leaf nodes.

    Args:
        tree: Tree to inspect
        order: Order in which leaves are reported

    Returns:
        Values of nodes with no children
    """
    traverser = create_traverser(order)
    return [node.value for node in traverser.traverse(tree.root) if node.is_leaf()]


def get_tree_stats(tree: BinaryTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to inspect

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([5, 4, 6]))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['height']
        (3, 2, 1)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {},
    }
    values = []

    for node, depth in LevelOrderTraverser().traverse_with_depth(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

        values.append(node.value)

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['distinct_values'] = _count_distinct(values)
    stats['average_branching'] = (
        stats['internal_nodes'] / stats['total_nodes']
        if stats['total_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _count_distinct(values: List[Any]) -> int:
    """Count distinct values using equality only.

    Values are not required to be hashable, so adjacent runs of the
    sorted list are compared instead of building a set.
    """
    distinct = 0
    previous = None
    for value in sorted(values):
        if distinct == 0 or value != previous:
            distinct += 1
        previous = value
    return distinct
