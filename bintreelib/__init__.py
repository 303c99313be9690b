"""BinTreeLib - Unbalanced Binary Search Tree Library.

BinTreeLib provides an ordered, duplicate-permitting binary search tree
with all-instances removal, membership and count queries, structural
queries, and pre-, in-, post- and level-order traversals.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreelib import BinarySearchTree

    tree = BinarySearchTree()
    for value in (5, 4, 6):
        tree.add(value)
    tree.in_order()     # [4, 5, 6]
━━━━━━━━━━━━━━━━━━━━━━━━━━

The tree never rebalances; insertion order decides its shape.
"""

__version__ = "0.1.0"

# Core components
from .core import (
    Node,
    BinaryTree,
    BinarySearchTree,
    NodeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

# Configuration
from .config import (
    TraversalOrder,
    TreeConfig,
    TreeConfigError,
    DegenerateTreeWarning,
)

# High-level API
from .api import (
    build_tree,
    traverse_tree,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    "Node",
    "BinaryTree",
    "BinarySearchTree",
    "NodeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Config
    "TraversalOrder",
    "TreeConfig",
    "TreeConfigError",
    "DegenerateTreeWarning",
    # API
    "build_tree",
    "traverse_tree",
    "get_leaf_values",
    "get_tree_stats",
]
