"""Core abstractions for BinTreeLib.

This module contains the node type, the tree contract, the traversal
strategies and the binary search tree built on them.
"""

from .node import Node
from .tree import BinaryTree
from .traverser import (
    NodeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    parse_order,
)
from .search_tree import BinarySearchTree

__all__ = [
    "Node",
    "BinaryTree",
    "NodeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "parse_order",
    "BinarySearchTree",
]
