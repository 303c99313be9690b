#!/usr/bin/env python3
"""
Basic usage example for BinTreeLib.

This example demonstrates:
- Building a tree from values (duplicates included)
- The four traversal orders
- Removing every copy of a value
- Tree statistics
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import build_tree, get_tree_stats


def main():
    """Demonstrate basic tree operations."""
    # Values come from the command line or a default sample
    values = [int(arg) for arg in sys.argv[1:]] or [10, 5, 15, 3, 7, 12, 17, 10]

    tree = build_tree(values)
    print(tree)
    print("-" * 50)

    for order in ("pre_order", "in_order", "post_order", "level_order"):
        print(f"{order:>12}: {tree.traverse(order)}")

    print("-" * 50)
    print(f"Size: {tree.size()}  Height: {tree.height()}")

    target = values[0]
    print(f"Removing every {target} ({tree.count(target)} stored)")
    tree.remove(target)
    print(tree)

    stats = get_tree_stats(tree)
    print(f"Leaves: {stats['leaf_nodes']}  Distinct values: {stats['distinct_values']}")
    print(f"Nodes per depth: {stats['depths']}")


if __name__ == "__main__":
    main()
