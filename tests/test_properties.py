"""Property-based tests for BinarySearchTree.

Hypothesis generates insertion and removal sequences; each property is
checked against a plain sorted list used as a reference model.
"""

from collections import Counter

import pytest
from hypothesis import given, settings, strategies as st

from bintreelib import BinarySearchTree, build_tree
from bintreelib.testing import TreeTestHelper

# Small ranges force plenty of duplicates; short lists keep recursion shallow
values = st.lists(st.integers(min_value=-20, max_value=20), max_size=60)


@given(values)
def test_in_order_is_sorted(xs):
    tree = build_tree(xs)
    assert tree.in_order() == sorted(xs)


@given(values)
def test_size_and_height_agree_with_emptiness(xs):
    tree = build_tree(xs)

    assert tree.size() == len(xs)
    assert (tree.height() == -1) == tree.empty()
    assert (tree.height() == 0) == (tree.size() == 1)


@given(values)
def test_traversals_hold_the_same_multiset(xs):
    tree = build_tree(xs)
    expected = Counter(xs)

    assert Counter(tree.pre_order()) == expected
    assert Counter(tree.post_order()) == expected
    assert Counter(tree.level_order()) == expected


@given(values)
def test_counts_match_insertions(xs):
    tree = build_tree(xs)
    for value, k in Counter(xs).items():
        assert tree.count(value) == k
        assert tree.contains(value)


@given(values, st.integers(min_value=-20, max_value=20))
def test_remove_drops_every_copy_only(xs, target):
    tree = build_tree(xs)

    tree.remove(target)

    remaining = [x for x in xs if x != target]
    assert tree.count(target) == 0
    assert not tree.contains(target)
    assert tree.size() == len(remaining)
    assert tree.in_order() == sorted(remaining)
    for value, k in Counter(remaining).items():
        assert tree.count(value) == k
    assert TreeTestHelper(tree).is_ordered()


@given(values, st.integers(min_value=21, max_value=100))
def test_removing_absent_value_is_idempotent(xs, missing):
    tree = build_tree(xs)
    snapshot = (tree.size(), tree.height(), tree.pre_order(),
                tree.in_order(), tree.post_order(), tree.level_order())

    tree.remove(missing)

    assert snapshot == (tree.size(), tree.height(), tree.pre_order(),
                        tree.in_order(), tree.post_order(), tree.level_order())


@given(values)
def test_pre_order_replay_rebuilds_same_tree(xs):
    tree = build_tree(xs)
    assert build_tree(tree.pre_order()) == tree


@pytest.mark.slow
@settings(max_examples=200)
@given(st.lists(
    st.tuples(st.booleans(), st.integers(min_value=-10, max_value=10)),
    max_size=80,
))
def test_random_operations_keep_tree_ordered(ops):
    """Interleaved adds and removes track a sorted list model."""
    tree = BinarySearchTree()
    model = []

    for is_add, value in ops:
        if is_add:
            tree.add(value)
            model.append(value)
        else:
            tree.remove(value)
            model = [x for x in model if x != value]

        assert tree.size() == len(model)
        assert TreeTestHelper(tree).is_ordered()

    assert tree.in_order() == sorted(model)
