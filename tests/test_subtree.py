import pytest
from hypothesis import given
from hypothesis import strategies as st

from lbkdtree.bits import left_child, right_child
from lbkdtree.subtree import subtree_size


def _levels(n):
    return n.bit_length()


@given(st.integers(min_value=1, max_value=5000))
def test_root_subtree_is_whole_tree(n):
    assert subtree_size(0, n, _levels(n)) == n


@given(st.integers(min_value=1, max_value=600))
def test_subtree_is_node_plus_children(n):
    levels = _levels(n)
    for s in range(n):
        expected = (
            1
            + subtree_size(left_child(s), n, levels)
            + subtree_size(right_child(s), n, levels)
        )
        assert subtree_size(s, n, levels) == expected


@given(st.integers(min_value=1, max_value=600), st.integers(min_value=0, max_value=50))
def test_outside_nodes_are_empty(n, extra):
    assert subtree_size(n + extra, n, _levels(n)) == 0


@given(st.integers(min_value=1, max_value=1000))
def test_leaves_have_size_one(n):
    levels = _levels(n)
    leaves = [s for s in range(n) if left_child(s) >= n]
    assert leaves
    assert all(subtree_size(s, n, levels) == 1 for s in leaves)


@given(st.integers(min_value=2, max_value=1000))
def test_left_subtree_not_smaller_than_right(n):
    levels = _levels(n)
    for s in range(n):
        left = subtree_size(left_child(s), n, levels)
        right = subtree_size(right_child(s), n, levels)
        assert left >= right


def test_perfect_tree_halves():
    n = 15
    levels = _levels(n)
    assert subtree_size(1, n, levels) == subtree_size(2, n, levels) == 7


def test_pinned_small_tree():
    assert [subtree_size(s, 5, 3) for s in range(6)] == [5, 3, 1, 1, 1, 0]


def test_rejects_negative_inputs():
    with pytest.raises(ValueError):
        subtree_size(-1, 5, 3)
    with pytest.raises(ValueError):
        subtree_size(0, -5, 3)


def test_rejects_too_few_levels():
    with pytest.raises(ValueError):
        subtree_size(7, 16, 2)