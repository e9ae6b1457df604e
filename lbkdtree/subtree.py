"""Sizes of subtrees in a left-balanced, implicitly stored binary tree."""

from __future__ import annotations

from .bits import minimum


def _bsr(n: int) -> int:
    """Index of the highest set bit of a positive integer."""
    if n <= 0:
        raise ValueError(f"bit scan needs a positive value, got {n}")
    return n.bit_length() - 1


def subtree_size(s: int, n: int, levels: int) -> int:
    """Number of nodes in the subtree rooted at ``s``.

    The tree holds ``n`` nodes laid out breadth first (children of ``i`` at
    ``2i + 1`` and ``2i + 2``) and has ``levels`` levels, normally
    ``n.bit_length()``.  A node index at or beyond ``n`` has an empty subtree.
    """
    if s < 0 or n < 0:
        raise ValueError("node index and node count must be non-negative")
    if s >= n:
        return 0

    level = _bsr(s + 1)
    below = levels - level - 1
    if below < 0:
        raise ValueError(
            f"node {s} lies on level {level}, beyond a tree of {levels} levels"
        )

    # First node of the lowest level that lies under s, i.e. its left-most leaf.
    first_lowest_leaf = ~((~s) << below)
    full_lowest = 1 << below
    on_lowest = minimum((n - first_lowest_leaf) * (n > first_lowest_leaf), full_lowest)

    return full_lowest - 1 + on_lowest