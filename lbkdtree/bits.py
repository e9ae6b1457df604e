"""Small integer and comparison helpers used by the tree layout code."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def absolute(n):
    """Return the magnitude of ``n``, keeping its type."""
    return -n if n < 0 else n


def clz(n: int, width: int) -> int:
    """Count leading zero bits of ``n`` viewed as an unsigned ``width``-bit value.

    Negative values are taken in two's complement, so ``clz(-1, w)`` is 0 and
    ``clz(0, w)`` is ``w``.
    """
    if width <= 0:
        raise ValueError(f"bit width must be positive, got {width}")
    unsigned = n & ((1 << width) - 1)
    return width - unsigned.bit_length()


def left_child(n: int) -> int:
    """Index of the left child of node ``n`` in an implicit binary tree."""
    return 2 * n + 1


def right_child(n: int) -> int:
    """Index of the right child of node ``n`` in an implicit binary tree."""
    return 2 * n + 2


def minimum(a: T, b: T) -> T:
    """Return ``a`` if it is strictly less than ``b``, otherwise ``b``.

    Only ``<`` is required of the operands; on a tie the second one wins.
    """
    return a if a < b else b