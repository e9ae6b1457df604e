"""Fixed sorting networks for short sequences of up to sixteen items."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")

Comparator = tuple[int, int]

MAX_SIZE = 16

_NETWORKS: dict[int, tuple[Comparator, ...]] = {
    0: (),
    1: (),
    2: ((0, 1),),
    3: ((0, 2), (0, 1), (1, 2)),
    4: ((0, 3), (1, 2), (0, 1), (2, 3), (1, 2)),
    5: (
        (0, 4), (0, 2), (1, 4), (1, 3), (2, 4), (0, 1), (2, 3), (1, 2),
        (3, 4),
    ),
    6: (
        (0, 3), (1, 4), (2, 5), (0, 2), (3, 5), (1, 3), (2, 4), (0, 1),
        (2, 3), (4, 5), (1, 2), (3, 4),
    ),
    7: (
        (0, 6), (1, 5), (2, 3), (0, 2), (1, 4), (3, 6), (0, 1), (3, 5),
        (4, 6), (1, 3), (2, 4), (5, 6), (2, 3), (4, 5), (1, 2), (3, 4),
    ),
    8: (
        (0, 5), (1, 3), (2, 7), (4, 6), (0, 2), (1, 4), (3, 6), (5, 7),
        (0, 1), (2, 4), (3, 5), (6, 7), (1, 3), (4, 6), (2, 3), (4, 5),
        (1, 2), (3, 4), (5, 6),
    ),
    9: (
        (0, 8), (1, 6), (2, 5), (4, 7), (0, 4), (2, 6), (3, 7), (5, 8),
        (0, 2), (1, 5), (3, 4), (6, 8), (1, 3), (4, 6), (5, 7), (0, 1),
        (2, 4), (3, 5), (7, 8), (2, 3), (4, 5), (6, 7), (1, 2), (3, 4),
        (5, 6),
    ),
    10: (
        (0, 7), (1, 6), (2, 9), (3, 8), (4, 5), (0, 3), (1, 4), (5, 8),
        (6, 9), (0, 2), (3, 6), (7, 9), (0, 1), (2, 4), (5, 7), (8, 9),
        (1, 3), (2, 5), (4, 7), (6, 8), (1, 2), (3, 5), (4, 6), (7, 8),
        (2, 3), (4, 5), (6, 7), (3, 4), (5, 6),
    ),
    11: (
        (0, 10), (1, 7), (2, 9), (3, 8), (0, 3), (2, 6), (4, 9), (5, 7),
        (8, 10), (0, 2), (1, 5), (4, 8), (6, 9), (7, 10), (1, 4), (2, 7),
        (3, 6), (5, 8), (9, 10), (0, 1), (2, 4), (3, 5), (6, 8), (7, 9),
        (1, 3), (4, 6), (5, 7), (8, 9), (2, 3), (4, 5), (6, 7), (1, 2),
        (3, 4), (5, 6), (7, 8),
    ),
    12: (
        (0, 11), (1, 10), (2, 9), (3, 8), (4, 7), (5, 6), (0, 5), (1, 3),
        (6, 11), (8, 10), (0, 2), (3, 7), (4, 8), (9, 11), (1, 4), (2, 5),
        (6, 9), (7, 10), (0, 1), (2, 4), (3, 6), (5, 8), (7, 9), (10, 11),
        (1, 3), (4, 7), (5, 6), (8, 10), (1, 2), (3, 5), (6, 8), (9, 10),
        (2, 3), (4, 5), (6, 7), (8, 9), (3, 4), (5, 6), (7, 8),
    ),
    13: (
        (0, 8), (1, 7), (2, 9), (3, 10), (4, 12), (5, 11), (0, 2), (3, 4),
        (6, 11), (8, 9), (10, 12), (0, 3), (1, 6), (2, 10), (4, 8), (7, 11),
        (9, 12), (5, 8), (6, 9), (7, 10), (11, 12), (1, 5), (3, 6), (4, 7),
        (8, 10), (9, 11), (0, 1), (2, 5), (8, 9), (10, 11), (1, 3), (2, 4),
        (5, 7), (6, 8), (9, 10), (1, 2), (3, 4), (5, 6), (7, 8), (2, 3),
        (4, 5), (6, 7), (8, 9), (3, 4), (5, 6),
    ),
    14: (
        (0, 13), (1, 12), (2, 11), (3, 10), (4, 9), (5, 8), (6, 7), (0, 6),
        (1, 5), (2, 4), (7, 13), (8, 12), (9, 11), (0, 2), (3, 9), (4, 10),
        (11, 13), (1, 3), (2, 5), (4, 7), (6, 9), (8, 11), (10, 12), (0, 1),
        (3, 6), (4, 8), (5, 9), (7, 10), (12, 13), (1, 3), (2, 4), (5, 8),
        (9, 11), (10, 12), (1, 2), (3, 4), (5, 7), (6, 8), (9, 10),
        (11, 12), (2, 3), (4, 6), (7, 9), (10, 11), (4, 5), (6, 7), (8, 9),
        (3, 4), (5, 6), (7, 8), (9, 10),
    ),
    15: (
        (0, 14), (1, 13), (2, 12), (3, 11), (5, 8), (6, 10), (7, 9), (0, 5),
        (1, 7), (2, 6), (4, 11), (8, 14), (9, 13), (10, 12), (0, 2), (3, 9),
        (4, 7), (5, 10), (6, 8), (11, 13), (12, 14), (1, 5), (2, 4), (3, 6),
        (7, 10), (8, 11), (9, 12), (13, 14), (0, 2), (1, 3), (4, 9), (5, 8),
        (6, 7), (10, 12), (11, 13), (0, 1), (2, 3), (4, 6), (7, 9),
        (10, 11), (12, 13), (1, 2), (3, 5), (8, 10), (11, 12), (3, 4),
        (5, 6), (7, 8), (9, 10), (2, 3), (4, 5), (6, 7), (8, 9), (10, 11),
        (5, 6), (7, 8),
    ),
    16: (
        (0, 15), (1, 14), (2, 13), (3, 12), (4, 11), (5, 10), (6, 9), (7, 8),
        (0, 4), (1, 6), (2, 7), (3, 5), (8, 13), (9, 14), (10, 12),
        (11, 15), (0, 3), (1, 2), (4, 10), (5, 11), (6, 8), (7, 9),
        (12, 15), (13, 14), (0, 1), (2, 5), (3, 6), (4, 7), (8, 11),
        (9, 12), (10, 13), (14, 15), (1, 3), (2, 4), (5, 10), (6, 9), (7, 8),
        (11, 13), (12, 14), (1, 2), (3, 4), (5, 7), (8, 10), (11, 12),
        (13, 14), (2, 3), (4, 6), (9, 11), (12, 13), (4, 5), (6, 7), (8, 9),
        (10, 11), (3, 4), (5, 6), (7, 8), (9, 10), (11, 12), (6, 7), (8, 9),
    ),
}


def comparators(n: int) -> tuple[Comparator, ...]:
    """Return the compare-exchange pairs that sort ``n`` items, in order.

    Each pair ``(i, j)`` has ``i < j``.  Networks exist for 0 to 16 items.
    """
    if n < 0:
        raise ValueError(f"network size must be non-negative, got {n}")
    try:
        return _NETWORKS[n]
    except KeyError:
        raise ValueError(
            f"no sorting network for {n} items; at most {MAX_SIZE} are supported"
        ) from None


def sort_network(
    items: MutableSequence[Any],
    less: Callable[[Any, Any], bool] | None = None,
) -> None:
    """Sort ``items`` in place with the fixed network for its length.

    ``less(a, b)`` decides the order (``a < b`` by default).  At every
    comparator the pair is exchanged unless the first item is less than the
    second, so the sort is not stable.
    """
    before = operator.lt if less is None else less
    for i, j in comparators(len(items)):
        if not before(items[i], items[j]):
            items[i], items[j] = items[j], items[i]