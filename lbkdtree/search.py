"""Nearest-neighbour search over points stored as an implicit kd-tree.

The points are expected in left-balanced kd-tree order: node ``i`` has its
children at ``2i + 1`` and ``2i + 2``, and a node on depth ``d`` splits its
subtrees on coordinate ``d % dim``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .bits import left_child, right_child


@dataclass(frozen=True)
class Neighbour:
    """A point found by a search: its position in the input and its squared distance."""

    index: int
    distance: float


def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Squared Euclidean distance between two points of equal dimension."""
    try:
        return sum((x - y) * (x - y) for x, y in zip(a, b, strict=True))
    except ValueError:
        raise ValueError(
            f"points differ in dimension: {len(a)} and {len(b)}"
        ) from None


def nearest(
    points: Sequence[Sequence[float]],
    query: Sequence[float],
    r_min: float = 0,
    r_max: float = math.inf,
) -> Neighbour | None:
    """Find the point of the tree closest to ``query``.

    Distances are squared.  Only points strictly farther than ``r_min`` are
    candidates.  ``r_max`` is the initial search radius: subtrees whose
    splitting plane lies farther away than it are skipped, and it shrinks to
    the best distance found so far.  Returns ``None`` if no point qualifies.
    """
    dim = len(query)
    if dim == 0:
        raise ValueError("query point has no coordinates")

    count = len(points)
    best: Neighbour | None = None
    radius = r_max

    # Each entry: node index, its depth, and squared distance to the plane
    # separating it from the side the query lies on.
    pending: list[tuple[int, int, float]] = [(0, 0, 0)]
    while pending:
        node, depth, plane = pending.pop()
        if node >= count or plane > radius:
            continue

        point = points[node]
        dst = squared_distance(query, point)
        if dst > r_min and (best is None or dst < best.distance):
            best = Neighbour(node, dst)
            if dst < radius:
                radius = dst

        axis = depth % dim
        diff = query[axis] - point[axis]
        if diff < 0:
            near, far = left_child(node), right_child(node)
        else:
            near, far = right_child(node), left_child(node)

        pending.append((far, depth + 1, diff * diff))
        pending.append((near, depth + 1, 0))

    return best