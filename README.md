# lbkdtree

Small, dependency-free building blocks for left-balanced k-d trees stored
implicitly in a flat sequence: node `i` has its children at `2i + 1` and
`2i + 2`, and a node at depth `d` splits on coordinate `d % dim`.

## Modules

- `lbkdtree.bits`: integer and comparison helpers.
  - `absolute(n)` returns the magnitude of `n`.
  - `clz(n, width)` counts the leading zero bits of `n` taken as an unsigned
    `width`-bit value (negative values in two's complement). A non-positive
    `width` raises `ValueError`.
  - `left_child(n)` and `right_child(n)` give `2n + 1` and `2n + 2`.
  - `minimum(a, b)` returns `a` if `a < b`, otherwise `b`.
- `lbkdtree.subtree`: `subtree_size(s, n, levels)` gives the number of nodes
  in the subtree rooted at `s` of a left-balanced tree of `n` nodes with
  `levels` levels (normally `n.bit_length()`). It returns 0 when `s >= n`,
  and raises `ValueError` for negative arguments or a node lying below the
  last level.
- `lbkdtree.network`: fixed sorting networks for 0 to 16 items.
  - `comparators(n)` returns the compare-exchange pairs `(i, j)` in order;
    other sizes raise `ValueError`.
  - `sort_network(items, less=None)` sorts a mutable sequence in place with
    the network for its length. `less(a, b)` sets the order (`<` by
    default); a pair is exchanged unless the first item is less than the
    second, so the sort is not stable.
- `lbkdtree.search`: nearest-neighbour search.
  - `Neighbour` is a frozen dataclass with `index` and `distance`.
  - `squared_distance(a, b)` is the squared Euclidean distance; points of
    different dimension raise `ValueError`.
  - `nearest(points, query, r_min=0, r_max=math.inf)` returns the closest
    `Neighbour`, or `None` when no point qualifies. An empty `query` raises
    `ValueError`.

## Example

```python
from lbkdtree.search import nearest

points = [
    (46, 63), (15, 43), (53, 67), (40, 33), (44, 58),
    (68, 21), (62, 69), (10, 15), (45, 40), (25, 54),
]
hit = nearest(points, (50, 50), r_min=0, r_max=100)
print(hit.index, hit.distance)   # 4 100
```

Distances are squared. A point is a candidate only when its distance is
strictly greater than `r_min`. `r_max` is the starting search radius:
subtrees whose splitting plane lies farther away are skipped, and the
radius shrinks to the best distance found so far.

## What it does not do

The package does not build trees. `nearest` expects points already arranged
in left-balanced k-d tree order; on points in any other order it still
returns a point, but not necessarily the nearest one. There is no
k-nearest search and no command-line program.

## Installing

```
pip install .
pip install ".[test]"
pytest
```