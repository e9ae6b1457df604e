"""Building blocks for left-balanced k-d trees: index helpers, subtree sizes, sorting networks and nearest-neighbour search."""

__version__ = "0.1.0"
__all__ = ["bits", "subtree", "network", "search"]