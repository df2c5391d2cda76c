"""Algorithms and data structures: geometry, graphs, number theory, strings and search."""

__version__ = "0.1.0"

__all__ = [
    "biconnected",
    "convex_hull_trick",
    "convolution",
    "flow",
    "geometry",
    "graph_basics",
    "matching",
    "matrix",
    "number_theory",
    "persistent_segment_tree",
    "primality",
    "search",
    "segment_tree",
    "shortest_paths",
    "strings",
    "trees",
]