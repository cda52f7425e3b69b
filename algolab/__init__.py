"""Classic data structures and algorithms: heaps, disjoint sets, graphs, treaps, string search and a 15-puzzle solver."""

__version__ = "0.1.0"