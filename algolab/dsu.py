"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations

from typing import Any, Hashable

__all__ = ["DisjointSet"]


class DisjointSet:
    """A collection of disjoint sets of hashable keys."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}

    def __contains__(self, key: Any) -> bool:
        return key in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def make_set(self, key: Hashable) -> None:
        """Create a singleton set; a key already present is left alone."""
        if key in self._parent:
            return
        self._parent[key] = key
        self._rank[key] = 0

    def find_set(self, key: Hashable) -> Hashable:
        """Return the representative of the set holding ``key``.

        Raises KeyError when the key was never added.
        """
        if key not in self._parent:
            raise KeyError(key)
        root = key
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[key] != root:
            self._parent[key], key = root, self._parent[key]
        return root

    def merge(self, first: Hashable, second: Hashable) -> Hashable:
        """Unite the sets of two keys and return the new representative."""
        f = self.find_set(first)
        s = self.find_set(second)
        if f == s:
            return f
        if self._rank[f] > self._rank[s]:
            self._parent[s] = f
            return f
        self._parent[f] = s
        if self._rank[f] == self._rank[s]:
            self._rank[s] += 1
        return s