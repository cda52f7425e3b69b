"""Directed graph with valued nodes and edges."""

from __future__ import annotations

from typing import Any, Hashable, Iterator, Optional

__all__ = ["GraphError", "Node", "Edge", "Graph"]

_MISSING = object()


class GraphError(Exception):
    """Raised when a graph operation refers to missing or duplicate items."""


class Node:
    """A graph node: an id, a value and its incident edges."""

    __slots__ = ("id", "value", "children", "parents")

    def __init__(self, node_id: Hashable, value: Any = None) -> None:
        self.id = node_id
        self.value = value
        self.children: dict[Hashable, Edge] = {}
        self.parents: dict[Hashable, Edge] = {}

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, value={self.value!r})"


class Edge:
    """A directed edge from ``source`` to ``target`` carrying a value."""

    __slots__ = ("value", "source", "target")

    def __init__(self, source: Node, target: Node, value: Any = None) -> None:
        self.value = value
        self.source = source
        self.target = target

    def nodes(self) -> tuple[Hashable, Hashable]:
        """Return the ids of the edge's endpoints."""
        return (self.source.id, self.target.id)

    def __repr__(self) -> str:
        return f"Edge({self.source.id!r} -> {self.target.id!r}, value={self.value!r})"


class Graph:
    """A directed graph keyed by node id, at most one edge per ordered pair."""

    def __init__(self, node_default: Any = None, edge_default: Any = None) -> None:
        self.node_default = node_default
        self.edge_default = edge_default
        self._nodes: dict[Hashable, Node] = {}
        self._edges: dict[tuple[Hashable, Hashable], Edge] = {}

    def copy(self) -> Graph:
        """Return an independent graph with the same nodes and edges."""
        other = Graph(self.node_default, self.edge_default)
        for node in self._nodes.values():
            other.insert_node(node.id, node.value)
        for (first, second), edge in self._edges.items():
            other.insert_edge(first, second, edge.value)
        return other

    def _get(self, node_id: Hashable, where: str) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise GraphError(
                f"Error in {where}. There is no node with this id."
            ) from None

    def insert_node(self, node_id: Hashable, value: Any = _MISSING) -> Node:
        """Add a node and return it; the id must be new."""
        if node_id in self._nodes:
            raise GraphError("Error in insert_node. Node has already existed")
        node = Node(node_id, self.node_default if value is _MISSING else value)
        self._nodes[node_id] = node
        return node

    def insert_edge(self, first: Hashable, second: Hashable, value: Any = _MISSING) -> Edge:
        """Add a directed edge between existing nodes and return it."""
        source = self._nodes.get(first)
        target = self._nodes.get(second)
        if source is None or target is None:
            raise GraphError("Error in insert_edge. There is no node to insert edge.")
        if (first, second) in self._edges:
            raise GraphError("Error in insert_edge. Edge has already existed")
        edge = Edge(source, target, self.edge_default if value is _MISSING else value)
        source.children[second] = edge
        target.parents[first] = edge
        self._edges[(first, second)] = edge
        return edge

    def insert_bi_edge(self, first: Hashable, second: Hashable, value: Any = _MISSING) -> None:
        """Add edges in both directions with the same value."""
        self.insert_edge(first, second, value)
        self.insert_edge(second, first, value)

    def erase_edge(self, first: Hashable, second: Hashable) -> None:
        """Remove the edge from ``first`` to ``second``."""
        edge = self._edges.pop((first, second), None)
        if edge is None:
            raise GraphError("Error in erase_edge. There is no edge to erase.")
        edge.source.children.pop(second, None)
        edge.target.parents.pop(first, None)

    def erase_node(self, node_id: Hashable) -> None:
        """Remove a node together with every edge touching it."""
        node = self._nodes.get(node_id)
        if node is None:
            raise GraphError("Error in erase_node. There is no node to erase.")
        for child in list(node.children):
            self.erase_edge(node_id, child)
        for parent in list(node.parents):
            self.erase_edge(parent, node_id)
        del self._nodes[node_id]

    def edge(self, first: Hashable, second: Hashable) -> Edge:
        """Return the edge from ``first`` to ``second``."""
        node = self._get(first, "edge")
        try:
            return node.children[second]
        except KeyError:
            raise GraphError("Error in edge. There is no such edge.") from None

    def node(self, node_id: Hashable) -> Node:
        """Return the node with the given id."""
        return self._get(node_id, "node")

    def out_edges(self, node_id: Hashable) -> list[Edge]:
        return list(self._get(node_id, "out_edges").children.values())

    def in_edges(self, node_id: Hashable) -> list[Edge]:
        return list(self._get(node_id, "in_edges").parents.values())

    def out_nodes(self, node_id: Hashable) -> list[Node]:
        return [e.target for e in self._get(node_id, "out_nodes").children.values()]

    def in_nodes(self, node_id: Hashable) -> list[Node]:
        return [e.source for e in self._get(node_id, "in_nodes").parents.values()]

    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    def edges(self) -> list[Edge]:
        """Return all edges, ordered by their (source, target) ids when possible."""
        try:
            keys = sorted(self._edges)
        except TypeError:
            keys = list(self._edges)
        return [self._edges[key] for key in keys]

    def __getitem__(self, node_id: Hashable) -> Any:
        return self._get(node_id, "operator[]").value

    def __setitem__(self, node_id: Hashable, value: Any) -> None:
        self._get(node_id, "operator[]").value = value

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._nodes)

    def clear(self) -> None:
        self._nodes.clear()
        self._edges.clear()

    def is_empty(self) -> bool:
        return not self._nodes