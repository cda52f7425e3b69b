"""Depth-first, breadth-first and enter/leave traversals of a Graph."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Hashable, Iterator, Optional

from algolab.graph import Graph, GraphError, Node

__all__ = ["Color", "dfs", "bfs", "pseudo_dfs"]

_NO_NODE = object()


class Color(IntEnum):
    """Visit state of a node during a traversal."""

    WHITE = 0
    GRAY = 1
    BLACK = 2


def _prepare(graph: Graph, start: Optional[Hashable]) -> Optional[tuple[Hashable, dict]]:
    """Pick the start node and colour every node white.

    Returns None for an empty graph when no start is given.
    """
    if start is None:
        if graph.is_empty():
            return None
        start = next(iter(graph))
    elif start not in graph:
        raise GraphError(
            "Error in creating DFS or BFS search iterator. There is no node with this id."
        )
    colors = {node_id: Color.WHITE for node_id in graph}
    return start, colors


def _next_white(colors: dict) -> object:
    for node_id, color in colors.items():
        if color is Color.WHITE:
            return node_id
    return _NO_NODE


def _search(graph: Graph, start: Hashable, colors: dict, depth_first: bool) -> Iterator[Node]:
    pending: deque = deque()
    current = start
    colors[current] = Color.BLACK
    while True:
        yield graph.node(current)
        children = graph.out_nodes(current)
        if depth_first:
            children.reverse()
        for child in children:
            if colors[child.id] is Color.WHITE:
                colors[child.id] = Color.GRAY
                pending.append(child.id)
        if pending:
            current = pending.pop() if depth_first else pending.popleft()
        else:
            current = _next_white(colors)
            if current is _NO_NODE:
                return
        colors[current] = Color.BLACK


def dfs(graph: Graph, start: Optional[Hashable] = None) -> Iterator[Node]:
    """Yield every node once, depth first from ``start``.

    Nodes not reachable from ``start`` follow, each beginning a new search.
    """
    prepared = _prepare(graph, start)
    if prepared is None:
        return iter(())
    return _search(graph, *prepared, depth_first=True)


def bfs(graph: Graph, start: Optional[Hashable] = None) -> Iterator[Node]:
    """Yield every node once, breadth first from ``start``.

    Nodes not reachable from ``start`` follow, each beginning a new search.
    """
    prepared = _prepare(graph, start)
    if prepared is None:
        return iter(())
    return _search(graph, *prepared, depth_first=False)


def _enter_leave(graph: Graph, start: Hashable, colors: dict) -> Iterator[tuple[Node, Color]]:
    stack = [start]
    colors[start] = Color.GRAY
    yield graph.node(start), Color.GRAY
    while True:
        if stack:
            top = stack[-1]
            for child in graph.out_nodes(top):
                if colors[child.id] is Color.WHITE:
                    colors[child.id] = Color.GRAY
                    stack.append(child.id)
                    yield child, Color.GRAY
                    break
            else:
                stack.pop()
                colors[top] = Color.BLACK
                yield graph.node(top), Color.BLACK
        else:
            fresh = _next_white(colors)
            if fresh is _NO_NODE:
                return
            colors[fresh] = Color.GRAY
            stack.append(fresh)
            yield graph.node(fresh), Color.GRAY


def pseudo_dfs(graph: Graph, start: Optional[Hashable] = None) -> Iterator[tuple[Node, Color]]:
    """Yield ``(node, color)`` as a depth-first search enters and leaves nodes.

    A node is yielded with GRAY when it is entered and with BLACK when all
    its descendants are done.
    """
    prepared = _prepare(graph, start)
    if prepared is None:
        return iter(())
    return _enter_leave(graph, *prepared)