"""Strongly connected components and minimum spanning trees."""

from __future__ import annotations

from typing import Any, Hashable

from algolab.dsu import DisjointSet
from algolab.fibheap import FibonacciHeap
from algolab.graph import Graph
from algolab.traversal import Color, pseudo_dfs

__all__ = ["tarjan", "prim", "kruskal"]

_UNREACHED = (1, None)


def tarjan(graph: Graph) -> list[list[Hashable]]:
    """Return the strongly connected components of ``graph``.

    Components come out in the order they are completed; inside a
    component the node that closed it is last.
    """
    index: dict[Hashable, int] = {}
    low: dict[Hashable, Any] = {}
    stack: list[Hashable] = []
    components: list[list[Hashable]] = []
    counter = 0

    for node, color in pseudo_dfs(graph):
        node_id = node.id
        if color is Color.GRAY:
            stack.append(node_id)
            index[node_id] = low[node_id] = counter
            counter += 1
            continue
        for child in graph.out_nodes(node_id):
            child_low = low.get(child.id)
            if child_low is not None and child_low < low[node_id]:
                low[node_id] = child_low
        if low[node_id] == index[node_id]:
            component: list[Hashable] = []
            while True:
                member = stack.pop()
                low[member] = None
                component.append(member)
                if member == node_id:
                    break
            components.append(component)
    return components


def _prim_less(first: tuple, second: tuple) -> bool:
    if first[0] != second[0]:
        return first[0] < second[0]
    if first[0] == 1:
        return False
    return first[1] < second[1]


def _empty_tree(graph: Graph) -> Graph:
    tree = Graph(graph.node_default, graph.edge_default)
    for node in graph.nodes():
        tree.insert_node(node.id, node.value)
    return tree


def prim(graph: Graph) -> Graph:
    """Return a minimum spanning forest built by Prim's algorithm.

    The result holds every node of ``graph`` with its value and one directed
    edge from parent to child, carrying its weight, for each tree edge.
    """
    tree = _empty_tree(graph)
    heap = FibonacciHeap(_prim_less)
    handles = {node.id: heap.insert(_UNREACHED, node.id) for node in graph.nodes()}
    parents: dict[Hashable, Hashable] = {}
    done: set[Hashable] = set()

    while heap:
        entry = heap.extract_minimum()
        current = entry.data
        if current in parents:
            tree.insert_edge(parents[current], current, entry.key[1])
        done.add(current)
        for edge in graph.out_edges(current):
            target = edge.target.id
            if target in done:
                continue
            handle = handles[target]
            candidate = (0, edge.value)
            if _prim_less(candidate, handle.key):
                heap.decrease_key(handle, candidate)
                parents[target] = current
    return tree


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest built by Kruskal's algorithm.

    Each chosen edge appears in the result in both directions.
    """
    tree = _empty_tree(graph)
    sets = DisjointSet()
    for node in graph.nodes():
        sets.make_set(node.id)
    for edge in sorted(graph.edges(), key=lambda e: e.value):
        first, second = edge.nodes()
        if sets.find_set(first) != sets.find_set(second):
            tree.insert_bi_edge(first, second, edge.value)
            sets.merge(first, second)
    return tree