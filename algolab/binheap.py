"""Binomial heap with node handles and decrease-key support."""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional

__all__ = ["HeapError", "BinomialNode", "BinomialHeap"]


class HeapError(Exception):
    """Raised when a heap operation cannot be carried out."""


class BinomialNode:
    """A node of a binomial heap; returned by insertion as a handle."""

    __slots__ = ("key", "data", "parent", "sibling", "child", "degree")

    def __init__(self, key: Any, data: Any = None) -> None:
        self.key = key
        self.data = data
        self.parent: Optional[BinomialNode] = None
        self.sibling: Optional[BinomialNode] = None
        self.child: Optional[BinomialNode] = None
        self.degree = 0

    def __repr__(self) -> str:
        return f"BinomialNode(key={self.key!r}, data={self.data!r})"


class BinomialHeap:
    """A min-heap ordered by ``less`` (``<`` by default)."""

    def __init__(self, less: Optional[Callable[[Any, Any], bool]] = None) -> None:
        self._less = less if less is not None else operator.lt
        self._root: Optional[BinomialNode] = None

    def __bool__(self) -> bool:
        return self._root is not None

    def insert(self, key: Any, data: Any = None) -> BinomialNode:
        """Insert a key with optional data and return its node."""
        node = BinomialNode(key, data)
        self.insert_node(node)
        return node

    def insert_node(self, node: BinomialNode) -> None:
        """Insert an existing node, resetting its links."""
        node.parent = None
        node.child = None
        node.sibling = None
        node.degree = 0
        self._root = self._merge(self._root, node)

    def minimum(self) -> Optional[BinomialNode]:
        """Return the node with the smallest key, or None if empty."""
        best = self._root
        if best is None:
            return None
        current = best.sibling
        while current is not None:
            if self._less(current.key, best.key):
                best = current
            current = current.sibling
        return best

    def extract_minimum(self) -> BinomialNode:
        """Remove and return the node with the smallest key."""
        x = self.minimum()
        if x is None:
            raise HeapError("Heap is empty. Don't try to extract minimum.")

        if self._root is x:
            self._root = x.sibling
        else:
            prev = self._root
            while prev.sibling is not x:
                prev = prev.sibling
            prev.sibling = x.sibling
        x.sibling = None

        reversed_head: Optional[BinomialNode] = None
        child = x.child
        while child is not None:
            following = child.sibling
            child.parent = None
            child.sibling = reversed_head
            reversed_head = child
            child = following
        x.child = None
        x.degree = 0

        self._root = self._merge(self._root, reversed_head)
        return x

    def decrease_key(self, node: Optional[BinomialNode], key: Any) -> None:
        """Lower a node's key; keys and data move up towards the root."""
        if node is None:
            raise HeapError("There is no node to decrease key.")
        if not self._less(key, node.key):
            return
        node.key = key
        current = node
        parent = node.parent
        while parent is not None:
            if self._less(parent.key, current.key):
                break
            current.key, parent.key = parent.key, current.key
            current.data, parent.data = parent.data, current.data
            current = parent
            parent = current.parent

    def erase(self, node: Optional[BinomialNode]) -> None:
        """Remove an entry by bringing it to the minimum and extracting it."""
        if node is None:
            raise HeapError("There is no node to erase.")
        smallest = self.minimum()
        if smallest is None:
            raise HeapError("There is no node to erase.")
        self.decrease_key(node, smallest.key)
        self.extract_minimum()

    def dump(self) -> str:
        """Return the heap as indented lines of keys, or 'Empty'."""
        if self._root is None:
            return "Empty\n"
        lines: list[str] = []
        self._dump(self._root, 0, lines)
        return "".join(line + "\n" for line in lines)

    def _dump(self, node: Optional[BinomialNode], level: int, lines: list[str]) -> None:
        while node is not None:
            lines.append("  " * level + str(node.key))
            if node.child is not None:
                self._dump(node.child, level + 1, lines)
            node = node.sibling

    @staticmethod
    def _link(child: BinomialNode, parent: BinomialNode) -> None:
        child.parent = parent
        child.sibling = parent.child
        parent.child = child
        parent.degree += 1

    @staticmethod
    def _merge_roots(
        first: Optional[BinomialNode], second: Optional[BinomialNode]
    ) -> Optional[BinomialNode]:
        head: Optional[BinomialNode] = None
        tail: Optional[BinomialNode] = None
        while first is not None or second is not None:
            first_degree = first.degree if first is not None else float("inf")
            second_degree = second.degree if second is not None else float("inf")
            if first_degree < second_degree:
                taken, first = first, first.sibling
            else:
                taken, second = second, second.sibling
            if tail is None:
                head = taken
            else:
                tail.sibling = taken
            tail = taken
        return head

    def _merge(
        self, first: Optional[BinomialNode], second: Optional[BinomialNode]
    ) -> Optional[BinomialNode]:
        x = self._merge_roots(first, second)
        head = x
        if x is None:
            return None
        prev: Optional[BinomialNode] = None
        nxt = x.sibling
        while nxt is not None:
            following_degree = nxt.sibling.degree if nxt.sibling is not None else -1
            if x.degree == following_degree or x.degree != nxt.degree:
                prev, x = x, nxt
            elif self._less(x.key, nxt.key):
                x.sibling = nxt.sibling
                self._link(nxt, x)
            else:
                if prev is None:
                    head = nxt
                else:
                    prev.sibling = nxt
                self._link(x, nxt)
                x = nxt
            nxt = x.sibling
        return head