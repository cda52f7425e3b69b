"""Fibonacci heap with node handles, merging and decrease-key."""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional

from algolab.binheap import HeapError

__all__ = ["FibonacciNode", "FibonacciHeap"]


class FibonacciNode:
    """A node of a Fibonacci heap; returned by insertion as a handle."""

    __slots__ = ("key", "data", "parent", "left", "right", "child", "mark", "degree")

    def __init__(self, key: Any, data: Any = None) -> None:
        self.key = key
        self.data = data
        self.parent: Optional[FibonacciNode] = None
        self.left: FibonacciNode = self
        self.right: FibonacciNode = self
        self.child: Optional[FibonacciNode] = None
        self.mark = False
        self.degree = 0

    def __repr__(self) -> str:
        return f"FibonacciNode(key={self.key!r}, data={self.data!r})"


class FibonacciHeap:
    """A min-heap ordered by ``less`` (``<`` by default)."""

    def __init__(self, less: Optional[Callable[[Any, Any], bool]] = None) -> None:
        self._less = less if less is not None else operator.lt
        self._root: Optional[FibonacciNode] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._root is not None

    def is_empty(self) -> bool:
        return self._root is None

    def minimum(self) -> Optional[FibonacciNode]:
        """Return the node with the smallest key, or None if empty."""
        return self._root

    def insert(self, key: Any, data: Any = None) -> FibonacciNode:
        """Insert a key with optional data and return its node."""
        node = FibonacciNode(key, data)
        self.insert_node(node)
        return node

    def insert_node(self, node: FibonacciNode) -> None:
        """Insert an existing node, resetting its links."""
        node.degree = 0
        node.parent = None
        node.child = None
        node.left = node
        node.right = node
        node.mark = False
        if self._root is None:
            self._root = node
        else:
            self._insert_to_list(self._root, node)
            if self._less(node.key, self._root.key):
                self._root = node
        self._count += 1

    def merge(self, other: Optional[FibonacciHeap]) -> None:
        """Move every node of ``other`` into this heap, leaving it empty."""
        if other is None or other._root is None:
            return
        if self._root is None:
            self._root = other._root
        else:
            mine_next = self._root.right
            theirs_last = other._root.left
            self._root.right = other._root
            other._root.left = self._root
            mine_next.left = theirs_last
            theirs_last.right = mine_next
            if self._less(other._root.key, self._root.key):
                self._root = other._root
        self._count += other._count
        other._root = None
        other._count = 0

    def extract_minimum(self) -> FibonacciNode:
        """Remove and return the node with the smallest key."""
        answer = self._root
        if answer is None:
            raise HeapError("Heap is empty. Don't try to extract minimum.")
        child = answer.child
        for _ in range(answer.degree):
            child.parent = None
            moving = child
            child = child.right
            self._insert_to_list(answer, moving)
        if answer.right is answer:
            self._root = None
            self._count = 0
        else:
            self._root = answer.right
            self._erase_from_list(answer)
            answer.child = None
            self._consolidate()
            self._count -= 1
        answer.child = None
        answer.degree = 0
        answer.left = answer
        answer.right = answer
        return answer

    def decrease_key(self, node: Optional[FibonacciNode], key: Any) -> None:
        """Lower a node's key, cutting it from its parent when needed."""
        if node is None:
            raise HeapError("There is no node to decrease key.")
        if self._less(node.key, key):
            return
        node.key = key
        parent = node.parent
        if parent is None:
            if self._less(node.key, self._root.key):
                self._root = node
        elif self._less(node.key, parent.key):
            self._cut(node, parent)
            self._cascading_cut(parent)

    def erase(self, node: Optional[FibonacciNode]) -> None:
        """Remove the given node from the heap."""
        if node is None or self._root is None:
            raise HeapError("There is no node to erase.")
        self.decrease_key(node, self._root.key)
        parent = node.parent
        if parent is not None:
            self._cut(node, parent)
            self._cascading_cut(parent)
        self._root = node
        self.extract_minimum()

    def dump(self) -> str:
        """Return the heap as indented lines of keys, or 'Empty'."""
        if self._root is None:
            return "Empty\n"
        lines: list[str] = []
        self._dump(self._root, 0, lines)
        return "".join(line + "\n" for line in lines)

    def _dump(self, base: FibonacciNode, level: int, lines: list[str]) -> None:
        current = base
        while True:
            lines.append("  " * level + str(current.key))
            if current.child is not None:
                self._dump(current.child, level + 1, lines)
            current = current.right
            if current is base:
                break

    @staticmethod
    def _insert_to_list(anchor: FibonacciNode, node: FibonacciNode) -> None:
        last = anchor.left
        last.right = node
        node.right = anchor
        node.left = last
        anchor.left = node
        node.parent = anchor.parent

    @staticmethod
    def _erase_from_list(node: FibonacciNode) -> None:
        node.left.right = node.right
        node.right.left = node.left
        parent = node.parent
        if parent is not None and parent.child is node:
            parent.child = node.right if node.right is not node else None
        node.parent = None
        node.left = node
        node.right = node

    def _link(self, child: FibonacciNode, parent: FibonacciNode) -> None:
        self._erase_from_list(child)
        if parent.child is not None:
            self._insert_to_list(parent.child, child)
        else:
            parent.child = child
            child.left = child
            child.right = child
        child.parent = parent
        parent.degree += 1
        child.mark = False

    def _consolidate(self) -> None:
        roots = [self._root]
        current = self._root.right
        while current is not self._root:
            roots.append(current)
            current = current.right

        by_degree: dict[int, FibonacciNode] = {}
        for x in roots:
            degree = x.degree
            while degree in by_degree:
                y = by_degree.pop(degree)
                if self._less(y.key, x.key):
                    x, y = y, x
                self._link(y, x)
                degree += 1
            by_degree[degree] = x

        self._root = None
        for degree in sorted(by_degree):
            node = by_degree[degree]
            if self._root is None:
                self._root = node
                node.left = node
                node.right = node
            else:
                self._insert_to_list(self._root, node)
                if self._less(node.key, self._root.key):
                    self._root = node

    def _cut(self, child: FibonacciNode, parent: FibonacciNode) -> None:
        self._erase_from_list(child)
        parent.degree -= 1
        self._insert_to_list(self._root, child)
        if self._less(child.key, self._root.key):
            self._root = child
        child.parent = None
        child.mark = False

    def _cascading_cut(self, node: FibonacciNode) -> None:
        parent = node.parent
        while parent is not None:
            if not node.mark:
                node.mark = True
                return
            self._cut(node, parent)
            node = parent
            parent = node.parent