"""Treap: a binary search tree on keys that is a min-heap on priorities."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

__all__ = ["TreapNode", "Treap"]

Less = Callable[[Any, Any], bool]


@dataclass(eq=False, slots=True)
class TreapNode:
    """A treap node holding a key, a priority and two subtrees."""

    key: Any
    priority: Any
    left: Optional[TreapNode] = field(default=None, repr=False)
    right: Optional[TreapNode] = field(default=None, repr=False)


class Treap:
    """Keys are ordered by ``key_less``; parents never have a larger priority."""

    def __init__(
        self, key_less: Optional[Less] = None, priority_less: Optional[Less] = None
    ) -> None:
        self._key_less = key_less if key_less is not None else operator.lt
        self._priority_less = priority_less if priority_less is not None else operator.lt
        self._root: Optional[TreapNode] = None

    def root(self) -> Optional[TreapNode]:
        """Return the root node, or None for an empty treap."""
        return self._root

    def _with_root(self, root: Optional[TreapNode]) -> Treap:
        other = Treap(self._key_less, self._priority_less)
        other._root = root
        return other

    def build(self, priorities: Iterable[Any]) -> None:
        """Build a Cartesian tree: keys are positions, priorities the values.

        Runs in linear time; a later equal priority ends up above an earlier one.
        """
        self._root = None
        spine: list[TreapNode] = []
        for index, priority in enumerate(priorities):
            current = TreapNode(index, priority)
            popped: Optional[TreapNode] = None
            while spine and not self._priority_less(spine[-1].priority, priority):
                popped = spine.pop()
            current.left = popped
            if spine:
                spine[-1].right = current
            else:
                self._root = current
            spine.append(current)

    def _merge(
        self, left: Optional[TreapNode], right: Optional[TreapNode]
    ) -> Optional[TreapNode]:
        if left is None:
            return right
        if right is None:
            return left
        if self._priority_less(left.priority, right.priority):
            left.right = self._merge(left.right, right)
            return left
        right.left = self._merge(left, right.left)
        return right

    def _split(
        self, node: Optional[TreapNode], key: Any, inclusive: bool
    ) -> tuple[Optional[TreapNode], Optional[TreapNode]]:
        """Split into keys before ``key`` and the rest.

        With ``inclusive`` the keys equal to ``key`` go to the first part.
        """
        if node is None:
            return None, None
        if inclusive:
            goes_left = not self._key_less(key, node.key)
        else:
            goes_left = self._key_less(node.key, key)
        if goes_left:
            first, second = self._split(node.right, key, inclusive)
            node.right = first
            return node, second
        first, second = self._split(node.left, key, inclusive)
        node.left = second
        return first, node

    def merge(self, other: Treap) -> None:
        """Append ``other``, whose keys must all follow ours; ``other`` is emptied."""
        self._root = self._merge(self._root, other._root)
        other.clear()

    def split(self, key: Any) -> tuple[Treap, Treap]:
        """Split into a treap of keys less than ``key`` and one of the rest.

        This treap is left empty.
        """
        first, second = self._split(self._root, key, inclusive=False)
        self._root = None
        return self._with_root(first), self._with_root(second)

    def insert(self, key: Any, priority: Any) -> None:
        """Insert a key; it is placed before existing equal keys."""
        node = TreapNode(key, priority)
        first, second = self._split(self._root, key, inclusive=False)
        self._root = self._merge(self._merge(first, node), second)

    def erase(self, key: Any) -> None:
        """Remove every node with the given key."""
        first, rest = self._split(self._root, key, inclusive=False)
        _, second = self._split(rest, key, inclusive=True)
        self._root = self._merge(first, second)

    def clear(self) -> None:
        self._root = None

    def minimum(self) -> Optional[TreapNode]:
        """Return the node with the smallest key, or None if empty."""
        current = self._root
        if current is None:
            return None
        while current.left is not None:
            current = current.left
        return current

    def maximum(self) -> Optional[TreapNode]:
        """Return the node with the largest key, or None if empty."""
        current = self._root
        if current is None:
            return None
        while current.right is not None:
            current = current.right
        return current

    def dump(self, node: Optional[TreapNode] = None) -> str:
        """Return a subtree (the whole treap by default) as indented lines.

        Each line reads ``<tag>: key(priority)`` where the tag is ``r`` for
        the starting node and ``L``/``R`` for left and right children.
        """
        start = node if node is not None else self._root
        if start is None:
            return ""
        lines: list[str] = []
        stack: list[tuple[TreapNode, int, str]] = [(start, 0, "r")]
        while stack:
            current, depth, tag = stack.pop()
            lines.append(f"{'  ' * depth}{tag}: {current.key}({current.priority})")
            if current.right is not None:
                stack.append((current.right, depth + 1, "R"))
            if current.left is not None:
                stack.append((current.left, depth + 1, "L"))
        return "".join(line + "\n" for line in lines)