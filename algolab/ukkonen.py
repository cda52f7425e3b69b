"""Suffix tree built online with Ukkonen's algorithm."""

from __future__ import annotations

import os
from typing import Optional, Union

__all__ = ["read_text", "SuffixTree"]

_END = object()


def read_text(path: Union[str, os.PathLike]) -> str:
    """Return the whole content of a text file, line endings untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _show(symbol: object) -> str:
    if symbol is _END:
        return "$"
    if symbol == "\n":
        return "~"
    return str(symbol)


class SuffixTree:
    """Suffix tree of a string, answering occurrence counts and positions."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._symbols: list[object] = [*text, _END]
        self._start: list[int] = []
        self._end: list[int] = []
        self._link: list[int] = []
        self._children: list[dict[object, int]] = []
        self._new_node(-1, -1)
        self._build()

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> SuffixTree:
        """Build the tree of a file's content."""
        return cls(read_text(path))

    def _new_node(self, start: int, end: int) -> int:
        self._start.append(start)
        self._end.append(end)
        self._link.append(0)
        self._children.append({})
        return len(self._start) - 1

    def _build(self) -> None:
        symbols = self._symbols
        size = len(symbols)
        start, end, link, children = self._start, self._end, self._link, self._children
        active_node = active_edge = active_len = remainder = 0
        for pos, symbol in enumerate(symbols):
            remainder += 1
            need_link = 0
            while remainder:
                if active_len == 0:
                    active_edge = pos
                edge_symbol = symbols[active_edge]
                nxt = children[active_node].get(edge_symbol)
                if nxt is None:
                    children[active_node][edge_symbol] = self._new_node(pos, size)
                    if need_link:
                        link[need_link] = active_node
                    need_link = active_node
                else:
                    length = min(end[nxt], pos + 1) - start[nxt]
                    if active_len >= length:
                        active_edge += length
                        active_len -= length
                        active_node = nxt
                        continue
                    if symbols[start[nxt] + active_len] == symbol:
                        active_len += 1
                        if need_link:
                            link[need_link] = active_node
                        need_link = active_node
                        break
                    split = self._new_node(start[nxt], start[nxt] + active_len)
                    children[active_node][edge_symbol] = split
                    children[split][symbol] = self._new_node(pos, size)
                    start[nxt] += active_len
                    children[split][symbols[start[nxt]]] = nxt
                    if need_link:
                        link[need_link] = split
                    need_link = split
                remainder -= 1
                if active_node == 0 and active_len > 0:
                    active_len -= 1
                    active_edge = pos - remainder + 1
                else:
                    active_node = link[active_node]

    def _locate(self, needle: str) -> Optional[tuple[int, int]]:
        """Return the node where ``needle`` ends and its string depth."""
        node = depth = matched = 0
        while matched < len(needle):
            child = self._children[node].get(needle[matched])
            if child is None:
                return None
            first = self._start[child]
            length = self._end[child] - first
            take = min(length, len(needle) - matched)
            if self._symbols[first : first + take] != list(needle[matched : matched + take]):
                return None
            matched += take
            depth += length
            node = child
        return node, depth

    def _leaf_starts(self, node: int, depth: int) -> list[int]:
        size = len(self._symbols)
        starts: list[int] = []
        stack = [(node, depth)]
        while stack:
            current, current_depth = stack.pop()
            children = self._children[current]
            if not children:
                starts.append(size - current_depth)
                continue
            for child in children.values():
                stack.append((child, current_depth + self._end[child] - self._start[child]))
        return starts

    def count(self, needle: str) -> int:
        """Return how many times ``needle`` occurs, overlaps included."""
        return len(self.find(needle))

    def find(self, needle: str) -> list[int]:
        """Return the start positions of every occurrence, in increasing order."""
        located = self._locate(needle)
        if located is None:
            return []
        return sorted(self._leaf_starts(*located))

    def _ordered_children(self, node: int) -> list[int]:
        items = sorted(
            self._children[node].items(),
            key=lambda item: (item[0] is _END, "" if item[0] is _END else item[0]),
        )
        return [child for _, child in items]

    def dump(self) -> str:
        """Return the tree as indented ``index: label`` lines.

        Newlines in labels are shown as ``~`` and the terminator as ``$``.
        """
        lines: list[str] = []
        stack = [(0, 0)]
        while stack:
            node, level = stack.pop()
            if node:
                label = "".join(
                    _show(symbol)
                    for symbol in self._symbols[self._start[node] : self._end[node]]
                )
            else:
                label = ""
            lines.append(f"{'  ' * level}{node}: {label}")
            for child in reversed(self._ordered_children(node)):
                stack.append((child, level + 1))
        return "".join(line + "\n" for line in lines)