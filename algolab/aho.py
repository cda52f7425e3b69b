"""Aho-Corasick automaton for finding many patterns at once."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Optional

__all__ = ["AhoCorasick"]


@dataclass(slots=True)
class _State:
    children: dict[str, int] = field(default_factory=dict)
    moves: dict[str, int] = field(default_factory=dict)
    link: int = 0
    output: int = 0
    pattern: Optional[str] = None


class AhoCorasick:
    """A set of patterns searched for together in a single pass."""

    def __init__(self) -> None:
        self._patterns: list[str] = []
        self._states: list[_State] = [_State()]
        self._ready = True

    def add_string(self, pattern: str) -> None:
        """Add a pattern to look for."""
        current = 0
        for ch in pattern:
            nxt = self._states[current].children.get(ch)
            if nxt is None:
                self._states.append(_State())
                nxt = len(self._states) - 1
                self._states[current].children[ch] = nxt
            current = nxt
        self._states[current].pattern = pattern
        self._patterns.append(pattern)
        self._ready = False

    def _go(self, state: int, ch: str) -> int:
        moves = self._states[state].moves
        nxt = moves.get(ch)
        if nxt is None:
            current = state
            while current and ch not in self._states[current].children:
                current = self._states[current].link
            nxt = self._states[current].children.get(ch, 0)
            moves[ch] = nxt
        return nxt

    def _prepare(self) -> None:
        if self._ready:
            return
        for state in self._states:
            state.moves.clear()
        root = self._states[0]
        queue: deque[int] = deque()
        for child in root.children.values():
            self._states[child].link = 0
            self._states[child].output = 0
            queue.append(child)
        while queue:
            index = queue.popleft()
            state = self._states[index]
            for ch, child in state.children.items():
                link = self._go(state.link, ch)
                target = self._states[link]
                self._states[child].link = link
                self._states[child].output = link if target.pattern is not None else target.output
                queue.append(child)
        self._ready = True

    def find_all_patterns(self, haystack: str) -> dict[str, list[int]]:
        """Return the start positions of every occurrence of every pattern.

        Each added pattern is a key; its positions are in increasing order
        and may overlap. The empty pattern is never reported.
        """
        self._prepare()
        found: dict[str, list[int]] = {pattern: [] for pattern in self._patterns}
        current = 0
        for i, ch in enumerate(haystack):
            current = self._go(current, ch)
            state = current
            while state:
                pattern = self._states[state].pattern
                if pattern is not None:
                    found[pattern].append(i - len(pattern) + 1)
                state = self._states[state].output
        return found