"""Fifteen puzzle solver using iterative deepening with a Manhattan bound."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

__all__ = ["Puzzle", "parse_board", "main"]

SIZE = 4
CELLS = SIZE * SIZE
BORDER = 50

# Direction letter and the offset the blank moves by.
_MOVES = (("l", 0, -1), ("d", 1, 0), ("r", 0, 1), ("u", -1, 0))
_REVERSE = (2, 3, 0, 1)


def _heuristic(board: Sequence[int]) -> int:
    total = 0
    for position, value in enumerate(board):
        row, col = divmod(position, SIZE)
        if value:
            goal_row, goal_col = divmod(value - 1, SIZE)
            total += abs(goal_row - row) + abs(goal_col - col)
        else:
            total += (SIZE - 1 - row) + (SIZE - 1 - col)
    return total


class Puzzle:
    """A 4x4 sliding puzzle; 0 stands for the blank.

    The goal is 1..15 in reading order with the blank in the last cell.
    """

    def __init__(self, cells: Iterable[int]) -> None:
        board = tuple(int(value) for value in cells)
        if sorted(board) != list(range(CELLS)):
            raise ValueError(
                f"a board must hold each number from 0 to {CELLS - 1} exactly once"
            )
        self.cells = board

    @property
    def rows(self) -> list[list[int]]:
        """The board as a list of rows."""
        return [list(self.cells[start : start + SIZE]) for start in range(0, CELLS, SIZE)]

    def heuristic(self) -> int:
        """Sum of the Manhattan distances of every cell, blank included."""
        return _heuristic(self.cells)

    def has_solution(self) -> bool:
        """Tell whether the goal can be reached from this board."""
        cells = self.cells
        inversions = sum(
            1
            for i, first in enumerate(cells)
            for second in cells[i:]
            if second and second < first
        )
        blank_row = cells.index(0) // SIZE
        return (inversions + blank_row + 1) % 2 == 0

    def solve(self) -> Optional[str]:
        """Return the moves of the blank that reach the goal.

        Letters are ``l``, ``d``, ``r`` and ``u``. An empty string means the
        board is already solved; None means it is unsolvable or no solution
        was found within the search bound.
        """
        if not self.has_solution():
            return None
        board = list(self.cells)
        path: list[str] = []
        blank = [board.index(0)]

        def search(level: int, previous: int, bound: int) -> bool:
            h = _heuristic(board)
            if h == 0:
                return True
            if level + h > bound:
                return False
            row, col = divmod(blank[0], SIZE)
            for direction, (letter, dr, dc) in enumerate(_MOVES):
                new_row, new_col = row + dr, col + dc
                if not (0 <= new_row < SIZE and 0 <= new_col < SIZE):
                    continue
                if _REVERSE[direction] == previous:
                    continue
                here, there = blank[0], new_row * SIZE + new_col
                board[here], board[there] = board[there], board[here]
                blank[0] = there
                path.append(letter)
                if search(level + 1, direction, bound):
                    return True
                path.pop()
                blank[0] = here
                board[here], board[there] = board[there], board[here]
            return False

        for bound in range(_heuristic(board), BORDER + 1):
            if search(0, -1, bound):
                return "".join(path)
        return None


def parse_board(text: str) -> Puzzle:
    """Read a board of 16 whitespace-separated numbers."""
    tokens = text.split()
    if len(tokens) != CELLS:
        raise ValueError(f"expected {CELLS} numbers, got {len(tokens)}")
    try:
        values = [int(token) for token in tokens]
    except ValueError:
        raise ValueError("the board must contain only integers") from None
    return Puzzle(values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a board and print YES with the moves, or NO."""
    parser = argparse.ArgumentParser(
        prog="puzzle", description="Solve a 4x4 sliding puzzle (0 is the blank)."
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r"),
        default="-",
        help="file with 16 numbers; standard input by default",
    )
    args = parser.parse_args(argv)
    with args.file as handle:
        text = handle.read()
    try:
        puzzle = parse_board(text)
    except ValueError as error:
        print(f"puzzle: {error}", file=sys.stderr)
        return 1
    if puzzle.has_solution():
        print("YES")
        print(puzzle.solve() or "")
    else:
        print("NO")
    return 0