"""
Win detection. Stateless: called with a board, answers with a fresh result.

There is no separate result for a draw. A full board without a line of three is simply "no winner".
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Mark
from src.tictactoe.board import Board

Line = tuple[int, int, int]

# Checked in this order: rows top-to-bottom, columns left-to-right, then both diagonals.
WINNING_LINES: tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class WinResult:
    mark: Mark
    line: Line

    def __contains__(self, index: int) -> bool:
        return index in self.line


def evaluate(board: Board) -> Optional[WinResult]:
    """First line (in WINNING_LINES order) with three equal marks, or None."""
    for line in WINNING_LINES:
        a, b, c = line
        mark = board.mark(a)
        if mark is not None and mark == board.mark(b) == board.mark(c):
            return WinResult(mark, line)
    return None
