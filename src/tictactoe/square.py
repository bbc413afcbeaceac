"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# (rows, columns)
BOARD_DIMENSIONS = (3, 3)
NUM_SQUARES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Row-major index: 0 - 8 get converted to (1,1) - (3,3)"""
        row = index // BOARD_DIMENSIONS[1] + 1
        col = index % BOARD_DIMENSIONS[1] + 1
        return cls(row, col)

    def to_index(self) -> int:
        return (self.row - 1) * BOARD_DIMENSIONS[1] + (self.col - 1)

    def is_within_bounds(self) -> bool:
        return (1 <= self.row <= BOARD_DIMENSIONS[0]) and (
            1 <= self.col <= BOARD_DIMENSIONS[1]
        )

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
