"""The Game board holds the marks placed on the 9 squares. Boards are immutable: placing a mark creates a new board."""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Mark
from src.tictactoe.notation import EMPTY_SQUARE_CODE, is_valid_board_code
from src.tictactoe.square import NUM_SQUARES

Cell = Optional[Mark]


@dataclass(frozen=True)
class Board:
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != NUM_SQUARES:
            raise InvalidBoardError(
                f"A board has {NUM_SQUARES} squares, got {len(self.cells)}."
            )

    @classmethod
    def empty(cls) -> Self:
        return cls((None,) * NUM_SQUARES)

    @classmethod
    def from_code(cls, code: str) -> Self:
        """Construct a board from its board code, ex. 'XX-OO----'."""
        if not is_valid_board_code(code):
            raise InvalidBoardError(f"Cannot interpret {code!r} as a board.")
        return cls(
            tuple(
                None if character == EMPTY_SQUARE_CODE else Mark(character)
                for character in code
            )
        )

    def to_code(self) -> str:
        return "".join(
            EMPTY_SQUARE_CODE if cell is None else cell.value for cell in self.cells
        )

    def mark(self, index: int) -> Cell:
        return self.cells[index]

    def is_empty_square(self, index: int) -> bool:
        return self.cells[index] is None

    def place_mark(self, index: int, mark: Mark) -> Self:
        """Copy of this board with the mark placed on the square."""
        cells = list(self.cells)
        cells[index] = mark
        return type(self)(tuple(cells))

    def changed_square(self, other: Self) -> Optional[int]:
        """Index of the first square that differs between the two boards (None if they are identical)."""
        return next(
            (
                index
                for index, (before, after) in enumerate(zip(self.cells, other.cells))
                if before != after
            ),
            None,
        )

    def __str__(self) -> str:
        code = self.to_code()
        return "\n".join(code[start : start + 3] for start in range(0, NUM_SQUARES, 3))
