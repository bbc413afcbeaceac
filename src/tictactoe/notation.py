"""
Text encoding of a board, used to store snapshots of the history.

A board code is 9 characters, read row-major (top-left to bottom-right):
* "X" or "O" for a square holding that mark
* "-" for an empty square

ex) X in the center and O in the top-left corner:
O---X----
"""

from src.core.shared_types import Mark
from src.tictactoe.square import NUM_SQUARES

EMPTY_SQUARE_CODE = "-"
EMPTY_BOARD_CODE = EMPTY_SQUARE_CODE * NUM_SQUARES
VALID_SQUARE_CODES = frozenset([EMPTY_SQUARE_CODE, *(mark.value for mark in Mark)])


def is_valid_board_code(code: str) -> bool:
    """Check if given string is a proper board code."""
    if len(code) != NUM_SQUARES:
        return False
    return all(character in VALID_SQUARE_CODES for character in code)
