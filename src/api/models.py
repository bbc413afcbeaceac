"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Mark
from src.tictactoe.square import NUM_SQUARES


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: UUID


class PlayRequest(BaseModel):
    """A click on one of the squares of the grid."""

    game_id: UUID
    square: int

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: int) -> int:
        if not 0 <= value < NUM_SQUARES:
            raise InvalidRequestError(
                f"Square must be an index from 0 to {NUM_SQUARES - 1}, got {value}."
            )
        return value


class JumpRequest(BaseModel):
    """A click on one of the entries of the move list."""

    game_id: UUID
    move: int

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Move number cannot be negative, got {value}.")
        return value


class ToggleOrderRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class SquareResponse(BaseModel):
    index: int
    value: Optional[Mark]
    is_highlighted: bool


class MoveEntryResponse(BaseModel):
    move: int
    label: str
    is_current: bool


class GameResponse(BaseModel):
    game_id: UUID
    squares: list[SquareResponse]
    status: str
    winner: Optional[Mark]
    winning_line: Optional[list[int]]
    next_player: Mark
    moves: list[MoveEntryResponse]
    current_move: int
    is_ascending: bool
