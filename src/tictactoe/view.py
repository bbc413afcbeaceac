"""
Render-ready description of a Game. Whatever draws the game (HTML page, JSON client) only needs what is in here.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Mark
from src.tictactoe.evaluator import Line
from src.tictactoe.game import Game


@dataclass(frozen=True)
class SquareView:
    index: int
    value: Optional[Mark]
    is_highlighted: bool


@dataclass(frozen=True)
class MoveListItem:
    move: int
    label: str
    is_current: bool


@dataclass(frozen=True)
class GameView:
    squares: list[SquareView]
    status: str
    winner: Optional[Mark]
    winning_line: Optional[Line]
    next_player: Mark
    moves: list[MoveListItem]
    current_move: int
    is_ascending: bool


def render(game: Game) -> GameView:
    winner = game.winner
    board = game.live_board

    squares = [
        SquareView(
            index=index,
            value=board.mark(index),
            is_highlighted=winner is not None and index in winner,
        )
        for index in range(len(board.cells))
    ]

    moves = [
        MoveListItem(
            move=move,
            label=game.describe_move(move),
            is_current=move == game.current_move,
        )
        for move in range(len(game.history))
    ]
    if not game.is_ascending:
        moves.reverse()

    return GameView(
        squares=squares,
        status=game.status_text,
        winner=winner.mark if winner else None,
        winning_line=winner.line if winner else None,
        next_player=game.next_mark,
        moves=moves,
        current_move=game.current_move,
        is_ascending=game.is_ascending,
    )
