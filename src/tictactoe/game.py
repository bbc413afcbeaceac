"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns the history of board snapshots and the cursor (current_move) pointing at the live board.
Everything else (whose turn it is, the winner, the status text) is recomputed from the live board when asked for.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError, InvalidBoardError
from src.core.models import GameModel
from src.core.shared_types import Mark, Status
from src.tictactoe.board import Board
from src.tictactoe.evaluator import WinResult, evaluate
from src.tictactoe.square import Square


@dataclass(frozen=True)
class MoveRecord:
    """Snapshot of the board after a move, plus the square that move was played on (None for the game start)."""

    board: Board
    square: Optional[Square] = None

    @property
    def row(self) -> Optional[int]:
        return self.square.row if self.square else None

    @property
    def col(self) -> Optional[int]:
        return self.square.col if self.square else None


def mark_for_move(move: int) -> Mark:
    """X plays the odd numbered moves (1, 3, ...), O the even ones."""
    return Mark.X if move % 2 == 1 else Mark.O


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    history: list[MoveRecord] = field(
        default_factory=lambda: [MoveRecord(Board.empty())]
    )
    current_move: int = 0
    is_ascending: bool = True

    @classmethod
    def new_game(cls) -> Self:
        return cls()

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        if not model.history_boards:
            raise GameStateError("History must at least contain the game start.")

        try:
            boards = [Board.from_code(code) for code in model.history_boards]
        except InvalidBoardError as e:
            raise GameStateError(f"Invalid board in history: {e}") from e

        if boards[0] != Board.empty():
            raise GameStateError(
                f"Game must start from an empty board, got {model.history_boards[0]!r}."
            )

        history = [MoveRecord(boards[0])]
        for move, (before, after) in enumerate(zip(boards, boards[1:]), start=1):
            history.append(MoveRecord(after, cls._played_square(move, before, after)))

        if not 0 <= model.current_move < len(history):
            raise GameStateError(
                f"Current move {model.current_move} outside of history (0 - {len(history) - 1})."
            )

        return cls(history, model.current_move, model.is_ascending)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            history_boards=[record.board.to_code() for record in self.history],
            current_move=self.current_move,
            is_ascending=self.is_ascending,
            status=self.status.value,
        )

    # --- Derived values (recomputed every time) ---
    @property
    def live_board(self) -> Board:
        return self.history[self.current_move].board

    @property
    def next_mark(self) -> Mark:
        return mark_for_move(self.current_move + 1)

    @property
    def winner(self) -> Optional[WinResult]:
        return evaluate(self.live_board)

    @property
    def status(self) -> Status:
        return Status.WON if self.winner else Status.IN_PROGRESS

    @property
    def status_text(self) -> str:
        winner = self.winner
        if winner:
            return f"Winner: {winner.mark}"
        return f"Next player: {self.next_mark}"

    def describe_move(self, move: int) -> str:
        """Label of an entry in the move list."""
        if move == self.current_move:
            return f"You are at move #{move}"
        if move == 0:
            return "Go to game start"
        return f"Go to move #{move} {self.history[move].square}"

    # --- Transitions ---
    def play(self, index: int) -> bool:
        """
        Place the next mark on the square with the given index.
        -----

        Ignored (returns False, nothing changes) when:
        * the live board already has a winner
        * the index is not a square on the board
        * the square is already taken

        Otherwise any "future" moves (left over after jumping back in time) are dropped before the new move is recorded.
        """
        square = Square.from_index(index)
        if self.winner or not square.is_within_bounds():
            return False
        if not self.live_board.is_empty_square(square.to_index()):
            return False

        next_board = self.live_board.place_mark(
            square.to_index(), self.next_mark
        )
        self.history = [
            *self.history[: self.current_move + 1],
            MoveRecord(next_board, square),
        ]
        self.current_move = len(self.history) - 1
        return True

    def jump_to(self, move: int) -> bool:
        """Time travel: make an earlier (or later) recorded move the live one. History is left as is."""
        if not 0 <= move < len(self.history):
            return False
        self.current_move = move
        return True

    def toggle_order(self) -> None:
        """Only changes how the move list gets displayed."""
        self.is_ascending = not self.is_ascending

    # -- PRIVATE HELPERS ---
    @staticmethod
    def _played_square(move: int, before: Board, after: Board) -> Square:
        """Recover the square of a move from the two snapshots around it, checking it was a legal move."""
        index = before.changed_square(after)
        if index is None:
            raise GameStateError(f"Move #{move} did not change the board.")

        differences = sum(1 for a, b in zip(before.cells, after.cells) if a != b)
        if differences != 1:
            raise GameStateError(
                f"Move #{move} changed {differences} squares. Only one mark can be placed per move."
            )

        expected_mark = mark_for_move(move)
        if not before.is_empty_square(index) or after.mark(index) != expected_mark:
            raise GameStateError(
                f"Move #{move} should place {expected_mark} on an empty square."
            )

        if evaluate(before):
            raise GameStateError(f"Move #{move} was played after the game was won.")

        return Square.from_index(index)
