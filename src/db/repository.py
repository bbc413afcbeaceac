"""
Where games live between requests.

A stored game is its GameModel: the board code of every snapshot in the history, the current move, and the display order of the move list.
SQLGameRepository implements this protocol; the service tests use an in-memory dictionary.
"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Store, look up, overwrite and remove tic-tac-toe games by their UUID."""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a game that was just started and hand out its new ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the history, cursor and order of a stored game (None if the ID is unknown)."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        ...
