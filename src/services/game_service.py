"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JumpRequest,
    MoveEntryResponse,
    PlayRequest,
    SquareResponse,
    ToggleOrderRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.tictactoe.game import Game
from src.tictactoe.view import render

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for tic-tac-toe game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """Start a game from an empty board."""
        new_game = Game.new_game()
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, Game.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state (used to (re)draw the page)."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def play(self, request: PlayRequest) -> GameResponse:
        """
        A square got clicked.
        ----
        Clicking a taken square, or any square once there is a winner, does nothing. The response then simply shows the unchanged game.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        player = game.next_mark
        if game.play(request.square):
            self.repo.update_game(request.game_id, game.to_model())
            logger.info(
                "Game %s: %s played square %d (move #%d)",
                request.game_id,
                player,
                request.square,
                game.current_move,
            )
            logger.debug("Game %s board:\n%s", request.game_id, game.live_board)
        else:
            logger.debug(
                "Game %s: ignored click on square %d", request.game_id, request.square
            )
        return self._create_game_response(request.game_id, game)

    def jump_to(self, request: JumpRequest) -> GameResponse:
        """An entry in the move list got clicked."""
        game = Game.from_model(self._fetch_game(request.game_id))
        if game.jump_to(request.move):
            self.repo.update_game(request.game_id, game.to_model())
            logger.info("Game %s: jumped to move #%d", request.game_id, request.move)
        else:
            logger.debug(
                "Game %s: ignored jump to unknown move #%d",
                request.game_id,
                request.move,
            )
        return self._create_game_response(request.game_id, game)

    def toggle_order(self, request: ToggleOrderRequest) -> GameResponse:
        """Flip the display order of the move list."""
        game = Game.from_model(self._fetch_game(request.game_id))
        game.toggle_order()
        self.repo.update_game(request.game_id, game.to_model())
        return self._create_game_response(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the rendered Game into a GameResponse (for game with given ID.)"""
        view = render(game)
        return GameResponse(
            game_id=game_id,
            squares=[
                SquareResponse(
                    index=square.index,
                    value=square.value,
                    is_highlighted=square.is_highlighted,
                )
                for square in view.squares
            ],
            status=view.status,
            winner=view.winner,
            winning_line=list(view.winning_line) if view.winning_line else None,
            next_player=view.next_player,
            moves=[
                MoveEntryResponse(
                    move=item.move, label=item.label, is_current=item.is_current
                )
                for item in view.moves
            ],
            current_move=view.current_move,
            is_ascending=view.is_ascending,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
