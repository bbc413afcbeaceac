"""Unit tests for src/services/game_service.py"""

import logging
from typing import Generator
from uuid import UUID, uuid4

import pytest

from src.core.exceptions import GameError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Mark, Status
from src.services.game_service import (
    DeleteGameRequest,
    GameResponse,
    GameService,
    GetGameRequest,
    JumpRequest,
    PlayRequest,
    ToggleOrderRequest,
)


# --- MOCK DEPENDENCIES ----
class MockRepository:
    """Mock the GameRepository using a dictionary of game models."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}
        self.updates = 0

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        game_id = uuid4()
        self._games[game_id] = game
        return game, game_id

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        return self._games.get(game_id)

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        if game_id not in self._games:
            return None
        self._games[game_id] = game
        self.updates += 1
        return game

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        return self._games.pop(game_id, None)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._games.clear()


@pytest.fixture
def mock_repository() -> Generator[MockRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = MockRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def service(mock_repository: MockRepository) -> GameService:
    return GameService(mock_repository)


def play(service: GameService, game_id: UUID, *squares: int) -> GameResponse:
    """Click the squares in order, return the last response."""
    response = service.get_game_state(GetGameRequest(game_id=game_id))
    for square in squares:
        response = service.play(PlayRequest(game_id=game_id, square=square))
    return response


def board_values(response: GameResponse) -> list[Mark | None]:
    return [square.value for square in response.squares]


# --- SERVICE - CREATE NEW GAME ----
def test_create_a_new_game(
    service: GameService, mock_repository: MockRepository
) -> None:
    """Check that new game is created, persisted in repo, and return has the appropriate information."""
    response = service.create_new_game()

    # Check response structure
    assert isinstance(response, GameResponse)
    assert isinstance(response.game_id, UUID)

    # Check response data
    assert board_values(response) == [None] * 9
    assert response.status == "Next player: X"
    assert response.next_player == Mark.X
    assert response.winner is None
    assert response.current_move == 0
    assert response.is_ascending
    assert [entry.label for entry in response.moves] == ["You are at move #0"]

    # Check persisted data
    stored_game = mock_repository.get_game(response.game_id)
    assert stored_game is not None
    assert stored_game.history_boards == ["---------"]
    assert stored_game.current_move == 0
    assert stored_game.is_ascending
    assert stored_game.status == Status.IN_PROGRESS


def test_create_logs_game_id(
    service: GameService, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="src.services.game_service"):
        response = service.create_new_game()
    assert str(response.game_id) in caplog.text


# --- SERVICE - GET GAME ----
def test_get_existing_game_state(service: GameService) -> None:
    game_id = service.create_new_game().game_id
    response = service.get_game_state(GetGameRequest(game_id=game_id))
    assert response.game_id == game_id
    assert board_values(response) == [None] * 9


def test_attempt_to_find_unknown_game(service: GameService) -> None:
    """Ensure exception is raised when trying to look up a game with an unknown ID."""
    with pytest.raises(GameError):
        _ = service.get_game_state(GetGameRequest(game_id=uuid4()))


# --- SERVICE - PLAY ----
def test_first_click(service: GameService, mock_repository: MockRepository) -> None:
    game_id = service.create_new_game().game_id
    response = service.play(PlayRequest(game_id=game_id, square=4))

    assert response.squares[4].value == Mark.X
    assert response.current_move == 1
    assert response.status == "Next player: O"

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.history_boards == ["---------", "----X----"]
    assert stored_game.current_move == 1


def test_click_on_taken_square_is_ignored(
    service: GameService, mock_repository: MockRepository
) -> None:
    game_id = service.create_new_game().game_id
    play(service, game_id, 0, 1)
    updates_before = mock_repository.updates

    response = service.play(PlayRequest(game_id=game_id, square=0))
    assert board_values(response)[:2] == [Mark.X, Mark.O]
    assert response.current_move == 2
    # nothing to store
    assert mock_repository.updates == updates_before


def test_winner(service: GameService, mock_repository: MockRepository) -> None:
    game_id = service.create_new_game().game_id
    response = play(service, game_id, 0, 3, 1, 4, 2)

    assert response.status == "Winner: X"
    assert response.winner == Mark.X
    assert response.winning_line == [0, 1, 2]
    assert [square.index for square in response.squares if square.is_highlighted] == [
        0,
        1,
        2,
    ]

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.status == Status.WON


@pytest.mark.parametrize("square", [5, 6, 7, 8])
def test_clicks_after_win_are_ignored(service: GameService, square: int) -> None:
    game_id = service.create_new_game().game_id
    play(service, game_id, 0, 3, 1, 4, 2)
    response = service.play(PlayRequest(game_id=game_id, square=square))
    assert response.squares[square].value is None
    assert response.current_move == 5


def test_diagonal_scenario(service: GameService) -> None:
    game_id = service.create_new_game().game_id
    response = play(service, game_id, 0, 4, 8, 2, 6)
    assert response.winner == Mark.X
    assert response.winning_line == [0, 4, 8]


def test_play_unknown_game(service: GameService) -> None:
    with pytest.raises(RepositoryError):
        _ = service.play(PlayRequest(game_id=uuid4(), square=0))


# --- SERVICE - TIME TRAVEL ----
def test_jump_to_start(service: GameService, mock_repository: MockRepository) -> None:
    game_id = service.create_new_game().game_id
    play(service, game_id, 0, 4, 8)

    response = service.jump_to(JumpRequest(game_id=game_id, move=0))
    assert board_values(response) == [None] * 9
    assert response.current_move == 0
    assert response.next_player == Mark.X
    # history still there
    assert len(response.moves) == 4

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.current_move == 0
    assert len(stored_game.history_boards) == 4


def test_play_after_jump_truncates_history(
    service: GameService, mock_repository: MockRepository
) -> None:
    game_id = service.create_new_game().game_id
    play(service, game_id, 0, 4, 8)
    service.jump_to(JumpRequest(game_id=game_id, move=0))

    response = service.play(PlayRequest(game_id=game_id, square=2))
    assert response.current_move == 1
    assert [entry.move for entry in response.moves] == [0, 1]

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.history_boards == ["---------", "--X------"]


def test_jump_outside_history_is_ignored(
    service: GameService, mock_repository: MockRepository
) -> None:
    game_id = service.create_new_game().game_id
    play(service, game_id, 0)
    updates_before = mock_repository.updates

    response = service.jump_to(JumpRequest(game_id=game_id, move=5))
    assert response.current_move == 1
    assert mock_repository.updates == updates_before


# --- SERVICE - ORDER ----
def test_toggle_order(service: GameService, mock_repository: MockRepository) -> None:
    game_id = service.create_new_game().game_id
    ascending = play(service, game_id, 0, 4, 8)

    descending = service.toggle_order(ToggleOrderRequest(game_id=game_id))
    assert not descending.is_ascending
    assert descending.moves == list(reversed(ascending.moves))
    assert descending.squares == ascending.squares
    assert descending.current_move == ascending.current_move

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert not stored_game.is_ascending

    restored = service.toggle_order(ToggleOrderRequest(game_id=game_id))
    assert restored.moves == ascending.moves


# --- SERVICE - DELETE ----
def test_delete_game(service: GameService, mock_repository: MockRepository) -> None:
    game_id = service.create_new_game().game_id
    service.delete_game(DeleteGameRequest(game_id=game_id))
    assert mock_repository.get_game(game_id) is None


def test_delete_unknown_game(service: GameService) -> None:
    with pytest.raises(RepositoryError):
        service.delete_game(DeleteGameRequest(game_id=uuid4()))


def test_play_logs_board(
    service: GameService, caplog: pytest.LogCaptureFixture
) -> None:
    """The board after an accepted click is written to the debug log, one row per line."""
    game_id = service.create_new_game().game_id
    with caplog.at_level(logging.DEBUG, logger="src.services.game_service"):
        play(service, game_id, 0, 4)
    assert "X--\n-O-\n---" in caplog.text
