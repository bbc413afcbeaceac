"""JSON API. Every transition answers with the full (re-rendered) game."""

from uuid import UUID

from fastapi import APIRouter, Response, status

from src.api.dependencies import ServiceDep
from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JumpRequest,
    PlayRequest,
    ToggleOrderRequest,
)

router = APIRouter(prefix="/api/games", tags=["games"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_game(service: ServiceDep) -> GameResponse:
    return service.create_new_game()


@router.get("/{game_id}")
def get_game(game_id: UUID, service: ServiceDep) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.post("/{game_id}/squares/{square}")
def play_square(game_id: UUID, square: int, service: ServiceDep) -> GameResponse:
    """Clicking a taken square (or any square after a win) returns the game unchanged."""
    return service.play(PlayRequest(game_id=game_id, square=square))


@router.post("/{game_id}/moves/{move}")
def jump_to_move(game_id: UUID, move: int, service: ServiceDep) -> GameResponse:
    return service.jump_to(JumpRequest(game_id=game_id, move=move))


@router.post("/{game_id}/toggle-order")
def toggle_order(game_id: UUID, service: ServiceDep) -> GameResponse:
    return service.toggle_order(ToggleOrderRequest(game_id=game_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: UUID, service: ServiceDep) -> Response:
    service.delete_game(DeleteGameRequest(game_id=game_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
