"""
Browser view of the game. Plain HTML forms: every click is a POST that applies the transition and redirects back to the page.
"""

from pathlib import Path
from uuid import UUID

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from src.api.dependencies import ServiceDep
from src.api.models import GetGameRequest, JumpRequest, PlayRequest, ToggleOrderRequest

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

router = APIRouter(include_in_schema=False)


def _back_to_game(game_id: UUID) -> RedirectResponse:
    return RedirectResponse(
        url=f"/games/{game_id}", status_code=status.HTTP_303_SEE_OTHER
    )


@router.get("/", response_class=HTMLResponse)
def start_page(request: Request) -> HTMLResponse:
    """Only offers the button. Games get created by the POST below, so visiting (or prefetching) this page stores nothing."""
    return templates.TemplateResponse(request, "index.html", {})


@router.post("/games")
def new_game(service: ServiceDep) -> RedirectResponse:
    game = service.create_new_game()
    return _back_to_game(game.game_id)


@router.get("/games/{game_id}", response_class=HTMLResponse)
def game_page(request: Request, game_id: UUID, service: ServiceDep) -> HTMLResponse:
    game = service.get_game_state(GetGameRequest(game_id=game_id))
    return templates.TemplateResponse(request, "game.html", {"game": game})


@router.post("/games/{game_id}/squares/{square}")
def click_square(game_id: UUID, square: int, service: ServiceDep) -> RedirectResponse:
    service.play(PlayRequest(game_id=game_id, square=square))
    return _back_to_game(game_id)


@router.post("/games/{game_id}/moves/{move}")
def click_move(game_id: UUID, move: int, service: ServiceDep) -> RedirectResponse:
    service.jump_to(JumpRequest(game_id=game_id, move=move))
    return _back_to_game(game_id)


@router.post("/games/{game_id}/toggle-order")
def click_toggle_order(game_id: UUID, service: ServiceDep) -> RedirectResponse:
    service.toggle_order(ToggleOrderRequest(game_id=game_id))
    return _back_to_game(game_id)
