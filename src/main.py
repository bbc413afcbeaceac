"""FastAPI application: wires the routers, the error handling and the logging together."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api import pages, routes
from src.core.config import HOST, LOG_FORMAT, LOG_LEVEL, PORT
from src.core.exceptions import (
    GameError,
    GameStateError,
    InvalidRequestError,
    RepositoryError,
)
from src.db.database import init_db

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[GameError], int] = {
    InvalidRequestError: 422,
    GameStateError: 400,
    RepositoryError: 404,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield


async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
    """Translate the custom exceptions into HTTP error responses."""
    status_code = next(
        (
            code
            for error_type, code in ERROR_STATUS_CODES.items()
            if isinstance(exc, error_type)
        ),
        status.HTTP_400_BAD_REQUEST,
    )
    logger.warning(
        "%s %s failed with %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    app = FastAPI(title="Tic-Tac-Toe", lifespan=lifespan)
    app.include_router(routes.router)
    app.include_router(pages.router)
    app.add_exception_handler(GameError, handle_game_error)
    return app


app = create_app()


def run() -> None:
    uvicorn.run("src.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    run()
