"""FastAPI dependencies shared by the routers"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.game_service import GameService


def get_service(db: Annotated[Session, Depends(get_db)]) -> GameService:
    return GameService(SQLGameRepository(db))


ServiceDep = Annotated[GameService, Depends(get_service)]
