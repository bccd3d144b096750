"""FastAPI dependencies: wire a GameService per request."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.db.database import get_async_db
from src.db.sql_repository import SQLGameRepository
from src.services.game_lookup import BoardGameGeekLookup, GameLookup
from src.services.game_service import GameService


def get_game_lookup() -> GameLookup:
    return BoardGameGeekLookup.from_settings(get_settings())


def get_game_service(
    db: AsyncSession = Depends(get_async_db),
    lookup: GameLookup = Depends(get_game_lookup),
) -> GameService:
    return GameService(SQLGameRepository(db), lookup)
