"""Implementation of (Game)Repository using SQLAlchemy (async)"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import StoreError
from src.core.models import FieldUpdate, GameDetails, GameId, GameModel
from src.db.schema import DBGame

logger = logging.getLogger(__name__)


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: AsyncSession) -> None:
        self.db = db_session

    async def list_games(self) -> list[GameModel]:
        """All stored games, in the store's default order."""
        async with self._store_errors("list games"):
            games_db = (await self.db.scalars(select(DBGame))).all()
        return [self._to_model(game_db) for game_db in games_db]

    async def create_game(self, details: GameDetails) -> GameModel:
        """Store new game and return the stored record (incl. its newly created ID)."""
        game_db = DBGame(
            id=uuid4().hex,
            name=details.name,
            description=details.description,
            year_published=details.year_published,
            min_players=details.min_players,
            max_players=details.max_players,
            play_time=details.play_time,
            min_age=details.min_age,
            thumbnail=details.thumbnail,
            image=details.image,
            rating=0.0,
            notes="",
        )
        async with self._store_errors("create game"):
            self.db.add(game_db)
            await self.db.commit()
            await self.db.refresh(game_db)
        return self._to_model(game_db)

    async def update_fields(self, game_id: GameId, update: FieldUpdate) -> GameModel | None:
        """Write rating / notes of an existing record. Nothing else is ever touched."""
        async with self._store_errors("update game"):
            game_db = await self._fetch_game(game_id)
            if not game_db:
                return None
            if update.rating is not None:
                game_db.rating = update.rating
            if update.notes is not None:
                game_db.notes = update.notes
            await self.db.commit()
            await self.db.refresh(game_db)
        return self._to_model(game_db)

    async def _fetch_game(self, game_id: GameId) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return await self.db.scalar(query)

    @asynccontextmanager
    async def _store_errors(self, action: str) -> AsyncIterator[None]:
        """Roll back and re-raise any SQLAlchemy failure as a StoreError."""
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error("Store fault while trying to %s: %s", action, exc)
            await self.db.rollback()
            raise StoreError(f"Failed to {action}.") from exc

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            id=game_db.id,
            name=game_db.name,
            description=game_db.description,
            year_published=game_db.year_published,
            min_players=game_db.min_players,
            max_players=game_db.max_players,
            play_time=game_db.play_time,
            min_age=game_db.min_age,
            thumbnail=game_db.thumbnail,
            image=game_db.image,
            rating=game_db.rating,
            notes=game_db.notes,
        )
