"""Orchestration of communication from API router to name lookup and persistence layers (and the reverse direction)."""

import logging

from src.api.models import CreateGameRequest, GameResponse, UpdateGameRequest
from src.core.exceptions import GameNotFoundError
from src.core.models import FieldUpdate, GameId
from src.db.repository import GameRepository
from src.services.game_lookup import GameLookup

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for the game collection."""

    def __init__(self, repository: GameRepository, lookup: GameLookup) -> None:
        self.repo = repository
        self.lookup = lookup

    # -- API routes logic ---
    async def list_games(self) -> list[GameResponse]:
        """The whole collection, as stored."""
        games = await self.repo.list_games()
        return [GameResponse.from_model(game) for game in games]

    async def create_game(self, request: CreateGameRequest) -> GameResponse | None:
        """
        Add a game by name.
        ----
        Returns None when the name does not resolve to a real game (soft failure, no record is created).
        """
        if not request.name:
            return None

        details = await self.lookup.resolve(request.name)
        if details is None:
            return None

        stored_game = await self.repo.create_game(details)
        logger.info("Added %r to the collection (id=%s)", stored_game.name, stored_game.id)
        return GameResponse.from_model(stored_game)

    async def update_fields(self, game_id: GameId, request: UpdateGameRequest) -> GameResponse:
        """Apply rating / notes to a stored game. No other field is ever written."""
        update = FieldUpdate(rating=request.rating, notes=request.notes)
        updated_game = await self.repo.update_fields(game_id, update)
        if updated_game is None:
            raise GameNotFoundError(game_id)
        return GameResponse.from_model(updated_game)
