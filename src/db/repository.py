"""Protocol repository (SQLAlchemy today, a document store would fit the same contract)"""

from typing import Protocol

from src.core.models import FieldUpdate, GameDetails, GameId, GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    async def list_games(self) -> list[GameModel]:
        """All stored games, in the store's default order."""
        ...

    async def create_game(self, details: GameDetails) -> GameModel:
        """Store new game and return the stored record (incl. its newly created ID)."""
        ...

    async def update_fields(self, game_id: GameId, update: FieldUpdate) -> GameModel | None:
        """Write rating / notes of an existing record. None if the record does not exist."""
        ...
