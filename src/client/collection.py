"""
Client-side collection state.

CollectionCache holds the displayed list of games and only ever changes through replace(): after any mutation the
whole list is fetched again instead of patching single records. CollectionView owns the cache and hands the cache
plus its refresh() to whoever needs them (edit controllers).
"""

import logging
from typing import Iterable

from src.api.models import GameResponse
from src.client.edit_controller import GameEditController
from src.client.sync_client import GameSyncClient
from src.core.exceptions import SyncError
from src.core.models import GameId

logger = logging.getLogger(__name__)


class CollectionCache:
    """Read-only snapshot of the collection, rebuilt wholesale on every refresh."""

    def __init__(self) -> None:
        self._games: tuple[GameResponse, ...] = ()
        self.replace_count = 0

    @property
    def games(self) -> tuple[GameResponse, ...]:
        return self._games

    def replace(self, games: Iterable[GameResponse]) -> None:
        self._games = tuple(games)
        self.replace_count += 1

    def get(self, game_id: GameId) -> GameResponse | None:
        return next((game for game in self._games if game.id == game_id), None)


class CollectionView:
    """Top-level view state: the collection, the add-game input flag and one edit controller per game."""

    def __init__(self, client: GameSyncClient) -> None:
        self.client = client
        self.cache = CollectionCache()
        # Set when the last submitted name did not resolve ('check the spelling')
        self.name_error = False
        self._mounted = False
        self._controllers: dict[GameId, GameEditController] = {}

    @property
    def games(self) -> tuple[GameResponse, ...]:
        return self.cache.games

    async def mount(self) -> None:
        """Initial population. Fetches until one call has succeeded, then does nothing."""
        if self._mounted:
            return
        await self.refresh()
        self._mounted = True

    async def refresh(self) -> None:
        try:
            games = await self.client.list_games()
        except SyncError as exc:
            logger.error("Failed to refresh the collection: %s", exc)
            raise
        self.cache.replace(games)

    async def add_game(self, name: str) -> GameResponse | None:
        """Submit a name. None (and name_error set) when it did not resolve; the cache is left alone then."""
        try:
            created = await self.client.create_game(name)
        except SyncError as exc:
            logger.error("Failed to add game %r: %s", name, exc)
            raise

        if created is None:
            self.name_error = True
            return None

        self.name_error = False
        await self.refresh()
        return created

    def edit_controller(self, game_id: GameId) -> GameEditController:
        """The (single) edit controller for a displayed game."""
        if game_id not in self._controllers:
            self._controllers[game_id] = GameEditController(
                game_id, self.client, self.cache, self.refresh
            )
        return self._controllers[game_id]
