"""
Per-game edit state machine for rating and notes.

VIEWING --begin_edit()--> EDITING --save() / submit_notes("Enter")--> VIEWING

While EDITING, stage_rating() / stage_notes() only touch the local staged copy. save() sends both values as a pair;
on success the controller goes back to VIEWING and the whole collection is refreshed, so what is displayed afterwards
is what the server stored. On failure nothing changes locally: still EDITING, staged values kept, no refresh.
If the commit went through but the refresh after it failed, save() still returns the stored record and `stale` is
set until a later save() gets its refresh through.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Awaitable, Callable

from src.api.models import GameResponse
from src.core.exceptions import EditStateError, InvalidRequestError, SyncError
from src.core.models import GameId
from src.core.shared_types import is_valid_rating

if TYPE_CHECKING:
    from src.client.collection import CollectionCache
    from src.client.sync_client import GameSyncClient

logger = logging.getLogger(__name__)

SUBMIT_KEY = "Enter"


class EditMode(StrEnum):
    VIEWING = "viewing"
    EDITING = "editing"


@dataclass
class StagedEdit:
    rating: float
    notes: str


class GameEditController:
    def __init__(
        self,
        game_id: GameId,
        client: GameSyncClient,
        cache: CollectionCache,
        refresh: Callable[[], Awaitable[None]],
    ) -> None:
        self.game_id = game_id
        self._client = client
        self._cache = cache
        self._refresh = refresh
        self._mode = EditMode.VIEWING
        self._staged: StagedEdit | None = None
        self._committing = False
        # Saved, but the cache could not be refreshed afterwards
        self.stale = False

    @property
    def mode(self) -> EditMode:
        return self._mode

    @property
    def staged(self) -> StagedEdit | None:
        return self._staged

    @property
    def record(self) -> GameResponse:
        """The game as last loaded into the cache."""
        game = self._cache.get(self.game_id)
        if game is None:
            raise EditStateError(f"Game with game_id={self.game_id!r} is not in the collection.")
        return game

    @property
    def rating(self) -> float:
        if self._staged is not None:
            return self._staged.rating
        return self.record.rating

    @property
    def notes(self) -> str:
        if self._staged is not None:
            return self._staged.notes
        return self.record.notes

    # -- Transitions --
    def begin_edit(self) -> None:
        """'Update' action: seed the staged copy from the cache."""
        if self._mode is not EditMode.VIEWING:
            raise EditStateError("Already editing this game.")
        game = self.record
        self._staged = StagedEdit(rating=game.rating, notes=game.notes)
        self._mode = EditMode.EDITING

    def stage_rating(self, rating: float) -> None:
        staged = self._require_staged()
        if not is_valid_rating(rating):
            raise InvalidRequestError(f"Invalid rating: {rating!r}")
        staged.rating = rating

    def stage_notes(self, notes: str) -> None:
        self._require_staged().notes = notes

    async def save(self) -> GameResponse:
        """'Save' action: commit the staged pair, then refresh the collection."""
        staged = self._require_staged()
        if self._committing:
            raise EditStateError("A save for this game is already in flight.")

        self._committing = True
        try:
            updated = await self._client.update_fields(self.game_id, staged.rating, staged.notes)
        except SyncError as exc:
            logger.error("Failed to save rating/notes for game %s: %s", self.game_id, exc)
            raise
        finally:
            self._committing = False

        self._staged = None
        self._mode = EditMode.VIEWING
        try:
            await self._refresh()
        except SyncError as exc:
            logger.warning(
                "Saved rating/notes for game %s, but the collection refresh failed: %s", self.game_id, exc
            )
            self.stale = True
        else:
            self.stale = False
        return updated

    async def submit_notes(self, key: str) -> GameResponse | None:
        """Key press in the notes field. 'Enter' commits, anything else is ignored."""
        if key != SUBMIT_KEY:
            return None
        return await self.save()

    def _require_staged(self) -> StagedEdit:
        if self._mode is not EditMode.EDITING or self._staged is None:
            raise EditStateError("Not editing this game. Call begin_edit() first.")
        return self._staged
