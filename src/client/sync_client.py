"""Async HTTP client for the game sync API. Every call returns data or raises SyncError."""

import logging
from typing import Any, Optional

import httpx

from src.api.models import GameResponse
from src.core.exceptions import SyncError
from src.core.models import GameId

logger = logging.getLogger(__name__)

GAMES_PATH = "/api/games"


class GameSyncClient:
    """Thin wrapper around httpx.AsyncClient speaking the /api/games contract."""

    def __init__(
        self,
        base_url: str = "",
        timeout_seconds: float = 5.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout_seconds)

    async def __aenter__(self) -> "GameSyncClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_games(self) -> list[GameResponse]:
        resp = await self._request("GET", GAMES_PATH)
        return [GameResponse.model_validate(game) for game in resp.json()]

    async def create_game(self, name: str) -> GameResponse | None:
        """The created game, or None when the name did not resolve (200 with an empty body)."""
        resp = await self._request("POST", GAMES_PATH, json={"name": name})
        if resp.status_code == httpx.codes.OK and not resp.content:
            return None
        return GameResponse.model_validate(resp.json())

    async def update_fields(self, game_id: GameId, rating: float, notes: str) -> GameResponse:
        """Send rating and notes together, as one pair."""
        resp = await self._request(
            "PATCH", f"{GAMES_PATH}/{game_id}", json={"rating": rating, "notes": notes}
        )
        return GameResponse.model_validate(resp.json())

    async def _request(self, method: str, path: str, json: Any = None) -> httpx.Response:
        try:
            resp = await self._http.request(method, path, json=json)
        except httpx.HTTPError as exc:
            raise SyncError(f"{method} {path} failed: {type(exc).__name__}: {exc}") from exc

        if resp.is_error:
            raise SyncError(
                f"{method} {path} returned {resp.status_code}.",
                status_code=resp.status_code,
                error_code=_error_code(resp),
            )
        return resp


def _error_code(resp: httpx.Response) -> str | None:
    """Server error code from a JSON error body, if there is one."""
    if not resp.headers.get("content-type", "").startswith("application/json"):
        return None
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("error")
    return None
