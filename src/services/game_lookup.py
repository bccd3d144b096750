"""
Name resolution / enrichment for new games.

A typed-in name is resolved against BoardGameGeek (XML API 2). When it resolves, the canonical name and the descriptive
fields (year, players, play time, ...) come back as GameDetails. The lookup is best-effort: anything that goes wrong
on the way is logged and reported as 'not resolved'.
"""

import html
import logging
import xml.etree.ElementTree as ET
from typing import Optional, Protocol

import httpx

from src.core.config import Settings
from src.core.models import GameDetails

logger = logging.getLogger(__name__)


class GameLookup(Protocol):
    async def resolve(self, name: str) -> GameDetails | None:
        """Canonical details for the given name, or None if it does not match a real game."""
        ...


class BoardGameGeekLookup:
    """GameLookup backed by the BoardGameGeek XML API."""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "BoardGameGeekLookup":
        return cls(
            base_url=settings.LOOKUP_BASE_URL,
            token=settings.LOOKUP_API_TOKEN,
            timeout_seconds=settings.LOOKUP_TIMEOUT_SECONDS,
        )

    async def resolve(self, name: str) -> GameDetails | None:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, headers=self._headers(), transport=self._transport
            ) as client:
                game_id = await self._search(client, name)
                if game_id is None:
                    logger.info("No exact BoardGameGeek match for %r", name)
                    return None
                return await self._fetch_details(client, game_id)
        except (httpx.HTTPError, ET.ParseError) as exc:
            logger.warning("Lookup for %r failed: %s: %s", name, type(exc).__name__, exc)
            return None

    def _headers(self) -> dict[str, str]:
        if self._token:
            return {"Authorization": f"Bearer {self._token}"}
        return {}

    async def _search(self, client: httpx.AsyncClient, name: str) -> str | None:
        """ID of the first exact board game match."""
        resp = await client.get(
            f"{self._base_url}/search",
            params={"query": name, "type": "boardgame", "exact": 1},
        )
        resp.raise_for_status()
        item = ET.fromstring(resp.text).find("item")
        if item is None:
            return None
        return item.get("id")

    async def _fetch_details(self, client: httpx.AsyncClient, game_id: str) -> GameDetails | None:
        resp = await client.get(f"{self._base_url}/thing", params={"id": game_id})
        resp.raise_for_status()
        item = ET.fromstring(resp.text).find("item")
        if item is None:
            return None
        return parse_thing(item)


def parse_thing(item: ET.Element) -> GameDetails | None:
    """Convert a BGG <item> element (from /thing) into GameDetails."""
    primary = item.find("name[@type='primary']")
    if primary is None or not primary.get("value"):
        return None

    description = item.findtext("description")
    return GameDetails(
        name=primary.get("value", ""),
        # BGG double-escapes entities in descriptions (e.g. '&amp;#10;' for a line break)
        description=html.unescape(description) if description else None,
        year_published=_int_value(item, "yearpublished"),
        min_players=_int_value(item, "minplayers"),
        max_players=_int_value(item, "maxplayers"),
        play_time=_int_value(item, "playingtime"),
        min_age=_int_value(item, "minage"),
        thumbnail=_text(item, "thumbnail"),
        image=_text(item, "image"),
    )


def _int_value(item: ET.Element, tag: str) -> int | None:
    element = item.find(tag)
    if element is None:
        return None
    try:
        return int(element.get("value", ""))
    except ValueError:
        return None


def _text(item: ET.Element, tag: str) -> str | None:
    value = item.findtext(tag)
    return value.strip() if value else None
