"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and the db / lookup layers (lower) use the models defined here to send to / receive from the Service.
(Decouples the ORM rows and the request / response schemas from the information needed to cross boundaries)
"""

from dataclasses import dataclass
from typing import Optional

GameId = str


@dataclass
class GameDetails:
    """Descriptive snapshot of a game as supplied by the name lookup. Read-only once stored."""

    name: str
    description: Optional[str] = None
    year_published: Optional[int] = None
    min_players: Optional[int] = None
    max_players: Optional[int] = None
    play_time: Optional[int] = None
    min_age: Optional[int] = None
    thumbnail: Optional[str] = None
    image: Optional[str] = None


@dataclass
class GameModel:
    """Transport-safe representation of a stored game record."""

    id: GameId
    name: str
    description: Optional[str] = None
    year_published: Optional[int] = None
    min_players: Optional[int] = None
    max_players: Optional[int] = None
    play_time: Optional[int] = None
    min_age: Optional[int] = None
    thumbnail: Optional[str] = None
    image: Optional[str] = None
    rating: float = 0.0
    notes: str = ""


@dataclass
class FieldUpdate:
    """The only fields a stored record accepts after creation. None means 'leave as is'."""

    rating: Optional[float] = None
    notes: Optional[str] = None
