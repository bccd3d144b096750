"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from src.core.exceptions import InvalidRequestError
from src.core.models import GameId, GameModel
from src.core.shared_types import RATING_MAX, RATING_MIN, RATING_STEP, is_valid_rating


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Unknown keys are dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# --- REQUEST MODELS ---
class CreateGameRequest(_WireModel):
    name: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        # Blank names are not rejected here: they are a soft failure at the service level.
        return value.strip()


class UpdateGameRequest(_WireModel):
    """Partial update restricted to rating and notes. Anything else in the body is ignored."""

    rating: Optional[float] = None
    notes: Optional[str] = None

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return value
        if not is_valid_rating(value):
            raise InvalidRequestError(
                f"Rating must be between {RATING_MIN} and {RATING_MAX} in steps of {RATING_STEP}, got {value!r}."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(_WireModel):
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

    @classmethod
    def from_model(cls, model: GameModel) -> "GameResponse":
        return cls(
            id=model.id,
            name=model.name,
            description=model.description,
            year_published=model.year_published,
            min_players=model.min_players,
            max_players=model.max_players,
            play_time=model.play_time,
            min_age=model.min_age,
            thumbnail=model.thumbnail,
            image=model.image,
            rating=model.rating,
            notes=model.notes,
        )
