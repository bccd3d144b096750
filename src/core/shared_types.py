"""
Type definitions used across layers
"""

from enum import StrEnum

RATING_MIN = 0.0
RATING_MAX = 5.0
# Ratings move in half-star increments
RATING_STEP = 0.5


class ErrorCode(StrEnum):
    INVALID_REQUEST = "INVALID_REQUEST"
    STORE_ERROR = "STORE_ERROR"
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def is_valid_rating(value: float) -> bool:
    """True when the value sits on the half-star grid between 0 and 5 (inclusive)."""
    if not RATING_MIN <= value <= RATING_MAX:
        return False
    steps = value / RATING_STEP
    return steps == int(steps)
