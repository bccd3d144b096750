"""Custom exceptions shared by the server and the client layers."""

from typing import Any, Optional

from src.core.shared_types import ErrorCode


class GameCollectionError(Exception):
    """Base exception. Carries the error code and HTTP status used for the JSON error body."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    http_status: int = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# --- Request validation ---
class InvalidRequestError(GameCollectionError):
    code = ErrorCode.INVALID_REQUEST
    http_status = 422


# --- Persistence ---
class RepositoryError(GameCollectionError):
    """Anything that went wrong on the way to / from the store."""

    code = ErrorCode.STORE_ERROR
    http_status = 500


class StoreError(RepositoryError):
    """The store itself failed (unreachable, write rejected, ...)."""


class GameNotFoundError(RepositoryError):
    """
    No record for the given ID.

    NOTE still reported as a 500 on the wire; clients can tell it apart by its error code.
    """

    code = ErrorCode.GAME_NOT_FOUND

    def __init__(self, game_id: str) -> None:
        super().__init__(f"Game with {game_id=} not found.", {"game_id": game_id})


# --- Client side ---
class SyncError(GameCollectionError):
    """A call to the sync API failed: either the transport broke or the server answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ) -> None:
        super().__init__(message, {"status_code": status_code, "error_code": error_code})
        self.status_code = status_code
        self.error_code = error_code


class EditStateError(GameCollectionError):
    """An edit-controller transition was requested from the wrong state."""
