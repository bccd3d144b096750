"""HTTP surface for the game collection: list, create, update rating / notes."""

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_game_service
from src.api.models import CreateGameRequest, GameResponse, UpdateGameRequest
from src.core.models import GameId
from src.services.game_service import GameService

router = APIRouter(prefix="/api/games", tags=["games"])


@router.get("", response_model=list[GameResponse])
async def list_games(service: GameService = Depends(get_game_service)):
    return await service.list_games()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=GameResponse,
    responses={200: {"description": "Name did not resolve to a game. Empty body."}},
)
async def create_game(
    request: CreateGameRequest, service: GameService = Depends(get_game_service)
):
    created = await service.create_game(request)
    if created is None:
        return Response(status_code=status.HTTP_200_OK)
    return created


@router.patch("/{game_id}", response_model=GameResponse)
async def update_game(
    game_id: GameId,
    request: UpdateGameRequest,
    service: GameService = Depends(get_game_service),
):
    return await service.update_fields(game_id, request)
