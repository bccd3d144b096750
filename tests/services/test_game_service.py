"""Unit tests for src/services/game_service.py"""

from typing import Generator

import pytest

from src.core.exceptions import GameNotFoundError, StoreError
from src.core.models import GameModel
from src.services.game_service import (
    CreateGameRequest,
    GameResponse,
    GameService,
    UpdateGameRequest,
)

from tests.fakes import AZUL, CATAN, BrokenRepository, FakeLookup, MockRepository


@pytest.fixture
def mock_repository() -> Generator[MockRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = MockRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def service(mock_repository: MockRepository, fake_lookup: FakeLookup) -> GameService:
    return GameService(mock_repository, fake_lookup)


# --- SERVICE - LIST ----
@pytest.mark.asyncio
async def test_list_empty_collection(service: GameService) -> None:
    assert await service.list_games() == []


@pytest.mark.asyncio
async def test_list_returns_every_game(service: GameService) -> None:
    await service.create_game(CreateGameRequest(name="Catan"))
    await service.create_game(CreateGameRequest(name="Azul"))

    games = await service.list_games()
    assert all(isinstance(game, GameResponse) for game in games)
    assert sorted(game.name for game in games) == ["Azul", "Catan"]


# --- SERVICE - CREATE ----
@pytest.mark.asyncio
async def test_create_resolvable_game(service: GameService, mock_repository: MockRepository) -> None:
    """A resolvable name is stored with the looked-up details and a generated ID."""
    response = await service.create_game(CreateGameRequest(name="catan"))

    assert response is not None
    assert response.id
    # canonical name from the lookup replaces what was typed
    assert response.name == "Catan"
    assert response.year_published == CATAN.year_published
    assert response.rating == 0
    assert response.notes == ""

    assert [stored.name for stored in await mock_repository.list_games()] == ["Catan"]


@pytest.mark.asyncio
async def test_create_unresolvable_game(
    service: GameService, mock_repository: MockRepository, fake_lookup: FakeLookup
) -> None:
    """Unknown name: soft failure, nothing stored."""
    response = await service.create_game(CreateGameRequest(name="Nonexistent Game XYZ"))
    assert response is None
    assert fake_lookup.calls == ["Nonexistent Game XYZ"]
    assert await mock_repository.list_games() == []


@pytest.mark.parametrize("blank_name", ["", "   "])
@pytest.mark.asyncio
async def test_create_blank_name_skips_lookup(
    service: GameService, fake_lookup: FakeLookup, blank_name: str
) -> None:
    assert await service.create_game(CreateGameRequest(name=blank_name)) is None
    assert fake_lookup.calls == []


@pytest.mark.asyncio
async def test_create_is_not_idempotent(service: GameService) -> None:
    first = await service.create_game(CreateGameRequest(name="Azul"))
    second = await service.create_game(CreateGameRequest(name="Azul"))
    assert first is not None and second is not None
    assert first.id != second.id
    assert len(await service.list_games()) == 2


# --- SERVICE - UPDATE FIELDS ----
@pytest.mark.asyncio
async def test_update_fields_scenario(service: GameService, mock_repository: MockRepository) -> None:
    """Stored Catan at rating 0, commit 4.5 / 'fun', and the next list shows exactly that."""
    mock_repository.seed(GameModel(id="g1", name="Catan", rating=0, notes=""))

    response = await service.update_fields("g1", UpdateGameRequest(rating=4.5, notes="fun"))
    assert response.rating == 4.5
    assert response.notes == "fun"

    [game] = await service.list_games()
    assert game == GameResponse(id="g1", name="Catan", rating=4.5, notes="fun")


@pytest.mark.asyncio
async def test_update_ignores_extra_fields(service: GameService, mock_repository: MockRepository) -> None:
    """Keys other than rating / notes never make it past the request model."""
    mock_repository.seed(GameModel(id="g1", **vars(AZUL)))

    request = UpdateGameRequest.model_validate(
        {"rating": 3, "notes": "pretty tiles", "name": "Hacked", "minPlayers": 99, "id": "other"}
    )
    response = await service.update_fields("g1", request)

    assert response.id == "g1"
    assert response.name == "Azul"
    assert response.min_players == AZUL.min_players
    assert response.rating == 3
    assert response.notes == "pretty tiles"


@pytest.mark.asyncio
async def test_update_unknown_game(service: GameService) -> None:
    with pytest.raises(GameNotFoundError):
        await service.update_fields("missing", UpdateGameRequest(rating=1, notes=""))


# --- SERVICE - STORE FAULTS ----
@pytest.mark.asyncio
async def test_store_faults_propagate(fake_lookup: FakeLookup) -> None:
    """The service does not retry or swallow store faults."""
    service = GameService(BrokenRepository(), fake_lookup)

    with pytest.raises(StoreError):
        await service.list_games()
    with pytest.raises(StoreError):
        await service.create_game(CreateGameRequest(name="Catan"))
    with pytest.raises(StoreError):
        await service.update_fields("g1", UpdateGameRequest(rating=1, notes=""))


@pytest.mark.asyncio
async def test_unresolvable_name_never_touches_store(fake_lookup: FakeLookup) -> None:
    """Soft failure short-circuits before the store."""
    service = GameService(BrokenRepository(), fake_lookup)
    assert await service.create_game(CreateGameRequest(name="Nonexistent Game XYZ")) is None
