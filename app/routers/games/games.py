from fastapi import APIRouter, HTTPException, status

from app.dependencies import ActiveEngine
from app.logic.games import (
    InvalidGameIdError,
    create_game,
    select_games,
    get_game,
    update_game,
    delete_game,
)
from app.models.games import Game
from app.schemas.games import GameCreate, GameUpdate, GameResponse, MessageResponse

router = APIRouter(
    prefix="/api/games",
    tags=["games"],
    responses={status.HTTP_404_NOT_FOUND: {"description": "Not found"}},
)

INVALID_ID_DETAIL = "Invalid id or server error."


def _to_response(game: Game) -> GameResponse:
    return GameResponse(
        id=game.id,
        title=game.title,
        genre=game.genre,
        platform=game.platform,
        release_year=game.release_year,
        image_url=game.image_url,
        description=game.description,
        created_at=game.created_at,
    )


def _invalid_id() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INVALID_ID_DETAIL,
    )


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
def add_game(engine: ActiveEngine, game_data: GameCreate) -> GameResponse:
    """Add a new game"""
    return _to_response(create_game(engine, game_data))


@router.get("", response_model=list[GameResponse], status_code=status.HTTP_200_OK)
def read_games(engine: ActiveEngine) -> list[GameResponse]:
    """List every stored game"""
    return [_to_response(game) for game in select_games(engine)]


@router.get("/{game_id}", response_model=GameResponse, status_code=status.HTTP_200_OK)
def read_game(engine: ActiveEngine, game_id: str) -> GameResponse:
    try:
        game = get_game(engine, game_id)
    except InvalidGameIdError:
        raise _invalid_id()

    if not game:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Game not found",
        )
    return _to_response(game)


@router.put("/{game_id}", response_model=GameResponse, status_code=status.HTTP_200_OK)
def edit_game(engine: ActiveEngine, game_id: str, game_data: GameUpdate) -> GameResponse:
    """Overwrite the given fields of a game"""
    try:
        game = update_game(engine, game_id, game_data)
    except InvalidGameIdError:
        raise _invalid_id()

    if not game:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Game not found for update",
        )
    return _to_response(game)


@router.delete("/{game_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
def remove_game(engine: ActiveEngine, game_id: str) -> MessageResponse:
    try:
        deleted = delete_game(engine, game_id)
    except InvalidGameIdError:
        raise _invalid_id()

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Game not found for deletion",
        )
    return MessageResponse(message="Game deleted successfully!")
