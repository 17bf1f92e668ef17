"""
Persistence logic for the games table.

Every function takes the engine it should use and opens a single session
for the one statement it runs.
"""

import logging
import uuid
from typing import Sequence

from sqlalchemy import Engine
from sqlmodel import Session, select

from app.models.games import Game
from app.schemas.games import GameCreate, GameUpdate

logger = logging.getLogger(__name__)


class InvalidGameIdError(ValueError):
    """Raised when a game id is not a storage id."""


def parse_game_id(game_id: str) -> str:
    """Normalize ``game_id`` to the stored form or raise InvalidGameIdError."""
    try:
        return uuid.UUID(hex=game_id).hex
    except ValueError as e:
        raise InvalidGameIdError(f"Invalid game id: {game_id!r}") from e


def create_game(engine: Engine, data: GameCreate) -> Game:
    """Insert a new game and return the stored row"""
    with Session(engine) as session:
        game = Game(**data.model_dump())
        session.add(game)
        session.commit()
        session.refresh(game)
        logger.info("Created game %s (%s)", game.id, game.title)
        return game


def select_games(engine: Engine) -> Sequence[Game]:
    """Get all games in storage order"""
    with Session(engine) as session:
        return session.exec(select(Game)).all()


def get_game(engine: Engine, game_id: str) -> Game | None:
    """Get a single game by id, None if absent"""
    game_id = parse_game_id(game_id)
    with Session(engine) as session:
        return session.get(Game, game_id)


def update_game(engine: Engine, game_id: str, data: GameUpdate) -> Game | None:
    """Overwrite the fields present in ``data`` and return the updated game"""
    game_id = parse_game_id(game_id)
    with Session(engine) as session:
        game = session.get(Game, game_id)
        if not game:
            return None

        game.sqlmodel_update(data.model_dump(exclude_unset=True))
        session.add(game)
        session.commit()
        session.refresh(game)
        logger.info("Updated game %s", game.id)
        return game


def delete_game(engine: Engine, game_id: str) -> bool:
    """Remove a game, False if there was nothing to remove"""
    game_id = parse_game_id(game_id)
    with Session(engine) as session:
        game = session.get(Game, game_id)
        if not game:
            return False

        session.delete(game)
        session.commit()
        logger.info("Deleted game %s", game_id)
        return True
