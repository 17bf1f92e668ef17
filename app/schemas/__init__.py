from app.schemas.games import (
    GameCreate,
    GameUpdate,
    GameResponse,
    MessageResponse,
)

__all__ = [
    "GameCreate",
    "GameUpdate",
    "GameResponse",
    "MessageResponse",
]
