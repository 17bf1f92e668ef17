import datetime
import uuid
from typing import Optional

from sqlmodel import SQLModel, Field


def new_game_id() -> str:
    return uuid.uuid4().hex


class GameBase(SQLModel):
    """Base game model"""
    title: str = Field(min_length=1, max_length=255)
    genre: Optional[str] = Field(default=None, max_length=100)
    platform: Optional[str] = Field(default=None, max_length=100)
    release_year: Optional[int] = None
    image_url: Optional[str] = None
    description: Optional[str] = None


class Game(GameBase, table=True):
    """Games table model"""
    __tablename__ = "games"
    id: str = Field(default_factory=new_game_id, primary_key=True, max_length=32)
    created_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc)
    )
