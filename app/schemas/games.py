import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class GameSchema(BaseModel):
    """camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Request schemas
class GameCreate(GameSchema):
    title: str = Field(..., min_length=1, max_length=255, description="Game title")
    genre: Optional[str] = Field(default=None, max_length=100)
    platform: Optional[str] = Field(default=None, max_length=100)
    release_year: Optional[int] = Field(default=None, ge=0, le=9999)
    image_url: Optional[str] = Field(default=None, description="URL of the cover image")
    description: Optional[str] = None


class GameUpdate(GameSchema):
    """Partial update. Only the fields present in the body are written."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    genre: Optional[str] = Field(default=None, max_length=100)
    platform: Optional[str] = Field(default=None, max_length=100)
    release_year: Optional[int] = Field(default=None, ge=0, le=9999)
    image_url: Optional[str] = None
    description: Optional[str] = None

    @field_validator('title')
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError('title cannot be cleared')
        return v


# Response schemas
class GameResponse(GameSchema):
    id: str
    title: str
    genre: Optional[str] = None
    platform: Optional[str] = None
    release_year: Optional[int] = None
    image_url: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime.datetime


class MessageResponse(BaseModel):
    message: str
