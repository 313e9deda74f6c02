"""Pydantic v2 model for application user records."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """A registered fan, optionally linked to a favourite player."""

    user_id: int | None = Field(default=None, gt=0)
    name: str = Field(min_length=1)
    surname: str = Field(min_length=1)
    email: str | None = None
    password: str = Field(min_length=8)
    player_id: int | None = Field(default=None, gt=0)
