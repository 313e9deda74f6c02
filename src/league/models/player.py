"""Pydantic v2 models for player records and the player/coach listing."""

from pydantic import BaseModel, Field

from .enums import Position


class Player(BaseModel):
    """A league player.

    Age and jersey ranges mirror the CHECK constraints on the players table,
    so an out-of-range record is rejected before it reaches the database.
    """

    player_id: int | None = Field(default=None, gt=0)
    name: str = Field(min_length=1)
    surname: str = Field(min_length=1)
    position: Position
    nationality: str | None = None
    age: int = Field(ge=16, le=50)
    jersey: int = Field(ge=1, le=99)
    team_name: str = Field(min_length=1)
    coach_id: int | None = Field(default=None, gt=0)


class PlayerWithCoach(BaseModel):
    """Row of the players joined with their coach."""

    player_id: int
    name: str
    coach_id: int
    team_name: str
