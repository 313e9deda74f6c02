"""Pydantic v2 model for one row of the player ranking."""

from pydantic import BaseModel, Field


class RankingEntry(BaseModel):
    player_id: int
    name: str
    surname: str
    points: int  # can be negative when errors outweigh the rest
    rank: int = Field(ge=1)
