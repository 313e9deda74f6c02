"""Pydantic v2 models for opinions and the user/opinion listing."""

from pydantic import BaseModel, Field


class Opinion(BaseModel):
    """A user's score and comment on a player's performance in a match."""

    opinion_id: int | None = Field(default=None, gt=0)
    match_id: int = Field(gt=0)
    player_id: int = Field(gt=0)
    user_id: int = Field(gt=0)
    score: int = Field(ge=1, le=10)
    comment: str = ""


class OpinionWithUser(BaseModel):
    """Row of every user left-joined with their opinions.

    Users without opinions appear once with the opinion columns unset.
    """

    user_id: int
    player_id: int | None = None
    score: int | None = None
    comment: str | None = None
