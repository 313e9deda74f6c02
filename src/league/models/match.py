"""Pydantic v2 model for match records."""

from datetime import date

from pydantic import BaseModel, Field, model_validator
from typing_extensions import Self


class Match(BaseModel):
    """A match between two teams, each optionally linked to its coach."""

    match_id: int | None = Field(default=None, gt=0)
    match_date: date
    team1: str = Field(min_length=1)
    coach1_id: int | None = Field(default=None, gt=0)
    team2: str = Field(min_length=1)
    coach2_id: int | None = Field(default=None, gt=0)
    result: str = Field(min_length=1)
    duration: int = Field(gt=0)  # minutes

    @model_validator(mode="after")
    def check_distinct_teams(self) -> Self:
        if self.team1 == self.team2:
            raise ValueError(f"A team cannot play itself ({self.team1})")
        return self
